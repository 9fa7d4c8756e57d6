from fastapi import APIRouter, HTTPException
from blog_summarizer.schemas.summary import TranslateRequest, TranslateResponse
from blog_summarizer.services.llm_service import LLMNotConfiguredError, llm_service
from blog_summarizer.services.translation_service import translation_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/translate", tags=["Translation"])

@router.post("", response_model=TranslateResponse)
async def translate_summary(request: TranslateRequest):
    if not request.summary:
        raise HTTPException(status_code=400, detail="No summary provided.")

    try:
        urdu = translation_service.translate_to_urdu(request.summary)
    except Exception:
        logger.exception("Dictionary translation failed")
        raise HTTPException(status_code=500, detail="Failed to translate.")

    return {"urdu": urdu}

@router.post("/llm", response_model=TranslateResponse)
async def translate_summary_llm(request: TranslateRequest):
    if not request.summary:
        raise HTTPException(status_code=400, detail="No summary provided.")

    try:
        urdu = await llm_service.translate_to_urdu(request.summary)
    except LLMNotConfiguredError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception:
        logger.exception("LLM translation error")
        raise HTTPException(status_code=500, detail="Failed to translate with LLM.")

    return {"urdu": urdu}
