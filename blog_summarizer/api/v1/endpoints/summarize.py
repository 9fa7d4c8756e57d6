from fastapi import APIRouter, HTTPException
from blog_summarizer.schemas.summary import SummarizeRequest, SummarizeResponse
from blog_summarizer.services.llm_service import LLMNotConfiguredError, llm_service
from blog_summarizer.services.summarization_service import summarization_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/summarize", tags=["Summarization"])

@router.post("", response_model=SummarizeResponse)
async def summarize_text(request: SummarizeRequest):
    if not request.text:
        raise HTTPException(status_code=400, detail="No text provided.")

    try:
        summary = summarization_service.extractive_summary(request.text)
    except Exception:
        logger.exception("Extractive summarization failed")
        raise HTTPException(status_code=500, detail="Failed to generate summary.")

    return {"summary": summary}

@router.post("/llm", response_model=SummarizeResponse)
async def summarize_text_llm(request: SummarizeRequest):
    if not request.text:
        raise HTTPException(status_code=400, detail="No text provided.")

    try:
        summary = await llm_service.summarize(request.text)
    except LLMNotConfiguredError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception:
        logger.exception("LLM summarization error")
        raise HTTPException(status_code=500, detail="Failed to generate summary with LLM.")

    return {"summary": summary}
