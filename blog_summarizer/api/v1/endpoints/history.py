from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from blog_summarizer.core.database import get_db
from blog_summarizer.schemas.summary import StoreRequest, HistoryResponse
from blog_summarizer.services.storage_service import storage_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["History"])

@router.post("/store", response_model=dict)
async def store(request: StoreRequest, db: AsyncSession = Depends(get_db)):
    if not request.url or not request.summary:
        raise HTTPException(status_code=400, detail="Missing required fields.")

    try:
        await storage_service.store_result(
            db,
            url=request.url,
            summary=request.summary,
            urdu=request.urdu,
            sentiment=request.sentiment,
            text=request.text,
        )
    except Exception:
        logger.exception("Storage error")
        raise HTTPException(status_code=500, detail="Failed to store data.")

    return {"success": True, "message": "Data stored successfully"}

@router.get("/history", response_model=HistoryResponse)
async def history(db: AsyncSession = Depends(get_db)):
    try:
        items = await storage_service.list_history(db)
    except Exception:
        logger.exception("History retrieval error")
        raise HTTPException(status_code=500, detail="Failed to retrieve history.")

    return {"history": items}
