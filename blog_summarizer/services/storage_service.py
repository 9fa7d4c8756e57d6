import asyncio
import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from blog_summarizer.models.summary import Summary
from blog_summarizer.services.minio_service import MinIOService, minio_service

logger = logging.getLogger(__name__)

FULL_TEXT_NOT_FOUND = "Full text not found"

class StorageService:
    """Summary rows go to the database, raw page text to MinIO."""

    def __init__(self, documents: MinIOService):
        self.documents = documents

    async def _save_text(self, url: str, text: Optional[str]) -> Optional[str]:
        if not text:
            return None
        try:
            return await asyncio.to_thread(self.documents.upload_text, url, text)
        except Exception:
            logger.exception("Failed to store full text for %s", url)
            return None

    async def store_result(
        self,
        db: AsyncSession,
        url: str,
        summary: str,
        urdu: Optional[str] = None,
        sentiment: Optional[dict] = None,
        text: Optional[str] = None,
    ) -> Summary:
        sentiment = sentiment or {}
        text_object = await self._save_text(url, text)
        row = Summary(
            url=url,
            summary=summary,
            urdu_translation=urdu,
            sentiment_score=sentiment.get("score") or 0,
            sentiment_classification=sentiment.get("classification") or "neutral",
            text_object=text_object,
        )
        db.add(row)
        await db.commit()
        await db.refresh(row)
        return row

    async def _load_text(self, text_object: Optional[str]) -> str:
        if not text_object:
            return FULL_TEXT_NOT_FOUND
        try:
            text = await asyncio.to_thread(self.documents.download_text, text_object)
        except Exception:
            logger.exception("Failed to load full text %s", text_object)
            return FULL_TEXT_NOT_FOUND
        return text or FULL_TEXT_NOT_FOUND

    async def list_history(self, db: AsyncSession) -> List[dict]:
        result = await db.execute(select(Summary).order_by(Summary.created_at.desc(), Summary.id.desc()))
        rows = result.scalars().all()
        full_texts = await asyncio.gather(*(self._load_text(row.text_object) for row in rows))
        return [
            {
                "url": row.url,
                "summary": row.summary,
                "urdu_translation": row.urdu_translation,
                "sentiment_score": row.sentiment_score,
                "sentiment_classification": row.sentiment_classification,
                "created_at": row.created_at,
                "full_text": full_text,
            }
            for row, full_text in zip(rows, full_texts)
        ]

storage_service = StorageService(minio_service)
