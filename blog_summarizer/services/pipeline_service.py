import asyncio
import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from blog_summarizer.services.llm_service import LLMService, llm_service
from blog_summarizer.services.scraper_service import ScraperService, scraper_service
from blog_summarizer.services.sentiment_service import SentimentService, sentiment_service
from blog_summarizer.services.storage_service import StorageService, storage_service
from blog_summarizer.services.summarization_service import summarize
from blog_summarizer.services.translation_service import TranslationService, translation_service

logger = logging.getLogger(__name__)

SUMMARY_FAILED = "Failed to generate summary"
TRANSLATION_FAILED = "Translation failed"
NEUTRAL_SENTIMENT = {"score": 0, "classification": "neutral"}

class PipelineService:
    """Scrape, summarize, translate, score and store a batch of pages."""

    def __init__(
        self,
        scraper: ScraperService,
        llm: LLMService,
        translator: TranslationService,
        sentiment: SentimentService,
        storage: StorageService,
    ):
        self.scraper = scraper
        self.llm = llm
        self.translator = translator
        self.sentiment = sentiment
        self.storage = storage

    async def _summarize(self, text: str, use_llm: bool) -> str:
        if not text:
            logger.warning("No text to summarize")
            return SUMMARY_FAILED
        try:
            if use_llm:
                return await self.llm.summarize(text)
            return summarize(text)
        except Exception:
            logger.exception("Summarization failed")
            return SUMMARY_FAILED

    async def _translate(self, summary: str, use_llm: bool) -> str:
        try:
            if use_llm:
                return await self.llm.translate_to_urdu(summary)
            return self.translator.translate_to_urdu(summary)
        except Exception:
            logger.exception("Translation failed")
            return TRANSLATION_FAILED

    def _score(self, summary: str) -> dict:
        try:
            return self.sentiment.analyze(summary).to_dict()
        except Exception:
            logger.exception("Sentiment analysis failed")
            return dict(NEUTRAL_SENTIMENT)

    async def process_page(self, page: dict, use_llm: bool = False) -> dict:
        if page.get("error"):
            return page
        summary = await self._summarize(page.get("text"), use_llm)
        urdu = await self._translate(summary, use_llm)
        return {**page, "summary": summary, "urdu": urdu, "sentiment": self._score(summary)}

    async def _store(self, db: AsyncSession, result: dict):
        try:
            await self.storage.store_result(
                db,
                url=result["url"],
                summary=result["summary"],
                urdu=result["urdu"],
                sentiment=result["sentiment"],
                text=result.get("text"),
            )
        except Exception:
            logger.exception("Failed to store result for %s", result["url"])
            await db.rollback()

    async def run(
        self,
        urls: List[str],
        use_llm: bool = False,
        db: Optional[AsyncSession] = None,
    ) -> List[dict]:
        pages = await self.scraper.scrape_urls(urls)
        results = await asyncio.gather(*(self.process_page(page, use_llm) for page in pages))
        if db is not None:
            # One session, so rows are written one at a time
            for result in results:
                if not result.get("error"):
                    await self._store(db, result)
        return list(results)

pipeline_service = PipelineService(
    scraper=scraper_service,
    llm=llm_service,
    translator=translation_service,
    sentiment=sentiment_service,
    storage=storage_service,
)
