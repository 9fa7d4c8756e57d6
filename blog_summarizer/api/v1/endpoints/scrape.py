from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from blog_summarizer.core.database import get_db
from blog_summarizer.schemas.scrape import ScrapeRequest, ScrapeResponse, ProcessRequest, ProcessResponse
from blog_summarizer.services.scraper_service import scraper_service
from blog_summarizer.services.pipeline_service import pipeline_service

router = APIRouter(tags=["Scraping"])

@router.post("/scrape", response_model=ScrapeResponse, response_model_exclude_none=True)
async def scrape(request: ScrapeRequest):
    if not request.urls:
        raise HTTPException(status_code=400, detail="No URLs provided.")

    results = await scraper_service.scrape_urls(request.urls)
    return {"results": results}

@router.post("/process", response_model=ProcessResponse, response_model_exclude_none=True)
async def process(request: ProcessRequest, db: AsyncSession = Depends(get_db)):
    """Scrape, summarize, translate and score each URL, then store the results."""
    if not request.urls:
        raise HTTPException(status_code=400, detail="No URLs provided.")

    results = await pipeline_service.run(
        request.urls,
        use_llm=request.use_llm,
        db=db if request.store else None,
    )
    return {"results": results}
