from fastapi import APIRouter, HTTPException
from blog_summarizer.schemas.summary import SentimentRequest, SentimentResponse
from blog_summarizer.services.sentiment_service import sentiment_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sentiment", tags=["Sentiment"])

@router.post("", response_model=SentimentResponse)
async def analyze_sentiment(request: SentimentRequest):
    if not request.summary:
        raise HTTPException(status_code=400, detail="No summary provided.")

    try:
        result = sentiment_service.analyze(request.summary)
    except Exception:
        logger.exception("Sentiment analysis failed")
        raise HTTPException(status_code=500, detail="Failed to analyze sentiment.")

    return result.to_dict()
