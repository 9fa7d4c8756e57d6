from fastapi import APIRouter
from .scrape import router as scrape_router
from .summarize import router as summarize_router
from .translate import router as translate_router
from .sentiment import router as sentiment_router
from .history import router as history_router

router = APIRouter()
router.include_router(scrape_router)
router.include_router(summarize_router)
router.include_router(translate_router)
router.include_router(sentiment_router)
router.include_router(history_router)
