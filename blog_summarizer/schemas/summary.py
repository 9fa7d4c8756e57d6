from pydantic import BaseModel
from typing import Any, Dict, List, Optional
from datetime import datetime

class SummarizeRequest(BaseModel):
    text: Optional[str] = None

class SummarizeResponse(BaseModel):
    summary: str

class TranslateRequest(BaseModel):
    summary: Optional[str] = None

class TranslateResponse(BaseModel):
    urdu: str

class SentimentRequest(BaseModel):
    summary: Optional[str] = None

class SentimentResponse(BaseModel):
    score: float
    classification: str
    comparative: float
    tokens: int
    positive: List[str]
    negative: List[str]

class StoreRequest(BaseModel):
    url: Optional[str] = None
    summary: Optional[str] = None
    urdu: Optional[str] = None
    sentiment: Optional[Dict[str, Any]] = None
    text: Optional[str] = None

class HistoryItem(BaseModel):
    url: str
    summary: str
    urdu_translation: Optional[str] = None
    sentiment_score: Optional[float] = None
    sentiment_classification: Optional[str] = None
    created_at: Optional[datetime] = None
    full_text: str

class HistoryResponse(BaseModel):
    history: List[HistoryItem]
