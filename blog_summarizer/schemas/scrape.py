from pydantic import BaseModel
from typing import Any, Dict, List, Optional

class ScrapeRequest(BaseModel):
    urls: Optional[List[str]] = None

class ScrapeResult(BaseModel):
    url: str
    text: Optional[str] = None
    error: Optional[str] = None

class ScrapeResponse(BaseModel):
    results: List[ScrapeResult]

class ProcessRequest(BaseModel):
    urls: Optional[List[str]] = None
    use_llm: bool = False
    store: bool = True

class ProcessResult(ScrapeResult):
    summary: Optional[str] = None
    urdu: Optional[str] = None
    sentiment: Optional[Dict[str, Any]] = None

class ProcessResponse(BaseModel):
    results: List[ProcessResult]
