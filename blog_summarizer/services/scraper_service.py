import asyncio
import logging
from typing import List, Optional
import httpx
from bs4 import BeautifulSoup
from blog_summarizer.core.config import settings

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
SCRAPE_ERROR = "Failed to fetch or parse."

def extract_main_text(html: str) -> str:
    """Text of every <main>, else every <article>, else <body>."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in ("main", "article", "body"):
        text = "".join(element.get_text() for element in soup.find_all(tag))
        if text:
            return text.strip()
    return ""

class ScraperService:
    def __init__(self, timeout: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout or settings.SCRAPE_TIMEOUT
        self.transport = transport

    async def fetch_page_text(self, client: httpx.AsyncClient, url: str) -> str:
        response = await client.get(url, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
        return extract_main_text(response.text)

    async def _scrape_one(self, client: httpx.AsyncClient, url: str) -> dict:
        try:
            return {"url": url, "text": await self.fetch_page_text(client, url)}
        except Exception as exc:
            logger.warning("Scraping %s failed: %s", url, exc)
            return {"url": url, "error": SCRAPE_ERROR}

    async def scrape_urls(self, urls: List[str]) -> List[dict]:
        """Fetch all pages concurrently; one bad URL never fails the batch."""
        async with httpx.AsyncClient(
            follow_redirects=True, timeout=self.timeout, transport=self.transport
        ) as client:
            return await asyncio.gather(*(self._scrape_one(client, url) for url in urls))

scraper_service = ScraperService()
