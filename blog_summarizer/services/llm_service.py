import logging
from typing import Optional
from openai import AsyncOpenAI
from blog_summarizer.core.config import settings

logger = logging.getLogger(__name__)

SUMMARY_SYSTEM_PROMPT = (
    "You are a helpful assistant that creates concise, informative summaries of blog content. "
    "Focus on the main points and key insights."
)
TRANSLATE_SYSTEM_PROMPT = (
    "You are a professional translator. Translate the given English text to Urdu. "
    "Provide only the Urdu translation without any explanations or additional text."
)

class LLMNotConfiguredError(RuntimeError):
    pass

class LLMService:
    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, client: Optional[AsyncOpenAI] = None):
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.model = model or settings.OPENAI_MODEL
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise LLMNotConfiguredError("OpenAI API key not configured.")
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def _complete(self, system: str, user: str, max_tokens: int, temperature: float) -> str:
        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            max_tokens=max_tokens,
            temperature=temperature,
        )
        if not completion.choices:
            return ""
        return (completion.choices[0].message.content or "").strip()

    async def summarize(self, text: str) -> str:
        summary = await self._complete(
            SUMMARY_SYSTEM_PROMPT,
            f"Please summarize the following blog content in 2-3 sentences:\n\n{text}",
            max_tokens=150,
            temperature=0.3,
        )
        if not summary:
            logger.warning("LLM returned an empty summary")
        return summary or "Failed to generate summary"

    async def translate_to_urdu(self, text: str) -> str:
        urdu = await self._complete(
            TRANSLATE_SYSTEM_PROMPT,
            f"Translate this English text to Urdu:\n\n{text}",
            max_tokens=200,
            temperature=0.1,
        )
        return urdu or "Translation failed"

llm_service = LLMService()
