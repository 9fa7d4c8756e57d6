import logging
import re
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional
import nltk

logger = logging.getLogger(__name__)

PUNCTUATION = re.compile(r"[^\w\s]")

@dataclass
class SentimentResult:
    score: float
    classification: str
    comparative: float
    tokens: int
    positive: List[str] = field(default_factory=list)
    negative: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

class LexiconUnavailableError(RuntimeError):
    pass

def classify(score: float) -> str:
    if score > 0:
        return "positive"
    if score < 0:
        return "negative"
    return "neutral"

def load_vader_lexicon() -> Dict[str, float]:
    nltk.download("vader_lexicon", quiet=True)
    from nltk.sentiment.vader import SentimentIntensityAnalyzer
    return dict(SentimentIntensityAnalyzer().lexicon)

class SentimentService:
    """Lexicon scorer: sums word valences over the text."""

    def __init__(self, lexicon: Optional[Dict[str, float]] = None):
        self._lexicon = lexicon
        self._load_error: Optional[Exception] = None

    def load(self) -> bool:
        """Load the lexicon once; a failure is remembered and not retried."""
        if self._lexicon is not None:
            return True
        if self._load_error is not None:
            return False
        logger.info("Loading VADER lexicon")
        try:
            self._lexicon = load_vader_lexicon()
        except Exception as exc:
            logger.exception("Failed to load VADER lexicon")
            self._load_error = exc
            return False
        return True

    @property
    def lexicon(self) -> Dict[str, float]:
        if not self.load():
            raise LexiconUnavailableError("Sentiment lexicon is unavailable.") from self._load_error
        return self._lexicon

    def analyze(self, text: str) -> SentimentResult:
        tokens = PUNCTUATION.sub("", text.lower()).split()
        positive, negative = [], []
        score = 0.0
        for token in tokens:
            valence = self.lexicon.get(token)
            if valence is None:
                continue
            score += valence
            if valence > 0:
                positive.append(token)
            elif valence < 0:
                negative.append(token)
        score = round(score, 4)
        return SentimentResult(
            score=score,
            classification=classify(score),
            comparative=round(score / len(tokens), 4) if tokens else 0.0,
            tokens=len(tokens),
            positive=positive,
            negative=negative,
        )

sentiment_service = SentimentService()
