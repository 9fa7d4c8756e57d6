from collections import Counter
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, List
import math
import re

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
NON_WORD = re.compile(r"[^A-Za-z0-9_]")
WHITESPACE = re.compile(r"\s+")

MIN_SENTENCE_LENGTH = 10
MIN_TERM_LENGTH = 3
MAX_SUMMARY_SENTENCES = 5
SUMMARY_RATIO = Fraction(3, 10)

@dataclass(frozen=True)
class ScoredSentence:
    text: str
    index: int
    score: int

def split_sentences(text: str) -> List[str]:
    """Split on runs of . ! ? and drop fragments of 10 characters or fewer.

    Fragments are returned untrimmed, in document order.
    """
    return [s for s in SENTENCE_BOUNDARY.split(text) if len(s.strip()) > MIN_SENTENCE_LENGTH]

def clean_token(token: str) -> str:
    return NON_WORD.sub("", token)

def build_frequency_table(text: str) -> Dict[str, int]:
    """Document-wide counts of cleaned lowercase terms longer than 3 chars."""
    table = Counter()
    for word in WHITESPACE.split(text.lower()):
        term = clean_token(word)
        if len(term) > MIN_TERM_LENGTH:
            table[term] += 1
    return table

def score_sentences(sentences: List[str], table: Dict[str, int]) -> List[ScoredSentence]:
    scored = []
    for index, sentence in enumerate(sentences):
        # Short tokens are never in the table so they add nothing
        score = sum(table.get(clean_token(w), 0) for w in WHITESPACE.split(sentence.lower()))
        scored.append(ScoredSentence(text=sentence.strip(), index=index, score=score))
    return scored

def summary_length(sentence_count: int) -> int:
    return min(MAX_SUMMARY_SENTENCES, math.ceil(sentence_count * SUMMARY_RATIO))

def select_sentences(scored: List[ScoredSentence]) -> List[ScoredSentence]:
    """Highest scores first; sorted() is stable so ties keep document order."""
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    return ranked[:summary_length(len(scored))]

class SummarizationService:
    @staticmethod
    def extractive_summary(text: str) -> str:
        """Extractive summarization using document-wide term frequencies.

        Sentences are emitted in score order, not document order.
        """
        sentences = split_sentences(text)
        table = build_frequency_table(text)
        selected = select_sentences(score_sentences(sentences, table))
        return ". ".join(s.text for s in selected) + "."

summarization_service = SummarizationService()
summarize = summarization_service.extractive_summary
