import re
from typing import Dict, Optional

# Small English to Urdu word list
URDU_DICTIONARY: Dict[str, str] = {
    "the": "دی",
    "and": "اور",
    "is": "ہے",
    "in": "میں",
    "to": "کو",
    "of": "کا",
    "a": "ایک",
    "for": "کے لئے",
    "with": "کے ساتھ",
    "on": "پر",
    "as": "طور پر",
    "by": "کی طرف سے",
    "an": "ایک",
    "are": "ہیں",
    "was": "تھا",
    "this": "یہ",
    "that": "وہ",
}

WHITESPACE_RUN = re.compile(r"(\s+)")
NON_LETTER = re.compile(r"[^a-z]")

class TranslationService:
    def __init__(self, dictionary: Optional[Dict[str, str]] = None):
        self.dictionary = dictionary if dictionary is not None else URDU_DICTIONARY

    def translate_to_urdu(self, text: str) -> str:
        """Word-for-word replacement; whitespace is preserved exactly."""
        pieces = WHITESPACE_RUN.split(text)
        return "".join(
            self.dictionary.get(NON_LETTER.sub("", piece.lower()), piece)
            for piece in pieces
        )

translation_service = TranslationService()
