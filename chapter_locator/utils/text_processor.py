"""Text normalization, tokenization and numeral parsing."""

import re
import unicodedata
from typing import Iterable, List, Optional, Set

from ..models.config import DEFAULT_STOP_WORDS


WORD_TO_NUM = {
    'one': 1, 'two': 2, 'three': 3, 'four': 4, 'five': 5, 'six': 6,
    'seven': 7, 'eight': 8, 'nine': 9, 'ten': 10, 'eleven': 11, 'twelve': 12
}

ROMAN_VALUES = {'i': 1, 'v': 5, 'x': 10, 'l': 50, 'c': 100, 'd': 500, 'm': 1000}

# Well-formed Roman numerals only; the lookarounds keep the match non-empty
ROMAN_NUMERAL = r'(?=[ivxlcdm])m{0,3}(?:cm|cd|d?c{0,3})(?:xc|xl|l?x{0,3})(?:ix|iv|v?i{0,3})(?<=[ivxlcdm])'

# Alternation used inside heading regexes; callers compile with re.IGNORECASE
NUMERAL_TOKEN = r'(?:\d{1,4}|' + '|'.join(sorted(WORD_TO_NUM, key=len, reverse=True)) + r'|' + ROMAN_NUMERAL + r')'

_NUMERAL_RE = re.compile(r'^' + NUMERAL_TOKEN + r'$', re.IGNORECASE)


class TextProcessor:
    """Text processing utilities for extracted page text"""

    @staticmethod
    def clean(text: Optional[str]) -> str:
        """Collapse whitespace runs and trim."""
        text = unicodedata.normalize('NFKC', text or '')
        return re.sub(r'\s+', ' ', text).strip()

    @staticmethod
    def norm(text: Optional[str]) -> str:
        return TextProcessor.clean(text).lower()

    @staticmethod
    def tokenize(text: Optional[str], stop_words: Iterable[str] = DEFAULT_STOP_WORDS) -> List[str]:
        """Lowercase, split on non-alphanumerics and drop stop words."""
        stop = stop_words if isinstance(stop_words, (set, frozenset)) else set(stop_words)
        return [w for w in re.split(r'[^a-z0-9]+', TextProcessor.norm(text)) if w and w not in stop]

    @staticmethod
    def jaccard(a: Iterable[str], b: Iterable[str]) -> float:
        """Intersection over union of two token sets; 0 when both are empty."""
        set_a: Set[str] = set(a)
        set_b: Set[str] = set(b)
        union = len(set_a | set_b)
        return len(set_a & set_b) / (union or 1)

    @staticmethod
    def word_to_number(word: str) -> Optional[int]:
        return WORD_TO_NUM.get((word or '').strip().lower())

    @staticmethod
    def roman_to_number(text: str) -> Optional[int]:
        """Evaluate a Roman numeral right to left with subtractive notation.

        A glyph smaller than the largest value seen so far is subtracted.
        Returns None for empty input or any non-Roman character.
        """
        glyphs = (text or '').strip().lower()
        if not glyphs or any(ch not in ROMAN_VALUES for ch in glyphs):
            return None

        total = 0
        running_max = 0
        for ch in reversed(glyphs):
            value = ROMAN_VALUES[ch]
            if value < running_max:
                total -= value
            else:
                total += value
                running_max = value
        return total if total > 0 else None

    @staticmethod
    def parse_numeral(token: Optional[str]) -> Optional[int]:
        """Parse an Arabic, spelled-out or Roman numeral token."""
        token = (token or '').strip().strip('.:').lower()
        if not token:
            return None
        if token.isdigit():
            return int(token)
        word = TextProcessor.word_to_number(token)
        if word is not None:
            return word
        return TextProcessor.roman_to_number(token)

    @staticmethod
    def is_numeral_token(text: Optional[str]) -> bool:
        return bool(_NUMERAL_RE.match(TextProcessor.clean(text).strip('.:')))
