"""Table of contents and end-of-chapter page classification."""

import re
from typing import Iterable, List, Optional

from ..utils.text_processor import TextProcessor, NUMERAL_TOKEN


class PageClassifier:
    """Detect pages that quote chapter titles instead of introducing them"""

    def __init__(self, marker_words: Optional[Iterable[str]] = None,
                 toc_markers: Optional[Iterable[str]] = None,
                 summary_markers: Optional[Iterable[str]] = None,
                 min_dot_leaders: int = 3, min_chapter_mentions: int = 4):
        self.marker_words = list(marker_words or ['chapter'])
        self.toc_markers = list(toc_markers or ['table of contents'])
        self.summary_markers = list(summary_markers or ['summary', 'key terms', 'self-assessment', 'chapter review'])
        self.min_dot_leaders = min_dot_leaders
        self.min_chapter_mentions = min_chapter_mentions

        markers = '|'.join(re.escape(w.lower()) for w in self.marker_words)
        self.mention_pattern = re.compile(r'\b(?:' + markers + r')\s+' + NUMERAL_TOKEN + r'\b', re.IGNORECASE)
        self.dot_leader_pattern = re.compile(r'(?:\.\s?){3,}')
        self.contents_line_pattern = re.compile(r'^(?:brief\s+|table\s+of\s+)?contents$', re.IGNORECASE)
        self.summary_pattern = self._compile_markers(self.summary_markers)

    @staticmethod
    def _compile_markers(markers: List[str]) -> re.Pattern:
        # self-assessment also matches "self assessment"
        parts = [re.escape(m.lower()).replace(r'\-', r'[-\s]?').replace(r'\ ', r'\s+') for m in markers]
        return re.compile(r'\b(?:' + '|'.join(parts) + r')\b', re.IGNORECASE)

    def is_toc(self, text: str, line_texts: Optional[Iterable[str]] = None) -> bool:
        """True for a contents marker, or dense dot leaders with repeated chapter mentions."""
        normalized = TextProcessor.norm(text)
        if any(marker in normalized for marker in self.toc_markers):
            return True
        if line_texts and any(self.contents_line_pattern.match(TextProcessor.clean(t)) for t in line_texts):
            return True

        dot_leaders = len(self.dot_leader_pattern.findall(normalized))
        mentions = len(self.mention_pattern.findall(normalized))
        return dot_leaders >= self.min_dot_leaders and mentions >= self.min_chapter_mentions

    def is_summary(self, text: str) -> bool:
        return bool(self.summary_pattern.search(TextProcessor.clean(text)))
