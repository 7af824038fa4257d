"""Heading candidate scanning over page lines."""

import re
from typing import Iterable, List, Optional

from ..models.data_structures import HeadingCandidate, Line, PageModel
from ..models.enums import CandidateForm
from ..utils.text_processor import TextProcessor, NUMERAL_TOKEN


class HeadingScanner:
    """Propose chapter heading candidates from a page's lines"""

    def __init__(self, marker_words: Optional[Iterable[str]] = None,
                 allow_single_line: bool = True, allow_split_label: bool = True):
        self.marker_words = [w.lower() for w in (marker_words or ['chapter'])]
        self.allow_single_line = allow_single_line
        self.allow_split_label = allow_split_label

        markers = '|'.join(re.escape(w) for w in self.marker_words)
        self.heading_pattern = re.compile(
            r'^(?:' + markers + r')\s*[:.\-]?\s*(?P<num>' + NUMERAL_TOKEN + r')(?=$|[\s:.\-])(?P<rest>.*)$',
            re.IGNORECASE
        )
        self.marker_pattern = re.compile(r'\b(?:' + markers + r')\b', re.IGNORECASE)

    def is_label_only(self, text: str) -> bool:
        return TextProcessor.norm(text).rstrip(':.') in self.marker_words

    def has_marker(self, text: str) -> bool:
        return bool(self.marker_pattern.search(text or ''))

    def match_heading(self, text: str) -> Optional[re.Match]:
        return self.heading_pattern.match(TextProcessor.clean(text))

    def is_heading_line(self, text: str) -> bool:
        return self.match_heading(text) is not None or self.is_label_only(text)

    def candidate_at(self, lines: List[Line], i: int) -> Optional[HeadingCandidate]:
        """Candidate starting at line i, or None."""
        line = lines[i]
        next_line = lines[i + 1] if i + 1 < len(lines) else None

        # label and numeral typeset as separate lines
        if (self.allow_split_label and next_line is not None and self.is_label_only(line.text)
                and TextProcessor.is_numeral_token(next_line.text)):
            return HeadingCandidate(
                text=f"{line.text} {next_line.text}",
                font=max(line.font_max, next_line.font_max),
                top_frac=line.top_frac,
                line_index=i,
                last_line_index=i + 1,
                number=TextProcessor.parse_numeral(TextProcessor.clean(next_line.text).strip('.:')),
                form=CandidateForm.SPLIT_LABEL
            )

        if self.allow_single_line:
            match = self.match_heading(line.text)
            if match:
                rest = match.group('rest').strip(' :.-–—')
                return HeadingCandidate(
                    text=line.text,
                    font=line.font_max,
                    top_frac=line.top_frac,
                    line_index=i,
                    last_line_index=i,
                    number=TextProcessor.parse_numeral(match.group('num')),
                    form=CandidateForm.SINGLE_LINE,
                    inline_title=rest or None
                )
        return None

    def scan(self, page: PageModel) -> List[HeadingCandidate]:
        """All candidates on a page in reading order."""
        candidates = []
        for i in range(len(page.lines)):
            candidate = self.candidate_at(page.lines, i)
            if candidate is not None:
                candidates.append(candidate)
        return candidates
