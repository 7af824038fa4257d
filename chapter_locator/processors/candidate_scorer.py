"""Multi-signal scoring of heading candidates against an expected chapter."""

import math
import re
from typing import List, Optional, Sequence

from ..models.config import DetectorConfig
from ..models.data_structures import HeadingCandidate, PageModel, ScoredCandidate
from ..extractors.heading_scanner import HeadingScanner
from ..utils.text_processor import TextProcessor


class CandidateScorer:
    """Score heading candidates and pick the best one per page"""

    def __init__(self, config: Optional[DetectorConfig] = None, scanner: Optional[HeadingScanner] = None):
        self.config = config or DetectorConfig()
        self.scanner = scanner or HeadingScanner(
            self.config.marker_words,
            allow_single_line=self.config.allow_single_line,
            allow_split_label=self.config.allow_split_label
        )
        junk = '|'.join(re.escape(w.lower()) for w in self.config.junk_words)
        self.junk_pattern = re.compile(r'\b(?:' + junk + r')\b', re.IGNORECASE) if junk else None

    def is_junk(self, text: str) -> bool:
        return bool(self.junk_pattern and self.junk_pattern.search(text))

    def is_plausible_title(self, text: Optional[str]) -> bool:
        text = TextProcessor.clean(text)
        return (len(text) >= self.config.min_title_length and
                not self.is_junk(text) and
                not TextProcessor.is_numeral_token(text) and
                not self.scanner.is_heading_line(text))

    def find_title(self, candidate: HeadingCandidate, page: PageModel) -> Optional[str]:
        """Inline title, else the first plausible line within the window below the heading."""
        if candidate.inline_title and self.is_plausible_title(candidate.inline_title):
            return TextProcessor.clean(candidate.inline_title)

        start = candidate.last_line_index + 1
        for line in page.lines[start:start + self.config.title_window]:
            if self.is_plausible_title(line.text):
                return TextProcessor.clean(line.text)
        return None

    def score(self, candidate: HeadingCandidate, page: PageModel, target: int,
              expected_tokens: Sequence[str]) -> ScoredCandidate:
        """Sum independent bonuses; a wrong or missing numeral scores -inf."""
        if candidate.number is None or candidate.number != target:
            return ScoredCandidate(score=-math.inf, title=None)

        cfg = self.config
        score = cfg.base_score

        if self.scanner.has_marker(candidate.text):
            score += cfg.marker_bonus

        if candidate.font >= page.font90:
            score += cfg.font_high_bonus
        elif candidate.font >= page.font75:
            score += cfg.font_mid_bonus

        if candidate.top_frac >= cfg.near_top_threshold:
            score += cfg.near_top_bonus

        title = self.find_title(candidate, page)
        if title is None:
            score -= cfg.no_title_penalty
        else:
            score += cfg.title_found_bonus
            similarity = TextProcessor.jaccard(TextProcessor.tokenize(title, cfg.stop_words), expected_tokens)
            if similarity >= cfg.similarity_threshold:
                score += cfg.similarity_bonus

        return ScoredCandidate(score=score, title=title)

    def best_on_page(self, page: PageModel, target: int, expected_title: str) -> ScoredCandidate:
        """Highest-scoring candidate for target on page; ties keep the first found."""
        expected_tokens: List[str] = TextProcessor.tokenize(expected_title, self.config.stop_words)
        best = ScoredCandidate()
        for candidate in self.scanner.scan(page):
            scored = self.score(candidate, page, target, expected_tokens)
            if scored.score > best.score:
                best = scored
        return best
