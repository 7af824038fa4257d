"""Page layout analysis: running header/footer stripping and per-page typography."""

import math
from collections import Counter
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..models.data_structures import DEFAULT_FONT_SIZE, Line, PageContent, PageModel
from ..models.enums import RunningBand
from ..extractors.page_classifier import PageClassifier
from ..utils.text_processor import TextProcessor


class LayoutAnalyzer:
    """Build page models from reconstructed lines"""

    def __init__(self, band=0.15, min_repeats=6, min_length=4,
                 high_percentile=0.90, mid_percentile=0.75, classifier=None):
        self.band = band
        self.min_repeats = min_repeats
        self.min_length = min_length
        self.high_percentile = high_percentile
        self.mid_percentile = mid_percentile
        self.classifier = classifier or PageClassifier()

    @staticmethod
    def percentile(values: Sequence[float], fraction: float, default: float = DEFAULT_FONT_SIZE) -> float:
        """Value at index floor(fraction * (n - 1)) of the sorted values."""
        if not values:
            return default
        ordered = sorted(values)
        return ordered[int(math.floor(fraction * (len(ordered) - 1)))]

    @staticmethod
    def y_extent(lines: Sequence[Line]) -> Tuple[float, float]:
        """Min y and span of a page's lines; span never drops below 1."""
        ys = [line.y for line in lines]
        min_y, max_y = min(ys), max(ys)
        return min_y, max(1.0, max_y - min_y)

    def band_of(self, line: Line, min_y: float, span: float) -> Optional[RunningBand]:
        position = (line.y - min_y) / span  # 0 at the top line, 1 at the bottom line
        if position <= self.band:
            return RunningBand.TOP
        if position >= 1 - self.band:
            return RunningBand.BOTTOM
        return None

    def find_running_lines(self, pages_lines: Sequence[List[Line]]) -> Dict[RunningBand, Set[str]]:
        """Texts recurring in the same vertical band on at least min_repeats pages."""
        counts: Dict[RunningBand, Counter] = {band: Counter() for band in RunningBand}
        for lines in pages_lines:
            if not lines:
                continue
            min_y, span = self.y_extent(lines)
            seen = set()
            for line in lines:
                key = TextProcessor.norm(line.text)
                if len(key) < self.min_length:
                    continue
                band = self.band_of(line, min_y, span)
                if band is not None and (band, key) not in seen:
                    seen.add((band, key))
                    counts[band][key] += 1

        return {
            band: {key for key, count in counter.items() if count >= self.min_repeats}
            for band, counter in counts.items()
        }

    def strip_lines(self, lines: List[Line], running: Dict[RunningBand, Set[str]],
                    page_number: int) -> Tuple[List[Line], List[Line], int]:
        """Split lines into kept lines and removed running lines.

        Returns (kept, running_removed, page_numbers_removed).
        """
        if not lines:
            return [], [], 0
        min_y, span = self.y_extent(lines)
        page_label = str(page_number)
        kept, removed = [], []
        page_numbers = 0
        for line in lines:
            key = TextProcessor.norm(line.text)
            band = self.band_of(line, min_y, span)
            if band is not None and key in running.get(band, ()):
                removed.append(line)
            elif key == page_label:
                page_numbers += 1
            else:
                kept.append(line)
        return kept, removed, page_numbers

    def apply_statistics(self, lines: List[Line]) -> Tuple[float, float]:
        """Set top_frac on every line and return (font75, font90)."""
        fonts = [line.font_max for line in lines]
        font_mid = self.percentile(fonts, self.mid_percentile)
        font_high = self.percentile(fonts, self.high_percentile)
        if lines:
            min_y, span = self.y_extent(lines)
            max_y = min_y + span
            for line in lines:
                line.top_frac = min(1.0, max(0.0, (max_y - line.y) / span))
        return font_mid, font_high

    def classification_text(self, page: PageContent, removed: List[Line], kept: List[Line]) -> str:
        """Page text without its running lines."""
        text = TextProcessor.clean(page.text) if page.text is not None else ' '.join(line.text for line in kept + removed)
        for line in removed:
            text = text.replace(line.text, ' ', 1)
        return TextProcessor.clean(text)

    def build_page_models(self, pages: Sequence[PageContent], pages_lines: Sequence[List[Line]]) -> List[PageModel]:
        """Strip running lines across all pages, then model each page on its own."""
        running = self.find_running_lines(pages_lines)
        models = []
        for page, lines in zip(pages, pages_lines):
            kept, removed, page_numbers = self.strip_lines(lines, running, page.index + 1)
            font75, font90 = self.apply_statistics(kept)
            text = self.classification_text(page, removed, kept)
            models.append(PageModel(
                index=page.index,
                lines=kept,
                font75=font75,
                font90=font90,
                is_toc=self.classifier.is_toc(text, [line.text for line in kept]),
                is_summary=self.classifier.is_summary(text),
                text=text,
                stripped=len(removed) + page_numbers
            ))
        return models
