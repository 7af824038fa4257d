"""Detector configuration."""

import json
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List


DEFAULT_STOP_WORDS = frozenset({
    'the', 'a', 'an', 'of', 'and', 'to', 'for', 'in', 'on', 'with',
    'at', 'by', 'is', 'are', 'as', 'from', 'into', 'about', 'between',
    'through', 'without', 'over', 'under'
})

DEFAULT_JUNK_WORDS = (
    'outline', 'continued', 'summary', 'objectives', 'learning outcomes',
    'key terms', 'contents', 'review', 'self-assessment', 'references', 'page'
)

DEFAULT_TOC_MARKERS = ('table of contents',)

DEFAULT_SUMMARY_MARKERS = ('summary', 'key terms', 'self-assessment', 'chapter review')


@dataclass
class DetectorConfig:
    """All tunable settings of the chapter detector, injected at construction"""
    expected_titles: List[str] = field(default_factory=list)
    marker_words: List[str] = field(default_factory=lambda: ['chapter'])
    junk_words: List[str] = field(default_factory=lambda: list(DEFAULT_JUNK_WORDS))
    stop_words: frozenset = DEFAULT_STOP_WORDS
    toc_markers: List[str] = field(default_factory=lambda: list(DEFAULT_TOC_MARKERS))
    summary_markers: List[str] = field(default_factory=lambda: list(DEFAULT_SUMMARY_MARKERS))

    # Line reconstruction
    y_tolerance: float = 2.0

    # Running header/footer stripping
    header_footer_min_repeats: int = 6
    header_footer_band: float = 0.15
    header_footer_min_length: int = 4

    # Page classification
    toc_min_dot_leaders: int = 3
    toc_min_chapter_mentions: int = 4

    # Candidate forms
    allow_single_line: bool = True
    allow_split_label: bool = True

    # Scoring
    base_score: int = 4
    marker_bonus: int = 2
    font_high_percentile: float = 0.90
    font_mid_percentile: float = 0.75
    font_high_bonus: int = 2
    font_mid_bonus: int = 1
    near_top_threshold: float = 0.70
    near_top_bonus: int = 2
    title_window: int = 4
    min_title_length: int = 5
    title_found_bonus: int = 2
    no_title_penalty: int = 4
    similarity_threshold: float = 0.4
    similarity_bonus: int = 2

    # Sequential locator
    accept_threshold: int = 8
    min_page_gap: int = 3

    def validate(self) -> "DetectorConfig":
        """Raise ValueError for settings the detector cannot run with."""
        if not self.expected_titles:
            raise ValueError("At least one expected chapter title is required")
        if not self.marker_words:
            raise ValueError("At least one heading marker word is required")
        if self.min_page_gap < 1:
            raise ValueError(f"min_page_gap must be >= 1, got {self.min_page_gap}")
        if not 0 < self.header_footer_band <= 0.5:
            raise ValueError(f"header_footer_band must be in (0, 0.5], got {self.header_footer_band}")
        if self.y_tolerance <= 0:
            raise ValueError(f"y_tolerance must be positive, got {self.y_tolerance}")
        for name in ('font_high_percentile', 'font_mid_percentile', 'near_top_threshold', 'similarity_threshold'):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
        if self.title_window < 1:
            raise ValueError(f"title_window must be >= 1, got {self.title_window}")
        return self

    def with_overrides(self, **overrides: Any) -> "DetectorConfig":
        """Return a copy with the given non-None settings replaced."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        changes = {k: v for k, v in overrides.items() if v is not None}
        if 'stop_words' in changes:
            changes['stop_words'] = frozenset(w.lower() for w in changes['stop_words'])
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DetectorConfig":
        return cls().with_overrides(**data)

    @classmethod
    def from_file(cls, config_path: str) -> "DetectorConfig":
        """Load settings from a JSON object of overrides."""
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must hold a JSON object: {config_path}")
        return cls.from_dict(data)


def load_titles(titles_path: str) -> List[str]:
    """Read expected chapter titles from a JSON list or a one-per-line text file."""
    if os.path.splitext(titles_path)[1].lower() == '.json':
        with open(titles_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get('titles', [])
        if not isinstance(data, list):
            raise ValueError(f"Titles file must hold a list of strings: {titles_path}")
        return [str(t).strip() for t in data if str(t).strip()]

    titles = []
    with open(titles_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            titles.append(line)
    return titles
