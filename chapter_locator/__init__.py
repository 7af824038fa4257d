"""
Chapter Locator

Layout-aware chapter boundary detection for long scanned or typeset documents.
Given the ordered list of expected chapter titles, it places each chapter's
start page by analyzing the positional layout of extracted text instead of
any embedded outline.

Features:
- Line reconstruction from positioned text fragments
- Running header/footer stripping and per-page font statistics
- Table of contents and chapter summary page detection
- Multi-signal heading scoring (numeral, typography, position, title similarity)
- Sequential, order-preserving chapter placement with a minimum page gap
- Text report, JSON output and per-chapter PDF splitting
"""

from .core.chapter_detector import ChapterDetector
from .core.locator import ChapterLocator, assemble_ranges, missing_chapters
from .models.config import DetectorConfig, load_titles
from .models.data_structures import (
    Fragment, PageContent, Line, PageModel, HeadingCandidate,
    ScoredCandidate, ChapterRecord, DetectionResult, LocatorState
)
from .models.enums import CandidateForm, RunningBand
from .models.exceptions import DocumentLoadError

__version__ = "1.0.0"
__all__ = [
    "ChapterDetector",
    "ChapterLocator",
    "assemble_ranges",
    "missing_chapters",
    "DetectorConfig",
    "load_titles",
    "Fragment",
    "PageContent",
    "Line",
    "PageModel",
    "HeadingCandidate",
    "ScoredCandidate",
    "ChapterRecord",
    "DetectionResult",
    "LocatorState",
    "CandidateForm",
    "RunningBand",
    "DocumentLoadError"
]
