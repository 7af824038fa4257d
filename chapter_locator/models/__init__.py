"""Data models, enums and configuration for chapter location."""

from .data_structures import (
    Fragment, PageContent, Line, PageModel, HeadingCandidate,
    ScoredCandidate, ChapterRecord, DetectionResult, LocatorState
)
from .enums import CandidateForm, RunningBand
from .config import DetectorConfig, load_titles
from .exceptions import DocumentLoadError

__all__ = [
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
    "DetectorConfig",
    "load_titles",
    "DocumentLoadError"
]
