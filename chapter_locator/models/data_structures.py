"""Data structures for chapter location."""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
from .enums import CandidateForm

DEFAULT_FONT_SIZE = 10.0


@dataclass(frozen=True)
class Fragment:
    """Positioned run of text as emitted by the document decoder"""
    x: float
    y: float
    font_size: float
    text: str

    @classmethod
    def from_transform(cls, transform: Optional[Sequence[float]], text: Optional[str],
                       page_height: Optional[float] = None) -> "Fragment":
        """Build a fragment from a 6-element affine transform [a, b, c, d, e, f].

        The transform's f is measured up from the page bottom; it is flipped
        so y grows downward like every other fragment (page_height - f when the
        height is known, else -f). A missing or malformed transform is read as
        identity scale at the origin so one corrupt record cannot drop the rest
        of its line.
        """
        try:
            a, _, _, d, e, f = (float(v or 0) for v in transform)
        except (TypeError, ValueError):
            a, d, e, f = 1.0, 1.0, 0.0, 0.0
        if not all(math.isfinite(v) for v in (a, d, e, f)):
            a, d, e, f = 1.0, 1.0, 0.0, 0.0
        size = max(abs(a), abs(d)) or DEFAULT_FONT_SIZE
        y = page_height - f if page_height is not None else -f
        return cls(x=e, y=y, font_size=size, text=text or "")


@dataclass
class PageContent:
    """One decoded page: its fragments and optional plain text"""
    index: int
    fragments: List[Fragment] = field(default_factory=list)
    text: Optional[str] = None

    @property
    def plain_text(self) -> str:
        if self.text is not None:
            return self.text
        return ' '.join(f.text for f in self.fragments)


@dataclass
class Line:
    """Fragments merged by vertical proximity into one reading-order line"""
    y: float
    text: str
    font_max: float
    x0: float
    x1: float
    top_frac: float = 0.0


@dataclass
class PageModel:
    """Per-page lines and typographic statistics"""
    index: int
    lines: List[Line]
    font75: float
    font90: float
    is_toc: bool = False
    is_summary: bool = False
    text: str = ""
    stripped: int = 0

    @property
    def page_number(self) -> int:
        return self.index + 1

    @property
    def is_eligible(self) -> bool:
        return bool(self.lines) and not self.is_toc and not self.is_summary


@dataclass
class HeadingCandidate:
    """A line or line pair suspected of introducing a chapter"""
    text: str
    font: float
    top_frac: float
    line_index: int
    last_line_index: int
    number: Optional[int] = None
    form: CandidateForm = CandidateForm.SINGLE_LINE
    inline_title: Optional[str] = None


@dataclass
class ScoredCandidate:
    """Best candidate found on one page for one target chapter"""
    score: float = -math.inf
    title: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.score != -math.inf


@dataclass
class ChapterRecord:
    """Located chapter with its 1-based page range"""
    number: int
    start_page: int
    title: str
    end_page: Optional[int] = None
    score: Optional[float] = None

    @property
    def page_count(self) -> int:
        if self.end_page is None:
            return 0
        return self.end_page - self.start_page + 1


@dataclass
class DetectionResult:
    """Structured outcome of a detection run"""
    chapters: List[ChapterRecord]
    missing: List[int]
    total_pages: int
    expected_titles: List[str] = field(default_factory=list)

    @property
    def found_count(self) -> int:
        return len(self.chapters)


@dataclass(frozen=True)
class LocatorState:
    """Sequential locator state threaded from one chapter to the next"""
    cursor: int = 0
    results: Tuple[ChapterRecord, ...] = ()
    missing: Tuple[int, ...] = ()
