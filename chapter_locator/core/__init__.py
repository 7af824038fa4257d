"""Chapter detection pipeline and sequential locator."""

from .chapter_detector import ChapterDetector
from .locator import ChapterLocator, assemble_ranges, missing_chapters

__all__ = ["ChapterDetector", "ChapterLocator", "assemble_ranges", "missing_chapters"]
