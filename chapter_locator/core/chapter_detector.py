"""Main chapter detection pipeline using modular components."""

from typing import List, Optional, Sequence, Union

from ..models.config import DetectorConfig
from ..models.data_structures import DetectionResult, PageContent, PageModel
from ..extractors.page_classifier import PageClassifier
from ..extractors.heading_scanner import HeadingScanner
from ..processors.line_builder import LineReconstructor
from ..processors.layout_analyzer import LayoutAnalyzer
from ..processors.candidate_scorer import CandidateScorer
from ..utils.pdf_utils import PDFUtils
from .locator import ChapterLocator, assemble_ranges, missing_chapters


class ChapterDetector:
    """
    Layout-aware chapter detection pipeline that combines:
    - Line reconstruction from positioned text fragments
    - Running header/footer stripping and per-page typography
    - Heading candidate scanning and multi-signal scoring
    - Sequential, order-preserving chapter placement
    """

    def __init__(self, config: DetectorConfig, verbose: bool = True):
        self.config = config.validate()
        self.verbose = verbose

        # Initialize modular components
        self.line_builder = LineReconstructor(config.y_tolerance)
        self.page_classifier = PageClassifier(
            marker_words=config.marker_words,
            toc_markers=config.toc_markers,
            summary_markers=config.summary_markers,
            min_dot_leaders=config.toc_min_dot_leaders,
            min_chapter_mentions=config.toc_min_chapter_mentions
        )
        self.layout_analyzer = LayoutAnalyzer(
            band=config.header_footer_band,
            min_repeats=config.header_footer_min_repeats,
            min_length=config.header_footer_min_length,
            high_percentile=config.font_high_percentile,
            mid_percentile=config.font_mid_percentile,
            classifier=self.page_classifier
        )
        self.heading_scanner = HeadingScanner(
            config.marker_words,
            allow_single_line=config.allow_single_line,
            allow_split_label=config.allow_split_label
        )
        self.scorer = CandidateScorer(config, self.heading_scanner)
        self.locator = ChapterLocator(config, self.scorer, verbose=verbose)
        self.pdf_utils = PDFUtils()

    # ========================================================================
    # Page Modeling
    # ========================================================================

    def build_page_models(self, pages: Sequence[PageContent]) -> List[PageModel]:
        """Reconstruct lines for every page, then model pages once all are available."""
        pages_lines = [self.line_builder.build_lines(page.fragments) for page in pages]
        models = self.layout_analyzer.build_page_models(pages, pages_lines)

        if self.verbose:
            toc = [m.page_number for m in models if m.is_toc]
            summary = [m.page_number for m in models if m.is_summary]
            stripped = sum(m.stripped for m in models)
            print(f"Modeled {len(models)} pages ({stripped} running lines stripped)")
            if toc:
                print(f"  Table of contents pages: {', '.join(map(str, toc))}")
            if summary:
                print(f"  Chapter summary pages: {len(summary)}")
        return models

    # ========================================================================
    # Detection Pipeline
    # ========================================================================

    def detect_from_pages(self, pages: Sequence[PageContent]) -> DetectionResult:
        """Locate every expected chapter in already decoded pages."""
        models = self.build_page_models(pages)

        if self.verbose:
            print(f"Locating {len(self.config.expected_titles)} chapters...")
        state = self.locator.locate(models)

        return DetectionResult(
            chapters=assemble_ranges(state.results, len(pages)),
            missing=missing_chapters(len(self.config.expected_titles), state.results),
            total_pages=len(pages),
            expected_titles=list(self.config.expected_titles)
        )

    def detect(self, source: Union[str, bytes]) -> DetectionResult:
        """Decode a PDF from a path or bytes and locate its chapters."""
        pages = self.pdf_utils.extract_pages(source)
        if self.verbose:
            label = source if isinstance(source, str) else f"{len(source)} bytes"
            print(f"Decoded {len(pages)} pages from {label}")
        return self.detect_from_pages(pages)
