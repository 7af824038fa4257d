"""PDF decoding utilities."""

import os
from typing import List, Union

import fitz

from ..models.data_structures import Fragment, PageContent
from ..models.exceptions import DocumentLoadError


class PDFUtils:
    """PDF decoding utilities"""

    @staticmethod
    def open_document(source: Union[str, bytes]) -> "fitz.Document":
        """Open a PDF from a path or raw bytes."""
        if isinstance(source, (bytes, bytearray)):
            try:
                return fitz.open(stream=bytes(source), filetype="pdf")
            except (RuntimeError, ValueError) as e:
                raise DocumentLoadError(f"Cannot decode PDF bytes: {e}") from e

        if not os.path.exists(source):
            raise FileNotFoundError(f"PDF file not found: {source}")
        try:
            return fitz.open(source)
        except (RuntimeError, ValueError) as e:
            raise DocumentLoadError(f"Cannot open PDF {source}: {e}") from e

    @staticmethod
    def span_to_fragment(span: dict) -> Fragment:
        """Fragment from a text span; a malformed origin or size reads as unit scale at the origin."""
        text = span.get("text") or ""
        try:
            x, y = (float(v) for v in span.get("origin"))
            size = float(span.get("size"))
        except (TypeError, ValueError):
            return Fragment(x=0.0, y=0.0, font_size=1.0, text=text)
        return Fragment(x=x, y=y, font_size=abs(size) or 1.0, text=text)

    @staticmethod
    def page_fragments(page) -> List[Fragment]:
        fragments = []
        d = page.get_text("dict")
        for block in d.get("blocks", []):
            for line in block.get("lines", []) or []:
                for span in line.get("spans", []) or []:
                    if (span.get("text") or "").strip():
                        fragments.append(PDFUtils.span_to_fragment(span))
        return fragments

    @staticmethod
    def extract_pages(source: Union[str, bytes]) -> List[PageContent]:
        """Decode every page into positioned fragments plus plain text."""
        doc = PDFUtils.open_document(source)
        pages = []
        try:
            for page_num in range(len(doc)):
                page = doc.load_page(page_num)
                pages.append(PageContent(
                    index=page_num,
                    fragments=PDFUtils.page_fragments(page),
                    text=page.get_text("text")
                ))
        except (RuntimeError, ValueError) as e:
            raise DocumentLoadError(f"Failed to extract page {len(pages) + 1}: {e}") from e
        finally:
            doc.close()
        return pages
