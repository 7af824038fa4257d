"""Utility modules for chapter location."""

from .pdf_utils import PDFUtils
from .text_processor import TextProcessor

__all__ = ["PDFUtils", "TextProcessor"]
