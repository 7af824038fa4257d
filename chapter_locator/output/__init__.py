"""Output generation modules."""

from .json_generator import JSONGenerator
from .summary_generator import ReportGenerator
from .pdf_splitter import PDFSplitter

__all__ = ["JSONGenerator", "ReportGenerator", "PDFSplitter"]
