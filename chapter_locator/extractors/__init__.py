"""Page classification and heading candidate extraction."""

from .page_classifier import PageClassifier
from .heading_scanner import HeadingScanner

__all__ = ["PageClassifier", "HeadingScanner"]
