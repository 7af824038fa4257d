"""Line and layout processing modules."""

from .line_builder import LineReconstructor
from .layout_analyzer import LayoutAnalyzer
from .candidate_scorer import CandidateScorer

__all__ = ["LineReconstructor", "LayoutAnalyzer", "CandidateScorer"]
