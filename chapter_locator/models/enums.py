"""Enumerations for chapter location."""

from enum import Enum


class CandidateForm(Enum):
    """How a heading candidate was assembled from page lines"""
    SINGLE_LINE = "single_line"
    SPLIT_LABEL = "split_label"


class RunningBand(Enum):
    """Vertical band a running header or footer recurs in"""
    TOP = "top"
    BOTTOM = "bottom"
