"""
Data models for field formatting
"""

from .pattern import (
    CharSegment,
    ExactlySegment,
    FormatPattern,
    FormattingResult,
    Segment,
    build_pattern,
)

__all__ = [
    "CharSegment",
    "ExactlySegment",
    "FormatPattern",
    "FormattingResult",
    "Segment",
    "build_pattern",
]
