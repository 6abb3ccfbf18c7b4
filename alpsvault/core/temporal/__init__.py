"""Date-expression parsing and calendar helpers."""

from alpsvault.core.temporal.date_parser import (
    DatePatternMatch,
    DatePatternType,
    DateRange,
    match_patterns,
    range_for,
)

__all__ = [
    "DatePatternMatch",
    "DatePatternType",
    "DateRange",
    "match_patterns",
    "range_for",
]
