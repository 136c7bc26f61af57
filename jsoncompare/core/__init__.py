"""Core types and logic for jsoncompare."""

from .canon import canon, to_json_text
from .filters import FieldFilter, parse_filter_text
from .json_diff import json_diff, values_equal
from .types import MISSING, SCALAR_KINDS, DifferenceRecord, NodeKind, classify

__all__ = [
    # Core types
    "DifferenceRecord",
    "NodeKind",
    "MISSING",
    "SCALAR_KINDS",
    "classify",
    # Canonicalization
    "canon",
    "to_json_text",
    # Filtering
    "FieldFilter",
    "parse_filter_text",
    # Diff
    "json_diff",
    "values_equal",
]
