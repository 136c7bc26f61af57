"""
Path filtering for the differ.

A path is suppressed when any filter string occurs anywhere inside it.
Matching is a plain, case-sensitive substring test: no wildcards, no
segment boundaries. A filter "id" therefore also suppresses "valid".
Because child paths extend their parent's path, a filter that matches a
node also matches every node below it.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple


class FieldFilter:
    """
    Ordered set of path substrings to exclude from comparison.

    Pure: no I/O, no mutation of the patterns it was built from.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        """
        Create a filter.

        Args:
            patterns: Substrings; any path containing one is suppressed
        """
        self.patterns: Tuple[str, ...] = tuple(patterns)

    def matches(self, path: str) -> bool:
        """Return True if any pattern is a substring of ``path``."""
        for pattern in self.patterns:
            if pattern in path:
                return True
        return False

    def __len__(self) -> int:
        return len(self.patterns)

    def __repr__(self) -> str:
        return f"FieldFilter({list(self.patterns)!r})"


def parse_filter_text(text: str) -> List[str]:
    """
    Parse newline-separated filter text.

    Each line is stripped. Blank lines are dropped, since an empty pattern
    is a substring of every path and would suppress the whole comparison.
    """
    patterns: List[str] = []
    for line in text.split("\n"):
        line = line.strip()
        if line:
            patterns.append(line)
    return patterns
