"""Best-of-N candidate selection."""

from packbuild.selection.selector import WinningCandidate, is_strictly_smaller, select_smallest

__all__ = [
    "WinningCandidate",
    "is_strictly_smaller",
    "select_smallest",
]
