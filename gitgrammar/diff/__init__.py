"""Unified Diff Package"""

from gitgrammar.diff.parser import DiffLine, DiffParser, FilePatch, Hunk, LineKind, ScanState, parse_diff
from gitgrammar.diff.summary import DiffSummarizer, DiffSummary, Priority, PRIORITY_LABELS

__all__ = [
    "DiffLine",
    "DiffParser",
    "FilePatch",
    "Hunk",
    "LineKind",
    "ScanState",
    "parse_diff",
    "DiffSummarizer",
    "DiffSummary",
    "Priority",
    "PRIORITY_LABELS",
]
