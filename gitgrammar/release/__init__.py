"""Release Package"""

from gitgrammar.release.notes import ReleaseCategory, classify_commits, format_release_notes, strip_commit_hash
from gitgrammar.release.versions import FIRST_RELEASE_CANDIDATES, suggest_from_tags, suggest_next_versions

__all__ = [
    "ReleaseCategory",
    "classify_commits",
    "format_release_notes",
    "strip_commit_hash",
    "FIRST_RELEASE_CANDIDATES",
    "suggest_from_tags",
    "suggest_next_versions",
]
