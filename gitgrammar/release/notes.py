"""Release Notes - Group one-line commit summaries into Markdown sections."""

import re
from enum import Enum


class ReleaseCategory(Enum):
    """Release note sections, in output order."""
    FEATURES = ("feat", "✨", "Features")
    BUG_FIXES = ("fix", "🐛", "Bug Fixes")
    REFACTORS = ("refactor", "♻️", "Refactors")
    DOCS = ("docs", "📚", "Docs")
    OTHER = (None, "🔧", "Other")

    def __init__(self, commit_type: str | None, icon: str, label: str):
        self.commit_type = commit_type
        self.icon = icon
        self.label = label

    def title(self, emoji: bool = True) -> str:
        return f"{self.icon} {self.label}" if emoji else self.label

    @classmethod
    def for_message(cls, message: str) -> 'ReleaseCategory':
        """Pick the section for a commit subject by its conventional type token."""
        match = TYPE_TOKEN_RE.match(message)
        if match:
            for category in cls:
                if category.commit_type == match.group(1):
                    return category
        return cls.OTHER


# Leading commit hash from `git log --oneline`, abbreviated or full (SHA-1 or SHA-256)
HASH_PREFIX_RE = re.compile(r'^[0-9a-f]{4,} ')
TYPE_TOKEN_RE = re.compile(r'^(\w+)(?:\([^()]*\))?!?:')


def strip_commit_hash(line: str) -> str:
    return HASH_PREFIX_RE.sub('', line, count=1).strip()


def classify_commits(subjects: list[str]) -> dict[ReleaseCategory, list[str]]:
    """Bucket `<hash> <message>` lines by category, keeping input order within each.

    A line that is blank once its hash is stripped still counts as a commit and
    lands in Other.
    """
    groups: dict[ReleaseCategory, list[str]] = {category: [] for category in ReleaseCategory}
    for line in subjects:
        message = strip_commit_hash(line)
        groups[ReleaseCategory.for_message(message)].append(message)
    return groups


def format_release_notes(subjects: list[str], emoji: bool = True) -> str:
    """Render grouped commit subjects as Markdown. Empty input gives an empty string."""
    groups = classify_commits(subjects)
    sections = []
    for category, items in groups.items():
        if not items:
            continue
        bullets = '\n'.join(f"- {item}" for item in items)
        sections.append(f"### {category.title(emoji)}\n{bullets}")
    return '\n\n'.join(sections)
