"""Log Parser - Read `git log` and `git tag` porcelain lines into records."""

import re
from dataclasses import dataclass

# Formats these parsers expect from the backend
LOG_FORMAT = "%H|%h|%an|%ai|%s"
TAG_FORMAT = "%(refname:short)|%(objectname:short)|%(creatordate:short)|%(contents:subject)"


@dataclass
class CommitInfo:
    """One commit from `git log --format=%H|%h|%an|%ai|%s`."""
    hash: str
    short_hash: str
    author: str
    date: str
    message: str


@dataclass
class TagInfo:
    """One tag from `git tag -l --format=...`."""
    name: str
    commit_hash: str = ""
    date: str = ""
    message: str | None = None


def parse_log(output: str) -> list[CommitInfo]:
    """Parse log lines. Lines with fewer than five fields are skipped."""
    commits = []
    for line in output.splitlines():
        parts = line.split('|', 4)
        if len(parts) < 5:
            continue
        # "2024-03-01 12:30:00 +0100" or ISO "2024-03-01T12:30:00" -> "2024-03-01"
        date = re.split(r'[ T]', parts[3], maxsplit=1)[0]
        commits.append(CommitInfo(
            hash=parts[0],
            short_hash=parts[1],
            author=parts[2],
            date=date,
            message=parts[4],
        ))
    return commits


def parse_tag_list(output: str) -> list[TagInfo]:
    """Parse tag lines, newest first as git returns them. Blank lines are skipped."""
    tags = []
    for line in output.splitlines():
        if not line.strip():
            continue
        parts = [p.strip() for p in line.split('|', 3)]
        parts += [""] * (4 - len(parts))
        name, commit_hash, date, message = parts
        tags.append(TagInfo(name=name, commit_hash=commit_hash, date=date, message=message or None))
    return tags
