"""Blame Parser - Read `git blame --porcelain` output into per-line records."""

import re
from dataclasses import dataclass
from datetime import datetime, timezone

HEADER_RE = re.compile(r'^([0-9a-f]{40}) (\d+) (\d+)(?: \d+)?')


@dataclass
class BlameLine:
    """Final-file line with the commit that last touched it."""
    line_number: int
    hash: str
    author: str
    date: str
    content: str


def epoch_to_date(epoch: int) -> str:
    """Unix seconds -> UTC calendar date (YYYY-MM-DD)."""
    return datetime.fromtimestamp(epoch, tz=timezone.utc).strftime('%Y-%m-%d')


def parse_blame_porcelain(output: str) -> list[BlameLine]:
    """Parse porcelain blame.

    Git only prints author metadata the first time a commit appears, so
    metadata is remembered per commit and reused for its later line groups.
    """
    result = []
    seen: dict[str, tuple[str, str]] = {}
    current_hash = ""
    current_line = 0
    author = ""
    date = ""

    for line in output.splitlines():
        header = HEADER_RE.match(line)
        if header:
            current_hash = header.group(1)[:8]
            current_line = int(header.group(3))
            author, date = seen.get(current_hash, ("", ""))
        elif line.startswith('author '):
            author = line[len('author '):].strip()
        elif line.startswith('author-time '):
            raw = line[len('author-time '):].strip()
            if raw.isdigit():
                try:
                    date = epoch_to_date(int(raw))
                except (OverflowError, OSError, ValueError):
                    date = ""
        elif line.startswith('\t'):
            seen.setdefault(current_hash, (author, date))
            result.append(BlameLine(
                line_number=current_line,
                hash=current_hash,
                author=author,
                date=date,
                content=line[1:],
            ))

    return result
