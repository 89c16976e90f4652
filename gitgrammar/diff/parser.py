"""Diff Parser - Turn raw unified diff text into per-file, per-hunk line structure."""

from dataclasses import dataclass, field
from enum import Enum
import re


class LineKind(str, Enum):
    """Data row types inside a hunk."""
    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"


class ScanState(Enum):
    """Where the scanner is between files and hunks."""
    NO_FILE = "no_file"
    IN_FILE = "in_file"
    IN_HUNK = "in_hunk"


@dataclass(frozen=True)
class DiffLine:
    """One rendered row of a patch."""
    kind: LineKind
    content: str
    old_line_number: int | None = None
    new_line_number: int | None = None


@dataclass(frozen=True)
class Hunk:
    """One contiguous change region, header kept verbatim for display."""
    header: str
    lines: tuple[DiffLine, ...] = ()
    old_start: int = 1
    old_count: int = 1
    new_start: int = 1
    new_count: int = 1
    section: str = ""


@dataclass(frozen=True)
class FilePatch:
    """One file's diff. Paths are empty for the missing side of a create/delete."""
    old_path: str
    new_path: str
    hunks: tuple[Hunk, ...] = ()

    @property
    def path(self) -> str:
        return self.new_path or self.old_path

    @property
    def is_new(self) -> bool:
        return not self.old_path and bool(self.new_path)

    @property
    def is_deleted(self) -> bool:
        return bool(self.old_path) and not self.new_path

    @property
    def additions(self) -> int:
        return sum(1 for h in self.hunks for line in h.lines if line.kind is LineKind.ADDED)

    @property
    def deletions(self) -> int:
        return sum(1 for h in self.hunks for line in h.lines if line.kind is LineKind.REMOVED)


HUNK_HEADER_RE = re.compile(r'^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@ ?(.*)$')

DEV_NULL = "/dev/null"


def _strip_path(raw: str, prefix: str) -> str:
    """Normalize a ---/+++ path: drop timestamp, CR, a/ or b/ prefix, /dev/null."""
    path = raw.split('\t', 1)[0].rstrip('\r')
    if path == DEV_NULL:
        return ""
    if path.startswith(prefix):
        path = path[len(prefix):]
    return path


@dataclass
class _OpenFile:
    old_path: str
    new_path: str = ""
    hunks: list[Hunk] = field(default_factory=list)


@dataclass
class _OpenHunk:
    header: str
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    section: str
    lines: list[DiffLine] = field(default_factory=list)


class DiffParser:
    """Single-pass scanner from unified diff text to FilePatch objects.

    The unified format carries no per-line numbers, only a starting pair per
    hunk, so the scanner replays the generator's bookkeeping: removed lines
    advance the old counter, added lines the new one, context lines both.

    Never raises; truncated or garbage input yields a partial result.
    """

    def __init__(self):
        self._reset()

    def _reset(self) -> None:
        self.state = ScanState.NO_FILE
        self.old_counter = 1
        self.new_counter = 1
        self._files: list[FilePatch] = []
        self._file: _OpenFile | None = None
        self._hunk: _OpenHunk | None = None

    def parse(self, raw: str) -> list[FilePatch]:
        """Main entry point: raw diff text -> list of FilePatch in input order."""
        self._reset()
        if not raw or not raw.strip():
            return []

        lines = raw.split('\n')
        # A trailing newline terminates the last line, it is not a blank context row
        if lines and lines[-1] == "":
            lines.pop()

        for line in lines:
            self.feed(line)
        return self.finish()

    def feed(self, line: str) -> None:
        """Advance the scanner by one line."""
        if line.startswith('--- '):
            self._flush_file()
            self._file = _OpenFile(old_path=_strip_path(line[4:], 'a/'))
            self.state = ScanState.IN_FILE
        elif line.startswith('+++ ') and self.state is not ScanState.NO_FILE:
            self._file.new_path = _strip_path(line[4:], 'b/')
        elif line.startswith('@@ ') and self.state is not ScanState.NO_FILE:
            self._flush_hunk()
            self._open_hunk(line)
        elif self.state is ScanState.IN_HUNK:
            self._add_line(line)

    def finish(self) -> list[FilePatch]:
        """Flush whatever is still open and return the collected files."""
        self._flush_file()
        files = self._files
        self._files = []
        self.state = ScanState.NO_FILE
        return files

    def _open_hunk(self, header: str) -> None:
        match = HUNK_HEADER_RE.match(header)
        if match:
            old_start = int(match.group(1))
            old_count = int(match.group(2)) if match.group(2) is not None else 1
            new_start = int(match.group(3))
            new_count = int(match.group(4)) if match.group(4) is not None else 1
            section = match.group(5).strip()
        else:
            old_start = old_count = new_start = new_count = 1
            section = ""

        self.old_counter = old_start
        self.new_counter = new_start
        self._hunk = _OpenHunk(
            header=header,
            old_start=old_start,
            old_count=old_count,
            new_start=new_start,
            new_count=new_count,
            section=section,
        )
        self.state = ScanState.IN_HUNK

    def _add_line(self, line: str) -> None:
        marker = line[:1]
        if marker == '+':
            row = DiffLine(LineKind.ADDED, line[1:], new_line_number=self.new_counter)
            self.new_counter += 1
        elif marker == '-':
            row = DiffLine(LineKind.REMOVED, line[1:], old_line_number=self.old_counter)
            self.old_counter += 1
        elif marker in (' ', ''):
            row = DiffLine(LineKind.CONTEXT, line[1:], self.old_counter, self.new_counter)
            self.old_counter += 1
            self.new_counter += 1
        else:
            # "\ No newline at end of file" and other non-data rows
            return
        self._hunk.lines.append(row)

    def _flush_hunk(self) -> None:
        if self._hunk is None:
            return
        h = self._hunk
        self._file.hunks.append(Hunk(
            header=h.header,
            lines=tuple(h.lines),
            old_start=h.old_start,
            old_count=h.old_count,
            new_start=h.new_start,
            new_count=h.new_count,
            section=h.section,
        ))
        self._hunk = None
        self.state = ScanState.IN_FILE

    def _flush_file(self) -> None:
        if self._file is None:
            return
        self._flush_hunk()
        f = self._file
        self._files.append(FilePatch(old_path=f.old_path, new_path=f.new_path, hunks=tuple(f.hunks)))
        self._file = None
        self.state = ScanState.NO_FILE


def parse_diff(raw: str) -> list[FilePatch]:
    """Parse unified diff text. Empty or malformed input gives an empty or partial list."""
    return DiffParser().parse(raw)
