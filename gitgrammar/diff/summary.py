"""Diff Summary - Group parsed file patches into a per-category change overview."""

from dataclasses import dataclass, field
from enum import IntEnum
import re

from gitgrammar.diff.parser import FilePatch


class Priority(IntEnum):
    """File category, in display order."""
    SOURCE = 1
    TEST = 2
    CONFIG = 3
    DOCS = 4
    NOISE = 99


PRIORITY_LABELS = {
    Priority.SOURCE: "Source",
    Priority.TEST: "Tests",
    Priority.CONFIG: "Config",
    Priority.DOCS: "Docs",
}


@dataclass
class DiffSummary:
    """Per-file change counts for a parsed diff, noise files filtered out."""
    file_details: list[tuple[str, int, int]] = field(default_factory=list)
    groups: list[tuple[Priority, list[FilePatch]]] = field(default_factory=list)
    total_files: int = 0
    filtered_files: int = 0

    @property
    def total_additions(self) -> int:
        return sum(a for _, a, _ in self.file_details)

    @property
    def total_deletions(self) -> int:
        return sum(d for _, _, d in self.file_details)


class DiffSummarizer:
    """Classifies changed files and orders them source-first."""

    NOISE_PATTERNS: list[str] = [
        r'package-lock\.json$', r'yarn\.lock$', r'pnpm-lock\.yaml$',
        r'poetry\.lock$', r'Cargo\.lock$', r'Gemfile\.lock$', r'composer\.lock$',
        r'\.min\.js$', r'\.min\.css$', r'\.map$', r'\.pyc$', r'__pycache__',
        r'\.class$', r'dist/', r'build/', r'\.egg-info/',
        r'\.idea/', r'\.vscode/', r'\.DS_Store$',
        r'node_modules/', r'vendor/', r'venv/', r'\.venv/',
    ]

    TEST_PATTERNS: list[str] = [
        r'test[s]?/', r'spec[s]?/', r'__tests__/',
        r'\.test\.', r'\.spec\.', r'_test\.', r'_spec\.', r'(^|/)test_[^/]*$',
        r'Test\.java$', r'Tests\.java$',
    ]

    CONFIG_PATTERNS: list[str] = [
        r'\.json$', r'\.ya?ml$', r'\.toml$', r'\.ini$', r'\.env',
        r'\.config\.', r'config/', r'settings/',
        r'Makefile$', r'Dockerfile$', r'docker-compose',
    ]

    DOCS_PATTERNS: list[str] = [
        r'\.md$', r'\.rst$', r'\.txt$', r'docs/',
        r'README', r'CHANGELOG', r'LICENSE',
    ]

    def __init__(self):
        self._noise_re = [re.compile(p, re.IGNORECASE) for p in self.NOISE_PATTERNS]
        self._test_re = [re.compile(p, re.IGNORECASE) for p in self.TEST_PATTERNS]
        self._config_re = [re.compile(p, re.IGNORECASE) for p in self.CONFIG_PATTERNS]
        self._docs_re = [re.compile(p, re.IGNORECASE) for p in self.DOCS_PATTERNS]

    def summarize(self, files: list[FilePatch]) -> DiffSummary:
        classified = [(f, self.get_priority(f.path)) for f in files]
        kept = [(f, p) for f, p in classified if p != Priority.NOISE]
        kept.sort(key=lambda x: (x[1], -(x[0].additions + x[0].deletions)))

        groups: list[tuple[Priority, list[FilePatch]]] = []
        for patch, priority in kept:
            if not groups or groups[-1][0] != priority:
                groups.append((priority, []))
            groups[-1][1].append(patch)

        return DiffSummary(
            file_details=[(f.path, f.additions, f.deletions) for f, _ in kept],
            groups=groups,
            total_files=len(files),
            filtered_files=len(classified) - len(kept),
        )

    def get_priority(self, path: str) -> Priority:
        if any(p.search(path) for p in self._noise_re):
            return Priority.NOISE
        if any(p.search(path) for p in self._test_re):
            return Priority.TEST
        if any(p.search(path) for p in self._docs_re):
            return Priority.DOCS
        if any(p.search(path) for p in self._config_re):
            return Priority.CONFIG
        return Priority.SOURCE
