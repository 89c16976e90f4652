"""Commit Grammar - Parse and compose conventional commit messages."""

import re
from dataclasses import dataclass
from enum import Enum

from gitgrammar import COMMIT_TYPES


class CommitType(str, Enum):
    """The closed set of recognized conventional commit types.

    A breaking change marker "!" goes after the scope, e.g. "feat(api)!: drop v1 routes".
    """
    FEAT = "feat"
    FIX = "fix"
    CHORE = "chore"
    DOCS = "docs"
    REFACTOR = "refactor"
    TEST = "test"
    CI = "ci"
    PERF = "perf"
    STYLE = "style"
    REVERT = "revert"

    @property
    def description(self) -> str:
        return COMMIT_TYPES[self.value]

    @classmethod
    def from_token(cls, token: str | None) -> 'CommitType | None':
        """Return the member for a type token, or None if it's not a known type."""
        try:
            return cls(token)
        except ValueError:
            return None


@dataclass
class ConventionalCommit:
    """Structured form of a commit message."""
    commit_type: CommitType | None = None
    scope: str | None = None
    breaking: bool = False
    subject: str = ""
    body: str | None = None

    @property
    def is_conventional(self) -> bool:
        return self.commit_type is not None

    @property
    def header(self) -> str:
        return compose_commit_message(ConventionalCommit(
            commit_type=self.commit_type,
            scope=self.scope,
            breaking=self.breaking,
            subject=self.subject,
        ))

    def to_dict(self) -> dict:
        return {
            "type": self.commit_type.value if self.commit_type else None,
            "scope": self.scope,
            "breaking": self.breaking,
            "subject": self.subject,
            "body": self.body,
        }


# type(scope)!: subject, then optionally a blank line and the body
MESSAGE_RE = re.compile(r'(\w+)(?:\(([^()\n]*)\))?(!)?: ([^\n]+)(?:\n\n(.*))?', re.DOTALL)
BLANK_LINE_RE = re.compile(r'\n[ \t]*\n')
# C0/C1 control characters other than \n (\t and \r are normalized first)
CONTROL_RE = re.compile(r'[\x00-\x09\x0b-\x1f\x7f-\x9f]')


def _normalize_newlines(text: str) -> str:
    return text.replace('\r\n', '\n').replace('\r', '\n')


def _clean(text: str) -> str:
    return CONTROL_RE.sub('', _normalize_newlines(text).replace('\t', ' '))


def _one_line(text: str) -> str:
    return ' '.join(_clean(text).split())


def parse_commit_message(text: str) -> ConventionalCommit:
    """Parse commit text into structured fields.

    Messages that don't follow the grammar, or that use a type token outside
    the known set, fall back to "first line is the subject, everything after
    the first blank line is the body" with no type.
    """
    text = _normalize_newlines(text or "").strip()

    match = MESSAGE_RE.fullmatch(text)
    if match:
        commit_type = CommitType.from_token(match.group(1))
        if commit_type is not None:
            scope = (match.group(2) or "").strip()
            body = (match.group(5) or "").strip()
            return ConventionalCommit(
                commit_type=commit_type,
                scope=scope or None,
                breaking=match.group(3) == '!',
                subject=match.group(4).strip(),
                body=body or None,
            )

    subject = text.split('\n', 1)[0].strip()
    blank = BLANK_LINE_RE.search(text)
    body = text[blank.end():].strip() if blank else ""
    return ConventionalCommit(subject=subject, body=body or None)


def compose_commit_message(commit: ConventionalCommit) -> str:
    """Format fields as `type(scope)!: subject`, plus a blank line and body if any.

    Never fails. Absent fields are omitted without stray punctuation, and the
    result carries no control characters other than newlines.
    """
    subject = _one_line(commit.subject or "")
    scope = _one_line(commit.scope or "").replace('(', '').replace(')', '')
    body = _clean(commit.body or "").strip()

    if commit.commit_type is not None:
        scope_part = f"({scope})" if scope else ""
        breaking_mark = "!" if commit.breaking else ""
        header = f"{commit.commit_type.value}{scope_part}{breaking_mark}: {subject}".rstrip()
    else:
        header = subject

    return f"{header}\n\n{body}" if body else header


def validate_commit_message(text: str, max_subject_length: int = 72) -> tuple[bool, str]:
    """Check that a message follows the conventional commit grammar."""
    if not text or not text.strip():
        return False, "Empty commit message"

    first_line = _normalize_newlines(text).strip().split('\n')[0]
    match = re.match(r'^(\w+)(\([^()]*\))?!?: ', first_line)
    if not match:
        return False, f"Missing conventional commit format. Got: {first_line[:50]}"

    if CommitType.from_token(match.group(1)) is None:
        return False, f"Unknown commit type '{match.group(1)}'. Use one of: {', '.join(COMMIT_TYPES)}"

    if not first_line[match.end():].strip():
        return False, "Empty subject"
    if not parse_commit_message(text).is_conventional:
        return False, "Body must be separated from the subject by a blank line"
    if len(first_line) > max_subject_length:
        return False, f"Subject line is {len(first_line)} characters (max {max_subject_length})"

    return True, ""
