"""Conventional Commit Package"""

from gitgrammar.commit.grammar import (
    CommitType,
    ConventionalCommit,
    compose_commit_message,
    parse_commit_message,
    validate_commit_message,
)

__all__ = [
    "CommitType",
    "ConventionalCommit",
    "compose_commit_message",
    "parse_commit_message",
    "validate_commit_message",
]
