"""
Git Grammar

Parsers and composers for the text that version-control tooling produces:
unified diffs, conventional commit messages, release notes and version tags.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth
# Used by: commit/grammar.py (CommitType), cli/args.py (argparse choices), output (colors)
COMMIT_TYPES = {
    'feat': 'New feature',
    'fix': 'Bug fix',
    'chore': 'Build/tool changes',
    'docs': 'Documentation',
    'refactor': 'Code restructuring',
    'test': 'Adding tests',
    'ci': 'CI/CD changes',
    'perf': 'Performance tweak',
    'style': 'Formatting, whitespace',
    'revert': 'Revert a commit',
}

# List of type names for validation and argparse
COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
