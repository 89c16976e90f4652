"""Version Suggester - Propose next semantic versions from the latest tag."""

import re

from gitgrammar.git.log import TagInfo

FIRST_RELEASE_CANDIDATES = ["v0.1.0", "v1.0.0"]

_NUMERIC_RE = re.compile(r'[0-9]+')


def suggest_next_versions(latest_tag: str | None) -> list[str]:
    """Return patch, minor and major bumps of `latest_tag`.

    No tag yet gives the first-release pair. A tag that isn't
    `v?MAJOR.MINOR.PATCH` gives an empty list, meaning "don't offer a picker".
    """
    if latest_tag is None or not latest_tag.strip():
        return list(FIRST_RELEASE_CANDIDATES)

    clean = latest_tag.strip()
    if clean.startswith('v'):
        clean = clean[1:]
    parts = clean.split('.')
    if len(parts) != 3 or not all(_NUMERIC_RE.fullmatch(p) for p in parts):
        return []

    major, minor, patch = (int(p) for p in parts)
    return [
        f"v{major}.{minor}.{patch + 1}",
        f"v{major}.{minor + 1}.0",
        f"v{major + 1}.0.0",
    ]


def suggest_from_tags(tags: list[TagInfo]) -> list[str]:
    """Suggest from a newest-first tag list, as `git tag --sort=-creatordate` returns it."""
    return suggest_next_versions(tags[0].name if tags else None)
