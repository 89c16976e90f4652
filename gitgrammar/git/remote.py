"""Remote Parser - Extract GitHub owner/repo from a remote URL."""

import re
from dataclasses import dataclass

HTTPS_RE = re.compile(r'github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$')
SSH_RE = re.compile(r'github\.com:([^/]+)/([^/]+?)(?:\.git)?$')


@dataclass(frozen=True)
class GitHubRemote:
    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def releases_url(self) -> str:
        return f"https://github.com/{self.slug}/releases"


def parse_github_remote(url: str) -> GitHubRemote | None:
    """Parse https or ssh GitHub remotes. Anything else gives None."""
    url = (url or "").strip()
    match = HTTPS_RE.search(url) or SSH_RE.search(url)
    if not match:
        return None
    return GitHubRemote(owner=match.group(1), repo=match.group(2))


def find_github_remote(urls: list[str]) -> GitHubRemote | None:
    """First GitHub remote among a repository's remote URLs."""
    for url in urls:
        remote = parse_github_remote(url)
        if remote:
            return remote
    return None
