"""Git Porcelain Parsers Package"""

from gitgrammar.git.blame import BlameLine, epoch_to_date, parse_blame_porcelain
from gitgrammar.git.log import LOG_FORMAT, TAG_FORMAT, CommitInfo, TagInfo, parse_log, parse_tag_list
from gitgrammar.git.remote import GitHubRemote, find_github_remote, parse_github_remote

__all__ = [
    "BlameLine",
    "epoch_to_date",
    "parse_blame_porcelain",
    "LOG_FORMAT",
    "TAG_FORMAT",
    "CommitInfo",
    "TagInfo",
    "parse_log",
    "parse_tag_list",
    "GitHubRemote",
    "find_github_remote",
    "parse_github_remote",
]
