"""CLI Argument Parsing"""

import argparse
import argcomplete

from gitgrammar import COMMIT_TYPE_NAMES, __version__
from gitgrammar.git import LOG_FORMAT, TAG_FORMAT


def _add_input(parser: argparse.ArgumentParser, what: str) -> None:
    parser.add_argument('file', nargs='?', default='-', metavar='FILE', help=f'{what} to read (default: stdin)')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gg',
        description='Parse and compose git text: diffs, commit messages, release notes, versions',
        epilog='Example: git diff | gg diff'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--color', type=str, choices=['auto', 'always', 'never'], help='Colorize output')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure defaults')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    sub = parser.add_subparsers(dest='command', metavar='COMMAND')

    # Diffs
    diff = sub.add_parser('diff', help='Render a unified diff with line numbers')
    _add_input(diff, 'Unified diff')
    diff.add_argument('--stat', action='store_true', help='Show changed files grouped by category')
    diff.add_argument('--json', action='store_true', help='Print parsed structure as JSON')
    diff.add_argument('--no-line-numbers', action='store_true', help='Hide old/new line number gutters')

    # Commit messages
    commit = sub.add_parser('commit', help='Parse, compose or lint conventional commit messages')
    commit_sub = commit.add_subparsers(dest='commit_command', metavar='ACTION')
    commit_sub.required = True

    parse = commit_sub.add_parser('parse', help='Split a commit message into its fields')
    _add_input(parse, 'Commit message')
    parse.add_argument('--json', action='store_true', help='Print fields as JSON')

    compose = commit_sub.add_parser('compose', help='Build a commit message from fields')
    compose.add_argument('-t', '--type', type=str, required=True, choices=COMMIT_TYPE_NAMES, help='Commit type')
    compose.add_argument('-s', '--scope', type=str, metavar='SCOPE', help='Optional scope: auth, ui, api...')
    compose.add_argument('--breaking', action='store_true', help='Mark as a breaking change (adds !)')
    compose.add_argument('-m', '--subject', type=str, required=True, metavar='TEXT', help='Short description')
    compose.add_argument('-b', '--body', type=str, metavar='TEXT', help='Additional context or migration notes')
    compose.add_argument('--copy', action='store_true', help='Copy the message to clipboard')

    lint = commit_sub.add_parser('lint', help='Check a message follows the conventional format')
    _add_input(lint, 'Commit message')
    lint.add_argument('--max-subject-length', type=int, metavar='N', help='Subject line limit (default: from config)')

    # Releases
    notes = sub.add_parser('notes', help='Build Markdown release notes from `git log --oneline`')
    _add_input(notes, 'One-line commit log')
    notes.add_argument('--no-emoji', action='store_true', help='Plain section titles')

    suggest = sub.add_parser('suggest', help='Suggest next versions after a tag')
    suggest.add_argument('tag', nargs='?', default=None, metavar='TAG', help='Latest tag (omit for a first release)')

    # Porcelain output
    log = sub.add_parser('log', help=f"Parse `git log --format={LOG_FORMAT.replace('%', '%%')}` output")
    _add_input(log, 'Log output')
    log.add_argument('--json', action='store_true', help='Print records as JSON')

    tags = sub.add_parser('tags', help=f"Parse `git tag -l --format={TAG_FORMAT.replace('%', '%%')}` output")
    _add_input(tags, 'Tag list output')
    tags.add_argument('--suggest', action='store_true', help='Suggest next versions after the newest tag')

    blame = sub.add_parser('blame', help='Parse `git blame --porcelain` output')
    _add_input(blame, 'Porcelain blame output')
    blame.add_argument('--json', action='store_true', help='Print records as JSON')

    remote = sub.add_parser('remote', help='Extract GitHub owner/repo from remote URLs')
    remote.add_argument('urls', nargs='+', metavar='URL', help='Remote URL(s), first GitHub match wins')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)
    if args.command is None and not (args.setup or args.display_config or args.install_completion):
        parser.print_help()
        parser.exit(2)
    return args
