"""CLI Main Entry Point"""

import sys

from gitgrammar.commit import CommitType, ConventionalCommit, compose_commit_message, parse_commit_message, validate_commit_message
from gitgrammar.config import load_config
from gitgrammar.diff import DiffSummarizer, LineKind, PRIORITY_LABELS, parse_diff
from gitgrammar.git import find_github_remote, parse_blame_porcelain, parse_log, parse_tag_list
from gitgrammar.output import (
    ARROW, CHECK, RULE, bold, colorize_commit_type, colorize_diff_line, dim, info,
    print_error, print_success, print_warning, set_color_mode, success, warning,
)
from gitgrammar.release import format_release_notes, suggest_from_tags, suggest_next_versions

from gitgrammar.cli.args import parse_args
from gitgrammar.cli.commands import display_config, run_setup, run_install_completion
from gitgrammar.cli.utils import GrammarInputError, copy_to_clipboard, read_input, to_json

LINE_MARKERS = {
    LineKind.ADDED: '+',
    LineKind.REMOVED: '-',
    LineKind.CONTEXT: ' ',
}


def _gutter(number: int | None) -> str:
    return f"{number:>5}" if number is not None else " " * 5


def _display_patch(files, line_numbers=True):
    """Render parsed file patches: file header, hunk headers, numbered rows."""
    for patch in files:
        label = patch.path or "(unknown file)"
        if patch.is_new:
            label += " (new)"
        elif patch.is_deleted:
            label += " (deleted)"
        elif patch.old_path and patch.new_path and patch.old_path != patch.new_path:
            label = f"{patch.old_path} {ARROW} {patch.new_path}"
        print(bold(label))

        for hunk in patch.hunks:
            print(info(hunk.header))
            for row in hunk.lines:
                text = f"{LINE_MARKERS[row.kind]}{row.content}"
                if line_numbers:
                    gutter = f"{_gutter(row.old_line_number)} {_gutter(row.new_line_number)} "
                    print(f"{dim(gutter)}{colorize_diff_line(row.kind.value, text)}")
                else:
                    print(colorize_diff_line(row.kind.value, text))


def _display_file_list(summary, max_shown):
    """Show changed files grouped by category, collapsing long lists.

    Args:
        summary: DiffSummary from DiffSummarizer
        max_shown: Maximum files to display before collapsing (from config)
    """
    if not summary.file_details:
        if summary.filtered_files > 0:
            print(dim(f"  {summary.filtered_files} noise files filtered"))
        return
    print(bold("Changed files:"))
    shown = 0
    for priority, patches in summary.groups:
        if shown >= max_shown:
            break
        print(f"\n[{PRIORITY_LABELS.get(priority, 'Other')}]")
        for patch in patches:
            if shown >= max_shown:
                break
            print(dim(f"  {patch.path} (+{patch.additions} -{patch.deletions})"))
            shown += 1
    remaining = len(summary.file_details) - shown
    if remaining > 0:
        print(dim(f"  ... and {remaining} more files"))
    if summary.filtered_files > 0:
        print(dim(f"  {summary.filtered_files} noise files filtered"))
    print(f"\n{len(summary.file_details)} files changed, "
          f"{success('+' + str(summary.total_additions))} {warning('-' + str(summary.total_deletions))}")


def _display_message(message):
    """Display commit message with horizontal rules and colored type."""
    colored = colorize_commit_type(message)
    lines = colored.split('\n')
    # Use raw message for width calculation (no ANSI codes)
    raw_lines = message.split('\n')
    width = max((len(line) for line in raw_lines), default=40)
    print(f"\n{dim(RULE * width)}")
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim(RULE * width))


def _display_commit_fields(commit):
    """Show parsed commit fields, one per line."""
    if commit.commit_type is None:
        print(f"{dim('type:    ')} {warning('(none, not a conventional commit)')}")
    else:
        print(f"{dim('type:    ')} {info(commit.commit_type.value)}")
        print(f"{dim('scope:   ')} {commit.scope or dim('(none)')}")
        print(f"{dim('breaking:')} {'yes' if commit.breaking else 'no'}")
    print(f"{dim('subject: ')} {bold(commit.subject)}")
    if commit.body:
        print(dim('body:'))
        for line in commit.body.split('\n'):
            print(f"  {line}")


def _copy_and_report(message, copy, stream=None):
    """Copy message to clipboard and print result to stream (stdout by default)."""
    if not copy:
        return
    stream = stream or sys.stdout
    copied, reason = copy_to_clipboard(message)
    if copied:
        print(f"{success(CHECK)} Copied to clipboard!", file=stream)
    else:
        print(f"{warning('!')} Could not copy to clipboard{': ' + reason if reason else ''}", file=stream)
        print(dim("  Select the message above to copy manually."), file=stream)


def _handle_subcommands(args):
    """Handle setup/config flags that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    if args.setup:
        return run_setup(), True
    return 0, False


def _run_diff(args, config):
    files = parse_diff(read_input(args.file))
    if args.json:
        print(to_json(files))
        return 0
    if not files:
        print(dim("No diff available"))
        return 0
    if args.stat:
        _display_file_list(DiffSummarizer().summarize(files), config.max_file_display)
        return 0
    _display_patch(files, line_numbers=config.line_numbers and not args.no_line_numbers)
    return 0


def _run_commit(args, config):
    if args.commit_command == 'compose':
        if not args.subject.strip():
            print_error("Subject is empty")
            return 1
        message = compose_commit_message(ConventionalCommit(
            commit_type=CommitType(args.type),
            scope=args.scope,
            breaking=args.breaking,
            subject=args.subject,
            body=args.body,
        ))
        # Pipe mode: stdout carries only the raw message so it can feed `git commit -F -`
        if not sys.stdout.isatty():
            print(message)
            _copy_and_report(message, args.copy, stream=sys.stderr)
            return 0
        _display_message(message)
        _copy_and_report(message, args.copy)
        return 0

    text = read_input(args.file)
    if args.commit_command == 'parse':
        commit = parse_commit_message(text)
        if args.json:
            print(to_json(commit.to_dict()))
        else:
            _display_commit_fields(commit)
        return 0

    # lint
    max_length = args.max_subject_length or config.max_subject_length
    ok, reason = validate_commit_message(text, max_subject_length=max_length)
    if ok:
        print_success("Valid conventional commit")
        return 0
    print_error(reason)
    return 1


def _run_notes(args, config):
    lines = [line for line in read_input(args.file).splitlines() if line.strip()]
    notes = format_release_notes(lines, emoji=config.emoji and not args.no_emoji)
    print(notes or config.no_changes_placeholder)
    return 0


def _print_suggestions(suggestions, latest):
    if suggestions:
        for version in suggestions:
            print(version)
        return 0
    print_warning(f"Cannot suggest versions after '{latest}' (expected vMAJOR.MINOR.PATCH)")
    return 1


def _run_suggest(args, config):
    return _print_suggestions(suggest_next_versions(args.tag), args.tag)


def _run_log(args, config):
    commits = parse_log(read_input(args.file))
    if args.json:
        print(to_json(commits))
        return 0
    for c in commits:
        print(f"{info(c.short_hash)} {dim(c.date)} {c.author}: {colorize_commit_type(c.message)}")
    return 0


def _run_tags(args, config):
    tags = parse_tag_list(read_input(args.file))
    if args.suggest:
        return _print_suggestions(suggest_from_tags(tags), tags[0].name if tags else None)
    if not tags:
        print(dim("No releases yet"))
        return 0
    for tag in tags:
        message = f"  {tag.message}" if tag.message else ""
        print(f"{bold(tag.name)} {dim(tag.commit_hash)} {dim(tag.date)}{message}")
    return 0


def _run_blame(args, config):
    lines = parse_blame_porcelain(read_input(args.file))
    if args.json:
        print(to_json(lines))
        return 0
    width = max((len(line.author) for line in lines), default=0)
    for line in lines:
        print(f"{info(line.hash)} {line.author:<{width}} {dim(line.date)} {line.line_number:>5}: {line.content}")
    return 0


def _run_remote(args, config):
    remote = find_github_remote(args.urls)
    if remote is None:
        print_error("No GitHub remote found")
        return 1
    print(remote.slug)
    if sys.stdout.isatty():
        print(dim(remote.releases_url))
    return 0


HANDLERS = {
    'diff': _run_diff,
    'commit': _run_commit,
    'notes': _run_notes,
    'suggest': _run_suggest,
    'log': _run_log,
    'tags': _run_tags,
    'blame': _run_blame,
    'remote': _run_remote,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Load config and apply color preference before any output
    config = load_config()
    set_color_mode(args.color or config.color)

    # Handle setup/config flags that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    try:
        return HANDLERS[args.command](args, config)
    except GrammarInputError as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
