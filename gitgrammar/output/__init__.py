"""Terminal Output Formatting Package"""

import re
import sys
import os


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except (AttributeError, OSError):
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
ARROW = '→' if UNICODE_ENABLED else '->'
RULE = '─' if UNICODE_ENABLED else '-'


def set_color_mode(mode: str) -> None:
    """Apply the `color` setting: 'always', 'never', or 'auto' (detect)."""
    global COLORS_ENABLED
    if mode == 'always':
        COLORS_ENABLED = True
    elif mode == 'never':
        COLORS_ENABLED = False
    else:
        COLORS_ENABLED = _supports_color()


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    text = f"{warning('⚠')} {warning(message)}" if UNICODE_ENABLED else f"[!] {message}"
    print(text, file=sys.stderr)


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'chore': Colors.DIM,
    'docs': Colors.CYAN,
    'refactor': Colors.MAGENTA,
    'test': Colors.YELLOW,
    'ci': Colors.BLUE,
    'perf': Colors.YELLOW,
    'style': Colors.MAGENTA,
    'revert': Colors.RED,
}

DIFF_LINE_COLORS = {
    'added': Colors.GREEN,
    'removed': Colors.RED,
    'context': '',
}


def colorize_commit_type(message: str) -> str:
    """Color the commit type prefix on the first line of a commit message."""
    if not COLORS_ENABLED:
        return message
    lines = message.split('\n')
    if not lines:
        return message
    match = re.match(r'^(\w+)(\([^)]*\))?(!?:)', lines[0])
    if match:
        commit_type = match.group(1)
        color = COMMIT_TYPE_COLORS.get(commit_type)
        if color:
            prefix = match.group(0)
            lines[0] = _colorize(prefix, Colors.BOLD, color) + lines[0][len(prefix):]
    return '\n'.join(lines)


def colorize_diff_line(kind: str, text: str) -> str:
    """Color a rendered diff row by its line kind ('added', 'removed', 'context')."""
    color = DIFF_LINE_COLORS.get(kind)
    if not color:
        return text
    return _colorize(text, color)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "ARROW", "RULE",
    "set_color_mode",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning",
    "colorize_commit_type", "colorize_diff_line",
    "COMMIT_TYPE_COLORS", "DIFF_LINE_COLORS",
]
