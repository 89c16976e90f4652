"""CLI Utility Functions"""

import dataclasses
import json
import subprocess
import sys
from enum import Enum
from pathlib import Path


class GrammarInputError(Exception):
    """Raised when CLI input can't be read."""
    pass


def read_input(path: str) -> str:
    """Read a text file, or stdin when path is '-'."""
    if path == '-':
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as e:
            raise GrammarInputError(f"stdin is not valid UTF-8: {e}")

    file = Path(path)
    if not file.is_file():
        raise GrammarInputError(f"No such file: {path}")
    try:
        return file.read_text(encoding='utf-8')
    except UnicodeDecodeError:
        raise GrammarInputError(f"{path} is not valid UTF-8 text")
    except OSError as e:
        raise GrammarInputError(f"Could not read {path}: {e.strerror or e}")


def _to_jsonable(value):
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    return value


def to_json(value) -> str:
    """Serialize parsed records (dataclasses, enums, lists) as indented JSON."""
    return json.dumps(_to_jsonable(value), indent=2, ensure_ascii=False)


def copy_to_clipboard(text: str) -> tuple[bool, str]:
    """Copy text to clipboard. Returns (success, failure_reason)."""
    try:
        if sys.platform == 'win32':
            subprocess.run(['clip'], input=text.encode('utf-8'), check=True)
        elif sys.platform == 'darwin':
            subprocess.run(['pbcopy'], input=text.encode('utf-8'), check=True)
        else:
            try:
                subprocess.run(['xclip', '-selection', 'clipboard'], input=text.encode('utf-8'), check=True)
            except FileNotFoundError:
                subprocess.run(['xsel', '--clipboard', '--input'], input=text.encode('utf-8'), check=True)
        return True, ""
    except FileNotFoundError:
        if sys.platform == 'linux':
            return False, "Install xclip or xsel: sudo apt install xclip"
        return False, "No clipboard tool found"
    except (subprocess.CalledProcessError, OSError) as e:
        return False, f"Clipboard command failed: {e}"
