"""CLI Commands"""

import os
import sys

from gitgrammar.config import Config, VALID_COLOR_MODES, load_config, save_config, get_config_path
from gitgrammar.output import bold, dim, info, print_success


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .ggrc found)")

    env_color = os.environ.get('GG_COLOR')
    if env_color:
        print(f"  {dim('Environment overrides:')}")
        print(f"    GG_COLOR={env_color}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    color:                  {info(config.color)}")
    print(f"    line_numbers:           {info(str(config.line_numbers).lower())}")
    print(f"    emoji:                  {info(str(config.emoji).lower())}")
    print(f"    max_subject_length:     {info(str(config.max_subject_length))}")
    print(f"    max_file_display:       {info(str(config.max_file_display))}")
    print(f"    no_changes_placeholder: {info(config.no_changes_placeholder)}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .ggrc (in current directory)")
    print(f"    Global: ~/.ggrc")
    print(f"\n  {dim('Run')} gg --setup {dim('to configure')}\n")

    return 0


def _ask_yes_no(question: str, default: bool) -> bool:
    hint = "Y/n" if default else "y/N"
    print(f"\n{question} [{hint}]: ", end='')
    answer = input().strip().lower()
    if not answer:
        return default
    return answer != 'n'


def run_setup() -> int:
    """Quick setup wizard."""
    display_config()
    print(f"{bold('Setup Wizard')}\n")

    print("Colorize output:\n")
    print("  1. auto - when writing to a terminal (default)")
    print("  2. always")
    print("  3. never\n")

    modes = {'': 'auto', '1': 'auto', '2': 'always', '3': 'never'}
    while True:
        choice = input("Select [1/2/3] (Enter for default): ").strip()
        if choice in modes:
            color = modes[choice]
            break

    line_numbers = _ask_yes_no("Show line numbers in diffs?", True)
    emoji = _ask_yes_no("Use emoji in release note headings?", True)

    print("\nMax subject line length (Enter for 72): ", end='')
    max_len_input = input().strip()
    max_subject_length = int(max_len_input) if max_len_input.isdigit() and int(max_len_input) > 0 else 72

    config = Config(
        color=color if color in VALID_COLOR_MODES else 'auto',
        line_numbers=line_numbers,
        emoji=emoji,
        max_subject_length=max_subject_length,
    )
    path = save_config(config, global_config=True)

    print_success(f"Saved to {path}")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        line = 'eval "$(register-python-argcomplete gg)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell gg | Out-String | Invoke-Expression\n")
        print("To make it permanent, add to your $PROFILE:\n")
        print("  register-python-argcomplete --shell powershell gg | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print('  eval "$(register-python-argcomplete gg)"\n')
        print(f"  {dim('# PowerShell')}")
        print("  register-python-argcomplete --shell powershell gg | Out-String | Invoke-Expression\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish gg | source")

    print(f"\n{dim('After setup, press TAB to autocomplete commands and flags.')}")
    return 0
