"""
Interactive folder picker for barrelgen.

Prompts for a single directory with path completion. Ctrl+C, Ctrl+D or an
empty answer cancel the pick.
"""

from pathlib import Path
from typing import Optional

from prompt_toolkit import prompt
from prompt_toolkit.completion import PathCompleter

PICKER_MESSAGE = "Select the folder in which you want to create the barrel file: "


def pick_folder(message: str = PICKER_MESSAGE) -> Optional[Path]:
    """
    Ask the user for a folder.

    Args:
        message: Prompt text shown before the input.

    Returns:
        The entered path, or None if the user cancelled.
    """
    try:
        answer = prompt(
            message,
            completer=PathCompleter(only_directories=True, expanduser=True),
            complete_while_typing=True,
        )
    except (KeyboardInterrupt, EOFError):
        return None

    answer = answer.strip()
    if not answer:
        return None
    return Path(answer).expanduser()
