"""Terminal clearing, selected once per platform at import time."""

import os
import subprocess

from .ansi import console


def _clear_windows() -> None:
    # Legacy conhost does not understand the ANSI clear sequence.
    subprocess.run("cls", shell=True, check=False)


def _clear_ansi() -> None:
    console.clear()


def _select_clear(os_name: str):
    return _clear_windows if os_name == "nt" else _clear_ansi


_clear_impl = _select_clear(os.name)


def clear_screen() -> None:
    """Clear the terminal and put the cursor in the top-left corner."""
    _clear_impl()
