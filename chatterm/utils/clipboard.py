"""Clipboard access for the ``c`` command."""

import pyperclip

from ..core.errors import ClipboardError


def copy_to_clipboard(text: str) -> None:
    """Place *text* on the system clipboard.

    The clipboard backend is looked up on every call, nothing is kept open
    between copies.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"Could not access the system clipboard: {exc}") from exc
