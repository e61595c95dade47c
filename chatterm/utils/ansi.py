"""Colour and styling helpers built on :mod:`rich`."""

import os
from rich.console import Console


console = Console()
# Diagnostics (raw API bodies, fatal errors) never mix with the chat output.
err_console = Console(stderr=True)


class Ansi:
    """Lightweight collection of style names used throughout the app."""

    BOLD = "bold"
    DIM = "dim"

    FG_GREEN = "green"
    FG_CYAN = "cyan"
    FG_YELLOW = "yellow"
    FG_RED = "red"

    @staticmethod
    def style(text: str, *codes: str) -> str:
        """Return *text* wrapped in rich markup unless ``NO_COLOR`` is set."""
        if os.getenv("NO_COLOR") is not None:
            return text
        style = " ".join(codes)
        return f"[{style}]{text}[/]"


def print_verbatim(target: Console, label: str, text: str) -> None:
    """Print *label* (rich markup) followed by *text* exactly as received.

    Remote text bypasses markup, emoji codes, highlighting and wrapping.
    """
    target.print(label, end="")
    target.out(text, highlight=False)


# Common labels used throughout the application
USER_LABEL = Ansi.style("You", Ansi.FG_CYAN, Ansi.BOLD)
ASSISTANT_LABEL = Ansi.style("Chatbot", Ansi.FG_GREEN, Ansi.BOLD)
ERROR_LABEL = Ansi.style("error", Ansi.FG_RED, Ansi.BOLD)
