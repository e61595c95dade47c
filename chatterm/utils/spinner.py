"""Spinner shown next to the assistant label while a request is in flight."""
from __future__ import annotations

from yaspin import yaspin

from .ansi import console


class Spinner:
    """Display a small spinner next to a prefix while work is done.

    The spinner is only drawn when stdout is a real terminal; when output is
    piped or captured the prefix is printed once and nothing else.
    """

    def __init__(self, prefix: str = ""):
        self._prefix = prefix
        self._started = False
        self._spinner = yaspin(text="", side="right") if console.is_terminal else None

    def start(self) -> None:
        if self._started:
            return
        if self._spinner is not None:
            console.print(self._prefix, end="")
            console.file.flush()
            self._spinner.start()
        self._started = True

    def stop(self) -> None:
        if not self._started:
            return
        if self._spinner is not None:
            self._spinner.stop()
            # Back to column 0 so the reply line overwrites the prefix.
            console.print("\r", end="")
            console.file.flush()
        self._started = False

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
