"""Terminal chat loop built on top of OpenAI chat completions.

Two variants share the same loop:

* basic    - every line is sent as a message.
* extended - ``c`` copies the last reply, ``r`` resends the last message,
             the screen is cleared at startup.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .core import ChatClientError, Turn
from .core.client import (
    BASIC_MAX_TOKENS,
    DEFAULT_MODEL,
    EXTENDED_MAX_TOKENS,
    CompletionClient,
)
from .core.credentials import build_openai_client, load_api_key
from .utils import (
    Ansi,
    ASSISTANT_LABEL,
    ERROR_LABEL,
    USER_LABEL,
    clear_screen,
    console,
    copy_to_clipboard,
    err_console,
    print_verbatim,
)

if sys.platform != "win32":
    import readline  # noqa: F401 – side-effect: history & line editing

PROMPT_TEMPLATE = "User: {message}\nChatbot:"

COPY_COMMAND = "c"
RESEND_COMMAND = "r"

INTRO = "Hi! Type a message and press Enter."
FOOTER = "(c) copy the reply   (r) resend your last message"


class ChatREPL:
    """Read a line, ask the model, print the reply, forever."""

    def __init__(
        self,
        client: CompletionClient,
        *,
        extended: bool = True,
        turn: Optional[Turn] = None,
    ) -> None:
        self.client = client
        self.extended = extended
        self.turn = turn if turn is not None else Turn()
        self._intro_shown = False

    # ---------------- Helpers ----------------

    @staticmethod
    def compose_prompt(message: str) -> str:
        return PROMPT_TEMPLATE.format(message=message)

    def classify(self, line: str) -> str:
        """Return ``"copy"``, ``"resend"`` or ``"message"`` for *line*."""
        if not self.extended:
            return "message"
        cmd = line.strip().lower()
        if cmd == COPY_COMMAND:
            return "copy"
        if cmd == RESEND_COMMAND:
            return "resend"
        return "message"

    # ---------------- Command handling ---------------

    def copy_last_response(self) -> None:
        if not self.turn.has_response:
            console.print(Ansi.style("Nothing to copy yet.", Ansi.FG_YELLOW))
            return
        copy_to_clipboard(self.turn.last_response)
        console.print(Ansi.style("Copied the last reply to the clipboard.", Ansi.FG_GREEN))

    def send(self, message: str) -> str:
        """Ask the model about *message*, print and remember the reply."""
        reply = self.client.complete(self.compose_prompt(message))

        print_verbatim(console, f"{ASSISTANT_LABEL}: ", reply)
        self.turn.last_response = reply
        if self.extended:
            console.print(Ansi.style(FOOTER, Ansi.DIM))
        return reply

    def handle_line(self, line: str) -> None:
        """Process one line of operator input.

        Errors from the client or the clipboard are not caught here.
        """
        kind = self.classify(line)

        if kind == "copy":
            self.copy_last_response()
            return

        if kind == "resend":
            if not self.turn.has_input:
                console.print(Ansi.style("Nothing to resend yet.", Ansi.FG_YELLOW))
                return
            message = self.turn.last_input
        else:
            message = line.strip()
            if self.extended and self.turn.has_input:
                print_verbatim(console, Ansi.style("Previous: ", Ansi.DIM), self.turn.last_input)
            self.turn.last_input = message

        self.send(message)

    # ---------------- Interaction loop ---------------

    def repl(self) -> None:
        """Run the interactive read–eval–print-loop.

        There is no quit command; the loop ends on end of input, Ctrl-C, or
        when an error propagates out of :meth:`handle_line`.
        """
        if self.extended:
            clear_screen()

        while True:
            if self.extended and not self._intro_shown:
                console.print(Ansi.style(INTRO, Ansi.FG_YELLOW))
                self._intro_shown = True

            try:
                line = console.input(f"{USER_LABEL}: ")
            except (EOFError, KeyboardInterrupt):
                console.print("\n(input closed, exiting)")
                break

            self.handle_line(line)


# ---------------------------------------------------------------------------
# Entrypoint helpers (keeping it separate simplifies __main__ handling)
# ---------------------------------------------------------------------------

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Minimal terminal chat client for OpenAI chat completions."
    )
    parser.add_argument(
        "--basic",
        action="store_true",
        help="Bare loop without the copy/resend commands and screen clearing",
    )
    parser.add_argument("--model", "-m", help=f"Model name (default: {DEFAULT_MODEL})", default=DEFAULT_MODEL)
    parser.add_argument(
        "--max-tokens",
        type=int,
        help=f"Reply token bound (default: {BASIC_MAX_TOKENS} basic, {EXTENDED_MAX_TOKENS} extended)",
    )
    return parser.parse_args(argv)


def run_cli(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)

    max_tokens = args.max_tokens
    if max_tokens is None:
        max_tokens = BASIC_MAX_TOKENS if args.basic else EXTENDED_MAX_TOKENS

    try:
        # The key is checked before anything touches the terminal.
        api_key = load_api_key()
        client = CompletionClient(
            build_openai_client(api_key),
            model=args.model,
            max_tokens=max_tokens,
        )
        ChatREPL(client, extended=not args.basic).repl()
    except ChatClientError as exc:
        print_verbatim(err_console, f"{ERROR_LABEL}: ", str(exc))
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    run_cli()
