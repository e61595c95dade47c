"""Minimal terminal chat client for OpenAI chat completions.

Commands (extended mode, enter them alone on a line)
-----------------------------------------------------
    c   copy the last reply to the clipboard
    r   resend your last message

Only the current message is sent to the model; nothing from earlier turns is
included. Any API or network error ends the program.

Environment variables
---------------------
* OPENAI_API_KEY – your OpenAI API key (required)
* OPENAI_BASE_URL – custom base URL (optional, for self-hosting/proxy)

Run `python -m chatterm` or the `chatterm` console script.
"""
# Re-export useful symbols for convenience
from .core import (
    ChatClientError,
    ClipboardError,
    MissingCredentialError,
    ResponseFormatError,
    TransportError,
    Turn,
)
from .core.client import CompletionClient, PERSONA, DEFAULT_MODEL
from .cli import ChatREPL, run_cli

__all__ = [
    "ChatClientError",
    "ClipboardError",
    "MissingCredentialError",
    "ResponseFormatError",
    "TransportError",
    "Turn",
    "CompletionClient",
    "PERSONA",
    "DEFAULT_MODEL",
    "ChatREPL",
    "run_cli",
]
