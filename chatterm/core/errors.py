"""Exception hierarchy shared by the client, the REPL and the entry point."""

from __future__ import annotations


class ChatClientError(Exception):
    """Base class for every failure that ends a chat session."""


class MissingCredentialError(ChatClientError):
    """``OPENAI_API_KEY`` is absent or empty at startup."""


class TransportError(ChatClientError):
    """The request never produced a response (connection, TLS or timeout)."""


class ResponseFormatError(ChatClientError):
    """The response body is not a chat completion.

    ``raw_body`` holds the body exactly as received so it can be shown to the
    operator; API error objects and HTML error pages end up here.
    """

    def __init__(self, message: str, raw_body: str = "") -> None:
        super().__init__(message)
        self.raw_body = raw_body


class ClipboardError(ChatClientError):
    """The system clipboard could not be written."""
