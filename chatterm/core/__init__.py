from .errors import (
    ChatClientError,
    ClipboardError,
    MissingCredentialError,
    ResponseFormatError,
    TransportError,
)
from .turn import Turn

__all__ = [
    "ChatClientError",
    "ClipboardError",
    "MissingCredentialError",
    "ResponseFormatError",
    "TransportError",
    "Turn",
]
