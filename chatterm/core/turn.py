"""The single remembered exchange between loop iterations."""

from typing import Optional


class Turn:
    """Most recent input and reply.

    Only one exchange is remembered; a new one overwrites the previous. The
    remote model never sees this state unless the caller re-embeds it in a
    prompt.
    """

    def __init__(self, last_input: Optional[str] = None, last_response: Optional[str] = None) -> None:
        self.last_input = last_input
        self.last_response = last_response

    @property
    def has_input(self) -> bool:
        return self.last_input is not None

    @property
    def has_response(self) -> bool:
        return self.last_response is not None

    def __repr__(self) -> str:
        return f"Turn(last_input={self.last_input!r}, last_response={self.last_response!r})"
