"""OpenAI chat-completion client returning plain text."""

from __future__ import annotations

import json
from contextlib import nullcontext
from typing import Any, Dict, List

import openai
from openai import OpenAI  # type: ignore

from ..utils.ansi import ASSISTANT_LABEL, err_console, print_verbatim
from ..utils.spinner import Spinner
from .errors import ResponseFormatError, TransportError

DEFAULT_MODEL = "gpt-3.5-turbo"

# Sent unchanged as the system message of every request.
PERSONA = "You are ChatGPT, a large language model trained by OpenAI."

BASIC_MAX_TOKENS = 200
EXTENDED_MAX_TOKENS = 3000


def parse_completion(body: str) -> str:
    """Extract the reply text from a chat-completion response body.

    The body must look like ``{"choices": [{"message": {"content": str}}]}``;
    every choice is checked but only the first one is returned, trimmed. An
    empty ``choices`` list yields ``""``.

    Raises :class:`ResponseFormatError` for anything else.
    """
    try:
        payload = json.loads(body)
        choices = payload["choices"]
        if not isinstance(choices, list):
            raise TypeError(f"'choices' is {type(choices).__name__}, expected list")
        contents: List[str] = []
        for idx, choice in enumerate(choices):
            content = choice["message"]["content"]
            if not isinstance(content, str):
                raise TypeError(f"choices[{idx}].message.content is not a string")
            contents.append(content)
    except (ValueError, KeyError, TypeError) as exc:
        raise ResponseFormatError(f"{type(exc).__name__}: {exc}", raw_body=body) from exc

    # TODO: an empty choices list is indistinguishable from a declined answer;
    # raise a dedicated NoChoicesError once callers can report it.
    return contents[0].strip() if contents else ""


class CompletionClient:
    """One request, one reply: no history, no streaming, no retries."""

    def __init__(
        self,
        client: OpenAI,
        *,
        model: str = DEFAULT_MODEL,
        max_tokens: int = BASIC_MAX_TOKENS,
        persona: str = PERSONA,
        show_spinner: bool = True,
    ) -> None:
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.persona = persona
        self.show_spinner = show_spinner

    def build_messages(self, prompt: str) -> List[Dict[str, Any]]:
        """Return the fixed two-message window for *prompt*."""
        return [
            {"role": "system", "content": self.persona},
            {"role": "user", "content": prompt},
        ]

    def _post(self, prompt: str) -> str:
        """Send the request and return the raw response body."""
        try:
            raw = self.client.chat.completions.with_raw_response.create(
                model=self.model,
                messages=self.build_messages(prompt),  # type: ignore[arg-type]
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as e:
            # 4xx/5xx still carry a body; it is judged like any other reply.
            return e.response.text
        except openai.APIConnectionError as e:
            raise TransportError(f"Request to the completion endpoint failed: {e}") from e
        return raw.http_response.text

    def complete(self, prompt: str) -> str:
        """Send *prompt* and return the first reply, trimmed.

        On a malformed body the raw text is written to stderr before the
        :class:`ResponseFormatError` propagates.
        """
        spinner = Spinner(prefix=f"{ASSISTANT_LABEL}: ") if self.show_spinner else nullcontext()
        with spinner:
            body = self._post(prompt)

        try:
            return parse_completion(body)
        except ResponseFormatError as e:
            print_verbatim(err_console, "Error deserializing response: ", str(e))
            print_verbatim(err_console, "Raw API response: ", body)
            raise
