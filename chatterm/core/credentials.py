"""Startup validation of the API key and construction of the SDK client."""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from openai import OpenAI  # type: ignore

from .errors import MissingCredentialError

API_KEY_ENV = "OPENAI_API_KEY"
BASE_URL_ENV = "OPENAI_BASE_URL"


def load_api_key(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the bearer token from the environment or raise.

    Called once before the interactive loop starts; the key is never re-read.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV, "").strip()
    if not api_key:
        raise MissingCredentialError(f"{API_KEY_ENV} environment variable is not set.")
    return api_key


def build_openai_client(api_key: str, environ: Optional[Mapping[str, str]] = None) -> OpenAI:
    """Create the process-wide SDK client with the key baked into its headers."""
    env = os.environ if environ is None else environ

    client_kwargs: Dict[str, Any] = {
        "api_key": api_key,
        # Failures surface immediately, the SDK would otherwise retry 429/5xx.
        "max_retries": 0,
    }
    base_url = env.get(BASE_URL_ENV)
    if base_url:
        client_kwargs["base_url"] = base_url

    return OpenAI(**client_kwargs)  # type: ignore[arg-type]
