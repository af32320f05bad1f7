"""Provider registry — maps provider names to factory functions."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from caption_studio.llm._exceptions import MissingCredentialsError
from caption_studio.llm._providers._gemini import GeminiProvider

if TYPE_CHECKING:
    from caption_studio.llm._providers._base import BaseProvider

# Checked in order; the first non-empty variable wins.
GEMINI_ENV_KEYS = ("GEMINI_API_KEY", "API_KEY")


def _resolve_key(env_vars: tuple[str, ...], api_key: str | None) -> str:
    key = api_key or next((os.environ[v] for v in env_vars if os.environ.get(v)), "")
    if not key:
        raise MissingCredentialsError(
            "No API key provided. Pass api_key= or set one of "
            f"{', '.join(env_vars)} in the environment."
        )
    return key


def create_provider(
    name: str,
    model: str,
    api_key: str | None = None,
    *,
    timeout: float | None = None,
) -> BaseProvider:
    """Create a provider instance by name."""
    if name == "gemini":
        return GeminiProvider(model, _resolve_key(GEMINI_ENV_KEYS, api_key), timeout=timeout)

    raise ValueError(f"Unknown provider {name!r}. Supported: ['gemini']")
