"""Client — the authenticated entry point to the generation endpoint."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from caption_studio.llm._providers import create_provider
from caption_studio.llm._types import Message, Response


class Client:
    """Generation client that delegates to a provider-specific implementation.

    Build one per process and reuse it for every request. The API key is
    resolved here, so a missing credential fails at construction rather than
    on the first call.

    Usage::

        from caption_studio import Client

        client = Client("gemini", model="gemini-2.5-flash")
        response = client.chat("Hello!")
        print(response.text)
    """

    def __init__(
        self,
        provider: str,
        *,
        model: str,
        api_key: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._provider = create_provider(provider, model, api_key, timeout=timeout)

    def chat(self, prompt_or_messages: str | Sequence[Message], **kwargs: Any) -> Response:
        """Send a request and return the provider's Response."""
        if isinstance(prompt_or_messages, str):
            messages = [Message(role="user", content=prompt_or_messages)]
        else:
            messages = list(prompt_or_messages)
        return self._provider.complete(messages, **kwargs)
