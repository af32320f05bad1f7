"""Abstract base for generation providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from caption_studio.llm._types import Message, Response


class BaseProvider(ABC):
    """Interface that every provider must implement."""

    def __init__(self, *, timeout: float | None = None) -> None:
        self._timeout = timeout

    @abstractmethod
    def complete(self, messages: list[Message], **kwargs: Any) -> Response: ...
