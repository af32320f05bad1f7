"""Request and response types for the multimodal generation endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

# --- Multimodal content parts ---


@dataclass(frozen=True, slots=True)
class TextPart:
    """A plain text content part."""

    text: str


@dataclass(frozen=True, slots=True)
class ImagePart:
    """An inline image content part (raw base64, no data-URI prefix)."""

    data: str
    media_type: str


ContentPart: TypeAlias = TextPart | ImagePart
Content: TypeAlias = str | tuple[ContentPart, ...]


# --- Core types ---


@dataclass(frozen=True, slots=True)
class Message:
    """A single conversation turn."""

    role: str
    content: Content = ""


@dataclass(frozen=True, slots=True)
class Usage:
    """Token usage counts."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True, slots=True)
class Response:
    """A completed generation."""

    text: str = ""
    usage: Usage = field(default_factory=Usage)
    stop_reason: str = ""
    raw: dict[str, object] = field(default_factory=dict)
