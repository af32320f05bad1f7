"""Generation client for the remote multimodal model."""

from caption_studio.llm._client import Client
from caption_studio.llm._exceptions import (
    APIError,
    EmptyResponseError,
    MissingCredentialsError,
    RateLimitError,
)
from caption_studio.llm._types import ImagePart, Message, Response, TextPart, Usage

__all__ = [
    "APIError",
    "Client",
    "EmptyResponseError",
    "ImagePart",
    "Message",
    "MissingCredentialsError",
    "RateLimitError",
    "Response",
    "TextPart",
    "Usage",
]
