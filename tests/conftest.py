"""Shared test fixtures."""

from __future__ import annotations

import base64
from typing import Any
from unittest.mock import MagicMock

import pytest

from caption_studio.llm._types import Response
from caption_studio.shell._types import UploadedImage

# 1x1 transparent PNG.
PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


class MockResponse:
    """Mimics ``requests.Response`` for testing post_json."""

    def __init__(
        self,
        json_data: dict[str, Any] | None = None,
        status_code: int = 200,
        text: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self._json_data = json_data
        self.text = text or ""
        self.ok = 200 <= status_code < 300
        self.headers: dict[str, str] = headers or {}

    def json(self) -> dict[str, Any]:
        if self._json_data is None:
            raise ValueError("No JSON")
        return self._json_data


def gemini_text_response(text: str) -> dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
            }
        ],
        "usageMetadata": {
            "promptTokenCount": 258,
            "candidatesTokenCount": 12,
            "totalTokenCount": 270,
        },
    }


def mock_client(text: str = "") -> MagicMock:
    client = MagicMock()
    client.chat = MagicMock(return_value=Response(text=text))
    return client


@pytest.fixture
def png_image() -> UploadedImage:
    return UploadedImage.from_bytes(PNG_1X1, "pixel.png", "image/png")


@pytest.fixture
def mock_post(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.post`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.post", mock)
    return mock
