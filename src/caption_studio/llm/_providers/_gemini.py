"""Provider for the Google Gemini generateContent API."""

from __future__ import annotations

from typing import Any

from loguru import logger

from caption_studio.llm._exceptions import EmptyResponseError
from caption_studio.llm._http import post_json
from caption_studio.llm._providers._base import BaseProvider
from caption_studio.llm._types import Content, ImagePart, Message, Response, TextPart, Usage

_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def _content_to_gemini_parts(content: Content) -> list[dict[str, Any]]:
    """Convert Content to Gemini parts format."""
    if isinstance(content, str):
        return [{"text": content}]
    parts: list[dict[str, Any]] = []
    for part in content:
        if isinstance(part, ImagePart):
            parts.append({"inlineData": {"mimeType": part.media_type, "data": part.data}})
        elif isinstance(part, TextPart):
            parts.append({"text": part.text})
    return parts


def _messages_to_contents(messages: list[Message]) -> list[dict[str, Any]]:
    contents: list[dict[str, Any]] = []
    for msg in messages:
        if msg.role != "user":
            raise ValueError(f"Only user turns are sent to Gemini, got role {msg.role!r}.")
        contents.append({"role": "user", "parts": _content_to_gemini_parts(msg.content)})
    return contents


def _parse_response(raw: dict[str, Any]) -> Response:
    candidates = raw.get("candidates") or []
    if not candidates:
        reason = raw.get("promptFeedback", {}).get("blockReason", "no candidates")
        raise EmptyResponseError(str(reason), raw)

    candidate = candidates[0]
    parts = candidate.get("content", {}).get("parts", [])
    text = "".join(part["text"] for part in parts if "text" in part)
    if not text.strip():
        raise EmptyResponseError(candidate.get("finishReason") or "blank text", raw)

    raw_usage = raw.get("usageMetadata", {})
    usage = Usage(
        input_tokens=raw_usage.get("promptTokenCount", 0),
        output_tokens=raw_usage.get("candidatesTokenCount", 0),
        total_tokens=raw_usage.get("totalTokenCount", 0),
    )

    # Left untrimmed; callers decide how to normalise whitespace.
    return Response(
        text=text,
        usage=usage,
        stop_reason=candidate.get("finishReason", ""),
        raw=raw,
    )


class GeminiProvider(BaseProvider):
    """Google Gemini generateContent provider."""

    def __init__(self, model: str, api_key: str, *, timeout: float | None = None) -> None:
        super().__init__(timeout=timeout)
        self._model = model
        self._url = f"{_BASE_URL}/{model}:generateContent"
        self._headers = {
            "x-goog-api-key": api_key,
            "Content-Type": "application/json",
        }

    @property
    def model(self) -> str:
        return self._model

    def _build_payload(self, messages: list[Message], **kwargs: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {"contents": _messages_to_contents(messages)}

        gen_config: dict[str, Any] = {}
        if "temperature" in kwargs:
            gen_config["temperature"] = kwargs.pop("temperature")
        if "max_tokens" in kwargs:
            gen_config["maxOutputTokens"] = kwargs.pop("max_tokens")
        if "top_p" in kwargs:
            gen_config["topP"] = kwargs.pop("top_p")
        if gen_config:
            payload["generationConfig"] = gen_config

        return payload

    def complete(self, messages: list[Message], **kwargs: Any) -> Response:
        timeout = kwargs.pop("timeout", self._timeout)
        payload = self._build_payload(messages, **kwargs)
        logger.debug("POST {} ({} message(s))", self._url, len(messages))
        raw = post_json(self._url, self._headers, payload, timeout=timeout)
        return _parse_response(raw)
