"""Thin HTTP helper around ``requests``."""

from __future__ import annotations

import contextlib
from typing import Any

import requests

from caption_studio.llm._exceptions import APIError, RateLimitError


def _raise_for_status(r: requests.Response) -> None:
    if r.ok:
        return
    try:
        body: dict[str, Any] | str = r.json()
    except Exception:
        body = r.text
    if r.status_code == 429:
        raw_retry = r.headers.get("Retry-After")
        retry_after: float | None = None
        if raw_retry is not None:
            with contextlib.suppress(ValueError, TypeError):
                retry_after = float(raw_retry)
        raise RateLimitError(r.status_code, body, retry_after)
    raise APIError(r.status_code, body)


def post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: float | None = None,
) -> dict[str, Any]:
    """POST JSON once and return the parsed response, raising on HTTP errors.

    ``timeout=None`` waits until the server answers or the transport fails.
    """
    r = requests.post(url, headers=headers, json=payload, timeout=timeout)
    _raise_for_status(r)
    return r.json()
