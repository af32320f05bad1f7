"""Process configuration read from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_MODEL = "gemini-2.5-flash"
_PREFIX = "CAPTION_STUDIO_"


def _optional_float(env: Mapping[str, str], name: str) -> float | None:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings. The API key itself is resolved by the client."""

    model: str = DEFAULT_MODEL
    timeout: float | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if env is None else env
        return cls(
            model=env.get(f"{_PREFIX}MODEL", "").strip() or DEFAULT_MODEL,
            timeout=_optional_float(env, f"{_PREFIX}TIMEOUT"),
            log_level=env.get(f"{_PREFIX}LOG_LEVEL", "").strip().upper() or "INFO",
        )
