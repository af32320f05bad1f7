"""State held by an interactive captioning session."""

from __future__ import annotations

import base64
import mimetypes
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class Mode(StrEnum):
    """What the session generates from the uploaded image."""

    CAPTIONER = "Captioner"
    PROMPT = "Prompt"

    @property
    def noun(self) -> str:
        return "caption" if self is Mode.CAPTIONER else "prompt"


class UploadedFileLike(Protocol):
    """The subset of Streamlit's ``UploadedFile`` that sessions rely on."""

    name: str
    type: str

    def getvalue(self) -> bytes: ...


_FALLBACK_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True, slots=True)
class UploadedImage:
    """An image read fully into memory, base64-encoded."""

    data: str
    name: str
    mime_type: str

    @classmethod
    def from_bytes(cls, raw: bytes, name: str, mime_type: str | None = None) -> UploadedImage:
        if not mime_type:
            mime_type = mimetypes.guess_type(name)[0] or _FALLBACK_MIME_TYPE
        return cls(data=base64.b64encode(raw).decode("ascii"), name=name, mime_type=mime_type)

    @classmethod
    def from_upload(cls, uploaded: UploadedFileLike) -> UploadedImage:
        return cls.from_bytes(uploaded.getvalue(), uploaded.name, uploaded.type)


@dataclass(slots=True)
class SessionState:
    """Everything the page renders. Mutated only by ``CaptionSession``."""

    mode: Mode = Mode.CAPTIONER
    image: UploadedImage | None = None
    trigger_word: str = ""
    output: str = ""
    is_loading: bool = False
    error: str | None = None


@dataclass(frozen=True, slots=True)
class Submission:
    """Snapshot of the inputs of one in-flight request."""

    token: int
    mode: Mode
    image: UploadedImage
    trigger_word: str = ""
