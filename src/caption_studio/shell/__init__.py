"""Interactive session state for the caption studio page."""

from caption_studio.shell._exceptions import (
    MISSING_IMAGE_MESSAGE,
    MISSING_TRIGGER_WORD_MESSAGE,
    ValidationFailure,
)
from caption_studio.shell._session import CaptionSession
from caption_studio.shell._types import Mode, SessionState, Submission, UploadedImage

__all__ = [
    "MISSING_IMAGE_MESSAGE",
    "MISSING_TRIGGER_WORD_MESSAGE",
    "CaptionSession",
    "Mode",
    "SessionState",
    "Submission",
    "UploadedImage",
    "ValidationFailure",
]
