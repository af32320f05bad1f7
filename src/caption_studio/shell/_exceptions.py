"""Input validation errors raised before any network call."""

from __future__ import annotations

MISSING_IMAGE_MESSAGE = "Please upload an image first."
MISSING_TRIGGER_WORD_MESSAGE = "Please enter a trigger word for the captioner."


class ValidationFailure(ValueError):
    """The session's inputs are not complete enough to submit."""
