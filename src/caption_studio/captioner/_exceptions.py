"""Exceptions surfaced to the user interface."""

from __future__ import annotations

CAPTION_FAILURE_MESSAGE = "Failed to generate caption. Please check the console for details."
IMAGE_PROMPT_FAILURE_MESSAGE = (
    "Failed to generate image prompt. Please check the console for details."
)


class GenerationFailure(RuntimeError):
    """A remote generation call failed.

    The message is always one of the generic, user-facing strings above. The
    underlying error is logged and chained as ``__cause__``.
    """

    def __init__(self, message: str, operation: str) -> None:
        self.operation = operation
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return str(self)
