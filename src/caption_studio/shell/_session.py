"""CaptionSession — turns user actions into one generation call at a time."""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

from loguru import logger

from caption_studio.captioner._exceptions import GenerationFailure
from caption_studio.captioner._generate import generate_caption, generate_image_prompt
from caption_studio.shell._exceptions import (
    MISSING_IMAGE_MESSAGE,
    MISSING_TRIGGER_WORD_MESSAGE,
    ValidationFailure,
)
from caption_studio.shell._types import (
    Mode,
    SessionState,
    Submission,
    UploadedFileLike,
    UploadedImage,
)

if TYPE_CHECKING:
    from caption_studio.llm._client import Client


class CaptionSession:
    """State machine behind the page: Idle -> Submitting -> Idle.

    Changing the mode or the image clears output and error. Each submission
    carries a token; a result that arrives after the inputs have changed, or
    after a newer submission started, is discarded instead of overwriting the
    state that belongs to the current inputs.

    Usage::

        session = CaptionSession(client)
        session.upload_image(UploadedImage.from_bytes(raw, "cat.png"))
        session.set_trigger_word("my-cat")
        state = session.submit()
        print(state.output or state.error)
    """

    def __init__(self, client: Client, state: SessionState | None = None) -> None:
        self._client = client
        self.state = state or SessionState()
        self._token = 0
        self._upload_digest: str | None = None

    # --- Input changes ---

    def _reset_results(self) -> None:
        self._token += 1
        self.state.output = ""
        self.state.error = None
        self.state.is_loading = False

    def select_mode(self, mode: Mode) -> None:
        self.state.mode = Mode(mode)
        self._reset_results()

    def upload_image(self, image: UploadedImage) -> None:
        self.state.image = image
        self._upload_digest = None
        self._reset_results()

    def clear_image(self) -> None:
        self.state.image = None
        self._upload_digest = None
        self._reset_results()

    def sync_upload(self, uploaded: UploadedFileLike | None) -> None:
        """Mirror the file widget: a new file replaces the image, none clears it.

        Widgets hand back the same file on every rerun, so files are compared by
        content digest and an unchanged file leaves output and error alone.
        """
        if uploaded is None:
            if self.state.image is not None:
                self.clear_image()
            return
        raw = uploaded.getvalue()
        digest = hashlib.md5(raw).hexdigest()
        if digest == self._upload_digest:
            return
        self.upload_image(UploadedImage.from_bytes(raw, uploaded.name, uploaded.type))
        self._upload_digest = digest

    def set_trigger_word(self, word: str) -> None:
        self.state.trigger_word = word

    # --- Presentation ---

    @property
    def can_submit(self) -> bool:
        if self.state.is_loading:
            return False
        try:
            self.validate()
        except ValidationFailure:
            return False
        return True

    @property
    def placeholder_text(self) -> str:
        return f"Your generated {self.state.mode.noun} will appear here."

    @property
    def button_label(self) -> str:
        return "Generating..." if self.state.is_loading else f"Generate {self.state.mode}"

    # --- Submission ---

    def validate(self) -> UploadedImage:
        """Return the image to submit, or raise ``ValidationFailure``."""
        image = self.state.image
        if image is None or not image.data:
            raise ValidationFailure(MISSING_IMAGE_MESSAGE)
        if self.state.mode is Mode.CAPTIONER and not self.state.trigger_word.strip():
            raise ValidationFailure(MISSING_TRIGGER_WORD_MESSAGE)
        return image

    def begin_submit(self) -> Submission | None:
        """Validate and enter Submitting; return None if validation failed."""
        try:
            image = self.validate()
        except ValidationFailure as exc:
            self.state.error = str(exc)
            return None

        self._token += 1
        self.state.is_loading = True
        self.state.output = ""
        self.state.error = None
        return Submission(
            token=self._token,
            mode=self.state.mode,
            image=image,
            trigger_word=self.state.trigger_word,
        )

    def run(self, submission: Submission) -> str:
        """Issue the generation call for *submission*. Raises ``GenerationFailure``."""
        image = submission.image
        if submission.mode is Mode.CAPTIONER:
            return generate_caption(
                self._client, image.data, image.mime_type, submission.trigger_word
            )
        return generate_image_prompt(self._client, image.data, image.mime_type)

    def finish_submit(
        self,
        submission: Submission,
        *,
        output: str | None = None,
        error: str | None = None,
    ) -> bool:
        """Return to Idle with the outcome; False if the result was stale and dropped."""
        if submission.token != self._token:
            logger.debug(
                "Discarding stale {} result (token {} != {})",
                submission.mode,
                submission.token,
                self._token,
            )
            return False
        self.state.is_loading = False
        if error is not None:
            self.state.output = ""
            self.state.error = error
        else:
            self.state.output = output or ""
            self.state.error = None
        return True

    def submit(self) -> SessionState:
        """Validate, generate and record the outcome in one call."""
        submission = self.begin_submit()
        if submission is None:
            return self.state
        try:
            result = self.run(submission)
        except GenerationFailure as exc:
            self.finish_submit(submission, error=exc.user_message)
        else:
            self.finish_submit(submission, output=result)
        return self.state
