"""Tests for the CaptionSession state machine."""

from __future__ import annotations

from dataclasses import dataclass
from unittest.mock import MagicMock, patch

import pytest

from caption_studio.captioner import (
    CAPTION_FAILURE_MESSAGE,
    IMAGE_PROMPT_FAILURE_MESSAGE,
    GenerationFailure,
)
from caption_studio.llm._client import Client
from caption_studio.llm._types import ImagePart
from caption_studio.shell import (
    MISSING_IMAGE_MESSAGE,
    MISSING_TRIGGER_WORD_MESSAGE,
    CaptionSession,
    Mode,
    UploadedImage,
    ValidationFailure,
)
from tests.conftest import PNG_1X1, MockResponse, gemini_text_response, mock_client


@dataclass
class _WidgetFile:
    name: str
    type: str
    payload: bytes

    def getvalue(self) -> bytes:
        return self.payload


def _session(text: str = "") -> CaptionSession:
    return CaptionSession(mock_client(text))


def test_initial_state() -> None:
    session = _session()
    state = session.state
    assert state.mode is Mode.CAPTIONER
    assert state.image is None
    assert state.output == ""
    assert state.error is None
    assert state.is_loading is False
    assert session.can_submit is False


# --- Scenarios ---


def test_captioner_scenario_trims_output(png_image: UploadedImage) -> None:
    session = _session("  char-groot, a tree-like creature, standing, forest, photorealistic  ")
    session.upload_image(png_image)
    session.set_trigger_word("char-groot")

    state = session.submit()

    assert state.output == "char-groot, a tree-like creature, standing, forest, photorealistic"
    assert state.error is None
    assert state.is_loading is False


def test_prompt_scenario_output_unchanged(png_image: UploadedImage) -> None:
    session = _session("a red car, studio lighting, photorealistic")
    session.select_mode(Mode.PROMPT)
    session.upload_image(png_image)

    state = session.submit()

    assert state.output == "a red car, studio lighting, photorealistic"
    image_part = session._client.chat.call_args[0][0][0].content[0]
    assert image_part == ImagePart(data=png_image.data, media_type="image/png")


@pytest.mark.parametrize(
    ("mode", "expected"),
    [(Mode.CAPTIONER, CAPTION_FAILURE_MESSAGE), (Mode.PROMPT, IMAGE_PROMPT_FAILURE_MESSAGE)],
)
def test_remote_failure_sets_generic_error(
    png_image: UploadedImage, mode: Mode, expected: str
) -> None:
    session = _session()
    session._client.chat.side_effect = RuntimeError("secret upstream detail")
    session.select_mode(mode)
    session.upload_image(png_image)
    session.set_trigger_word("tw")

    state = session.submit()

    assert state.output == ""
    assert state.error == expected
    assert "secret upstream detail" not in state.error
    assert state.is_loading is False


@pytest.mark.parametrize(
    ("mode", "expected"),
    [(Mode.CAPTIONER, CAPTION_FAILURE_MESSAGE), (Mode.PROMPT, IMAGE_PROMPT_FAILURE_MESSAGE)],
)
def test_whitespace_answer_sets_error_not_blank_output(
    png_image: UploadedImage, mode: Mode, expected: str, mock_post: MagicMock
) -> None:
    mock_post.return_value = MockResponse(json_data=gemini_text_response(" \n  "))
    session = CaptionSession(Client("gemini", model="gemini-2.5-flash", api_key="k"))
    session.select_mode(mode)
    session.upload_image(png_image)
    session.set_trigger_word("tw")

    state = session.submit()

    assert state.output == ""
    assert state.error == expected
    assert state.is_loading is False


# --- Validation ---


def test_submit_without_image_never_calls_builder() -> None:
    session = _session()
    session.set_trigger_word("tw")
    with (
        patch("caption_studio.shell._session.generate_caption") as gen_caption,
        patch("caption_studio.shell._session.generate_image_prompt") as gen_prompt,
    ):
        state = session.submit()

    gen_caption.assert_not_called()
    gen_prompt.assert_not_called()
    session._client.chat.assert_not_called()
    assert state.error == MISSING_IMAGE_MESSAGE
    assert state.is_loading is False


@pytest.mark.parametrize("word", ["", "   ", "\t\n"])
def test_blank_trigger_word_never_calls_builder(png_image: UploadedImage, word: str) -> None:
    session = _session()
    session.upload_image(png_image)
    session.set_trigger_word(word)

    with patch("caption_studio.shell._session.generate_caption") as gen_caption:
        state = session.submit()

    gen_caption.assert_not_called()
    assert state.error == MISSING_TRIGGER_WORD_MESSAGE
    assert session.can_submit is False


def test_prompt_mode_needs_no_trigger_word(png_image: UploadedImage) -> None:
    session = _session("p")
    session.select_mode(Mode.PROMPT)
    session.upload_image(png_image)
    assert session.can_submit is True
    assert session.submit().output == "p"


def test_validate_returns_image(png_image: UploadedImage) -> None:
    session = _session()
    session.select_mode(Mode.PROMPT)
    session.upload_image(png_image)
    assert session.validate() is png_image


def test_empty_image_bytes_are_rejected() -> None:
    session = _session()
    session.upload_image(UploadedImage.from_bytes(b"", "empty.png"))
    session.set_trigger_word("tw")
    with pytest.raises(ValidationFailure, match="upload an image"):
        session.validate()


def test_trigger_word_sent_as_typed(png_image: UploadedImage) -> None:
    session = _session("x")
    session.upload_image(png_image)
    session.set_trigger_word(" my-style ")
    with patch("caption_studio.shell._session.generate_caption", return_value="x") as gen:
        session.submit()
    gen.assert_called_once_with(session._client, png_image.data, "image/png", " my-style ")


# --- Resets ---


def test_mode_switch_clears_output_and_error(png_image: UploadedImage) -> None:
    session = _session("out")
    session.upload_image(png_image)
    session.set_trigger_word("tw")
    session.submit()
    assert session.state.output == "out"

    session.select_mode(Mode.PROMPT)
    assert session.state.output == ""
    assert session.state.error is None

    session.clear_image()
    session.submit()
    assert session.state.error == MISSING_IMAGE_MESSAGE
    session.select_mode(Mode.CAPTIONER)
    assert session.state.error is None


def test_mode_switch_keeps_image_and_trigger_word(png_image: UploadedImage) -> None:
    session = _session()
    session.upload_image(png_image)
    session.set_trigger_word("tw")
    session.select_mode(Mode.PROMPT)
    assert session.state.image == png_image
    assert session.state.trigger_word == "tw"


def test_select_mode_accepts_value_string() -> None:
    session = _session()
    session.select_mode("Prompt")  # type: ignore[arg-type]
    assert session.state.mode is Mode.PROMPT


def test_new_upload_clears_output(png_image: UploadedImage) -> None:
    session = _session("out")
    session.upload_image(png_image)
    session.set_trigger_word("tw")
    session.submit()

    other = UploadedImage.from_bytes(b"\x89PNG other", "other.png")
    session.upload_image(other)
    assert session.state.image == other
    assert session.state.output == ""


# --- File widget sync ---


def test_sync_upload_loads_new_file() -> None:
    session = _session()
    session.sync_upload(_WidgetFile("pixel.png", "image/png", PNG_1X1))
    assert session.state.image == UploadedImage.from_bytes(PNG_1X1, "pixel.png", "image/png")


def test_sync_upload_same_file_keeps_output() -> None:
    session = _session("out")
    widget_file = _WidgetFile("pixel.png", "image/png", PNG_1X1)
    session.sync_upload(widget_file)
    session.set_trigger_word("tw")
    session.submit()

    session.sync_upload(widget_file)
    assert session.state.output == "out"

    session.sync_upload(_WidgetFile("pixel.png", "image/png", PNG_1X1 + b"\0"))
    assert session.state.output == ""


def test_sync_upload_none_clears_image() -> None:
    session = _session("out")
    session.sync_upload(_WidgetFile("pixel.png", "image/png", PNG_1X1))
    session.set_trigger_word("tw")
    session.submit()

    session.sync_upload(None)
    assert session.state.image is None
    assert session.state.output == ""

    session.state.error = "kept"
    session.sync_upload(None)
    assert session.state.error == "kept"


def test_sync_upload_after_manual_upload_replaces_image(png_image: UploadedImage) -> None:
    session = _session()
    session.sync_upload(_WidgetFile("pixel.png", "image/png", PNG_1X1))
    other = UploadedImage.from_bytes(b"other", "other.png")
    session.upload_image(other)

    session.sync_upload(_WidgetFile("pixel.png", "image/png", PNG_1X1))
    assert session.state.image == png_image


# --- Two-phase submission ---


def test_begin_submit_enters_loading_and_clears_previous(png_image: UploadedImage) -> None:
    session = _session()
    session.upload_image(png_image)
    session.set_trigger_word("tw")
    session.state.output = "old"
    session.state.error = "old error"

    submission = session.begin_submit()

    assert submission is not None
    assert submission.mode is Mode.CAPTIONER
    assert submission.trigger_word == "tw"
    assert session.state.is_loading is True
    assert session.state.output == ""
    assert session.state.error is None
    assert session.can_submit is False
    assert session.button_label == "Generating..."


def test_finish_submit_with_error_clears_output(png_image: UploadedImage) -> None:
    session = _session()
    session.upload_image(png_image)
    session.set_trigger_word("tw")
    submission = session.begin_submit()
    assert submission is not None

    assert session.finish_submit(submission, error="boom") is True
    assert session.state.output == ""
    assert session.state.error == "boom"
    assert session.state.is_loading is False


def test_stale_result_after_mode_switch_is_discarded(png_image: UploadedImage) -> None:
    session = _session()
    session.upload_image(png_image)
    session.set_trigger_word("tw")
    submission = session.begin_submit()
    assert submission is not None

    session.select_mode(Mode.PROMPT)
    applied = session.finish_submit(submission, output="caption for the old mode")

    assert applied is False
    assert session.state.output == ""
    assert session.state.is_loading is False


def test_only_latest_submission_wins(png_image: UploadedImage) -> None:
    session = _session()
    session.select_mode(Mode.PROMPT)
    session.upload_image(png_image)
    first = session.begin_submit()
    second = session.begin_submit()
    assert first is not None and second is not None

    assert session.finish_submit(second, output="new") is True
    assert session.finish_submit(first, output="old") is False
    assert session.state.output == "new"


def test_run_dispatches_by_mode(png_image: UploadedImage) -> None:
    session = _session()
    session.select_mode(Mode.PROMPT)
    session.upload_image(png_image)
    submission = session.begin_submit()
    assert submission is not None

    with patch(
        "caption_studio.shell._session.generate_image_prompt",
        side_effect=GenerationFailure(IMAGE_PROMPT_FAILURE_MESSAGE, "image prompt"),
    ):
        with pytest.raises(GenerationFailure):
            session.run(submission)


# --- Presentation ---


def test_placeholder_and_button_label() -> None:
    session = _session()
    assert session.placeholder_text == "Your generated caption will appear here."
    assert session.button_label == "Generate Captioner"
    session.select_mode(Mode.PROMPT)
    assert session.placeholder_text == "Your generated prompt will appear here."
    assert session.button_label == "Generate Prompt"


def test_client_is_reused_across_submissions(png_image: UploadedImage) -> None:
    client = MagicMock()
    client.chat.return_value.text = "a"
    session = CaptionSession(client)
    session.select_mode(Mode.PROMPT)
    session.upload_image(png_image)
    session.submit()
    session.submit()
    assert client.chat.call_count == 2
