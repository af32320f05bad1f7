"""Build the multimodal request for each mode and return the model's text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from caption_studio.captioner._exceptions import (
    CAPTION_FAILURE_MESSAGE,
    IMAGE_PROMPT_FAILURE_MESSAGE,
    GenerationFailure,
)
from caption_studio.captioner._prompts import caption_instructions, image_prompt_instructions
from caption_studio.llm._types import ImagePart, Message, TextPart

if TYPE_CHECKING:
    from caption_studio.llm._client import Client


def build_request(image_data: str, mime_type: str, instructions: str) -> Message:
    """Compose the image part and the instruction part into one user turn."""
    return Message(
        role="user",
        content=(
            ImagePart(data=image_data, media_type=mime_type),
            TextPart(text=instructions),
        ),
    )


def _generate(client: Client, message: Message, operation: str, failure_message: str) -> str:
    try:
        response = client.chat([message])
        return response.text.strip()
    except Exception as exc:
        logger.exception("Error generating {}", operation)
        raise GenerationFailure(failure_message, operation) from exc


def generate_caption(client: Client, image_data: str, mime_type: str, trigger_word: str) -> str:
    """Return a comma-separated, tag-style caption that starts with *trigger_word*.

    Args:
        client: Authenticated generation client.
        image_data: Base64-encoded image bytes.
        mime_type: MIME type of the image, e.g. ``image/png``.
        trigger_word: Token the caption must begin with.

    Raises:
        GenerationFailure: The remote call failed for any reason.
    """
    message = build_request(image_data, mime_type, caption_instructions(trigger_word))
    return _generate(client, message, "caption", CAPTION_FAILURE_MESSAGE)


def generate_image_prompt(client: Client, image_data: str, mime_type: str) -> str:
    """Return a single text-to-image prompt describing the image.

    Raises:
        GenerationFailure: The remote call failed for any reason.
    """
    message = build_request(image_data, mime_type, image_prompt_instructions())
    return _generate(client, message, "image prompt", IMAGE_PROMPT_FAILURE_MESSAGE)
