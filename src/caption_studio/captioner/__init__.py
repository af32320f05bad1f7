"""Caption and image-prompt generation."""

from caption_studio.captioner._exceptions import (
    CAPTION_FAILURE_MESSAGE,
    IMAGE_PROMPT_FAILURE_MESSAGE,
    GenerationFailure,
)
from caption_studio.captioner._generate import (
    build_request,
    generate_caption,
    generate_image_prompt,
)
from caption_studio.captioner._prompts import caption_instructions, image_prompt_instructions

__all__ = [
    "CAPTION_FAILURE_MESSAGE",
    "IMAGE_PROMPT_FAILURE_MESSAGE",
    "GenerationFailure",
    "build_request",
    "caption_instructions",
    "generate_caption",
    "generate_image_prompt",
    "image_prompt_instructions",
]
