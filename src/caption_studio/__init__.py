"""Caption Studio — fine-tuning captions and image prompts from a multimodal model."""

from caption_studio._config import Settings
from caption_studio.captioner import GenerationFailure, generate_caption, generate_image_prompt
from caption_studio.llm import Client, ImagePart, Message, Response, TextPart
from caption_studio.shell import CaptionSession, Mode, UploadedImage, ValidationFailure

__all__ = [
    "CaptionSession",
    "Client",
    "GenerationFailure",
    "ImagePart",
    "Message",
    "Mode",
    "Response",
    "Settings",
    "TextPart",
    "UploadedImage",
    "ValidationFailure",
    "generate_caption",
    "generate_image_prompt",
]
