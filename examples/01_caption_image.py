"""01 — Fine-tuning caption.

Caption a local image for LoRA / Dreambooth training. The caption starts
with the trigger word followed by comma-separated tags.

    GEMINI_API_KEY=... python examples/01_caption_image.py photo.jpg my-style
"""

import sys
from pathlib import Path

from caption_studio import Client, UploadedImage, generate_caption

path, trigger_word = Path(sys.argv[1]), sys.argv[2]
image = UploadedImage.from_bytes(path.read_bytes(), path.name)

client = Client("gemini", model="gemini-2.5-flash")
print(generate_caption(client, image.data, image.mime_type, trigger_word))
