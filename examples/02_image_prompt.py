"""02 — Image-generation prompt.

Turn a local image into a prompt that could regenerate it. Failures
surface as GenerationFailure with a generic message; the cause is chained.
"""

import sys
from pathlib import Path

from caption_studio import Client, GenerationFailure, UploadedImage, generate_image_prompt

path = Path(sys.argv[1])
image = UploadedImage.from_bytes(path.read_bytes(), path.name)

client = Client("gemini", model="gemini-2.5-flash")
try:
    print(generate_image_prompt(client, image.data, image.mime_type))
except GenerationFailure as exc:
    print(exc.user_message)
    print("Cause:", repr(exc.__cause__))
