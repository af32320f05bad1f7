"""03 — Driving a CaptionSession without the browser.

The same state machine the Streamlit page uses: validation errors show up
in ``state.error`` without any network call.
"""

import sys
from pathlib import Path

from caption_studio import CaptionSession, Client, Mode, Settings, UploadedImage

settings = Settings.from_env()
client = Client("gemini", model=settings.model, timeout=settings.timeout)
session = CaptionSession(client)

print(session.submit().error)  # Please upload an image first.

path = Path(sys.argv[1])
session.upload_image(UploadedImage.from_bytes(path.read_bytes(), path.name))
print(session.submit().error)  # Please enter a trigger word for the captioner.

session.set_trigger_word("my-style")
print("Caption:", session.submit().output)

session.select_mode(Mode.PROMPT)
print("Prompt:", session.submit().output)
