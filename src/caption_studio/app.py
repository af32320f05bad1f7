# ======================================================
# Caption Studio — fine-tuning captions and image prompts
# ======================================================
# Run with:  streamlit run src/caption_studio/app.py
#        or: caption-studio

import streamlit as st
from loguru import logger

from caption_studio._config import Settings
from caption_studio._logging import setup_logger
from caption_studio.llm import Client, MissingCredentialsError
from caption_studio.shell import CaptionSession, Mode

IMAGE_TYPES = ["png", "jpg", "jpeg", "gif", "webp"]

# ======================================================
# STREAMLIT CONFIG
# ======================================================
st.set_page_config(page_title="AI Image Analyst", layout="centered")

settings = Settings.from_env()
setup_logger(settings.log_level)


@st.cache_resource
def load_client() -> Client:
    """One authenticated client per process, shared by every browser session."""
    logger.info("Creating Gemini client for model {}", settings.model)
    return Client("gemini", model=settings.model, timeout=settings.timeout)


try:
    client = load_client()
except MissingCredentialsError as exc:
    logger.error("{}", exc)
    st.error(str(exc))
    st.stop()

# ======================================================
# SESSION
# ======================================================
if "session" not in st.session_state:
    st.session_state.session = CaptionSession(client)

session: CaptionSession = st.session_state.session


def on_mode_change():
    st.session_state.session.select_mode(st.session_state.mode_choice)


# ======================================================
# HEADER
# ======================================================
st.title("AI Image Analyst")
st.caption("Generate fine-tuning captions or detailed image prompts with Gemini.")

modes = list(Mode)
st.radio(
    "Mode",
    modes,
    index=modes.index(session.state.mode),
    key="mode_choice",
    horizontal=True,
    label_visibility="collapsed",
    on_change=on_mode_change,
)

# ======================================================
# IMAGE UPLOAD
# ======================================================
uploaded_file = st.file_uploader("Upload an image", type=IMAGE_TYPES)

session.sync_upload(uploaded_file)
if uploaded_file is not None:
    st.image(uploaded_file.getvalue(), caption="preview")
    st.caption(f"Uploaded: {uploaded_file.name}")

if session.state.mode is Mode.CAPTIONER:
    trigger_word = st.text_input(
        "Trigger Word",
        value=session.state.trigger_word,
        key="trigger_word_input",
        placeholder="e.g., myuniquestyle, char-groot",
        help="A unique word to associate with the image's style or subject.",
    )
    session.set_trigger_word(trigger_word)

# ======================================================
# GENERATE
# ======================================================
if st.button(session.button_label, disabled=not session.can_submit, type="primary"):
    with st.spinner("Generating..."):
        session.submit()

if session.state.error:
    st.error(session.state.error)

# ======================================================
# OUTPUT
# ======================================================
st.subheader("Output")
if session.state.output:
    # st.code renders a copy-to-clipboard button.
    st.code(session.state.output, language=None, wrap_lines=True)
else:
    st.caption(session.placeholder_text)

st.divider()
st.caption("Powered by Google Gemini")
