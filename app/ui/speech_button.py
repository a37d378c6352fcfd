"""
Speech UI

Renders the speak button and injects the browser speech script.
"""

import streamlit as st
import streamlit.components.v1 as components

from core.speech import build_speech_script
from core.study_session import StudySession


def render_speech_button(session: StudySession) -> bool:
    """
    Render the speak button, disabled while speaking.

    Returns:
        True if the button was clicked
    """
    return st.button(
        "🔊 Dinle",
        disabled=session.playback.is_playing,
        use_container_width=True,
        help="Cümleyi sesli oku",
    )


def play_speech(text: str | None) -> None:
    """Speak `text` in the browser; silently skipped when empty."""
    if not text:
        return
    components.html(build_speech_script(text), height=0)
