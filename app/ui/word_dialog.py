"""
Word Status Dialog

Shows a word's translation and the learned / known decision buttons.
"""

import streamlit as st

from app.session_controller import dismiss_word, mark_word
from app.ui.flashcard import render_flashcard
from app.ui.flashcard_style import WORD_DIALOG_STYLE
from core.translations import translate_word


@st.dialog("Kelime")
def render_word_dialog(word: str) -> None:
    """
    Render the decision dialog for a word.

    The dialog stays open across reruns until a decision is made or it is
    closed with the Kapat button.
    """
    render_flashcard(
        main_text=word,
        subtitle=translate_word(word),
        style=WORD_DIALOG_STYLE,
    )
    st.markdown("<br>", unsafe_allow_html=True)

    if st.button("✓ Öğrendim", type="primary", use_container_width=True):
        mark_word(word, learned=True)

    if st.button("👀 Biliyorum", use_container_width=True):
        mark_word(word, learned=False)

    if st.button("Kapat", use_container_width=True):
        dismiss_word()
