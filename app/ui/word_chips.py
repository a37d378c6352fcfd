"""
Word Chips UI

Renders the vocabulary buttons under the translation.
"""

import streamlit as st

from core.progress import WORD_STATUS_LEARNED, WORD_STATUS_REVIEW
from core.study_session import StudySession


CHIP_SUFFIX = {
    WORD_STATUS_REVIEW: " 🔄",
    WORD_STATUS_LEARNED: " ✓",
}

CHIP_HELP = {
    WORD_STATUS_REVIEW: "Tekrar zamanı",
    WORD_STATUS_LEARNED: "Öğrenildi",
}


def render_word_chips(session: StudySession) -> str | None:
    """
    Render one button per new word of the current sentence.

    Returns:
        The clicked word, or None if no chip was clicked
    """
    sentence = session.current_sentence
    if sentence is None or not sentence.new_words:
        return None

    st.markdown("#### 🧠 Yeni Kelimeler")

    clicked = None
    cols = st.columns(len(sentence.new_words))
    for index, (col, word) in enumerate(zip(cols, sentence.new_words)):
        status = session.get_word_status(word)
        with col:
            if st.button(
                f"{word}{CHIP_SUFFIX.get(status, '')}",
                key=f"word_{session.current_index}_{index}",
                help=CHIP_HELP.get(status, "Yeni kelime"),
                type="primary" if status == WORD_STATUS_REVIEW else "secondary",
                use_container_width=True,
            ):
                clicked = word
    return clicked
