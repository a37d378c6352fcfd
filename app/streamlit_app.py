"""
English Academy - Main App

Single-screen sentence trainer: read a quote, reveal the translation,
mark its vocabulary as learned or known, and review learned words when
they come due.
"""

import streamlit as st

from app import session_controller as controller
from app.state import ensure_session_state, get_study_session
from app.ui import (
    render_flashcard,
    render_status_bar,
    render_review_alert,
    render_sentence_progress,
    render_word_chips,
    render_word_dialog,
    render_speech_button,
    play_speech,
    render_word_progress,
)
from app.ui.flashcard_style import PAGE_CSS, SENTENCE_STYLE, TRANSLATION_STYLE
from core import config


# ---- Page Setup ----

st.set_page_config(
    page_title="English Academy",
    page_icon="🎓",
    layout="centered"
)


ensure_session_state()


# ---- Background Review Scan ----

@st.fragment(run_every=config.get_review_scan_seconds())
def _review_scan():
    """Rescan due words; rerun the page when the badge or chips change."""
    if controller.scan_reviews():
        st.rerun()
    render_review_alert(get_study_session())


# ---- UI Rendering ----

def render_loading_screen():
    st.markdown("<br>" * 4, unsafe_allow_html=True)
    st.info("⏳ Yükleniyor...")


def render_card():
    """Render the sentence card, translation, word chips and navigation."""
    session = get_study_session()
    sentence = session.current_sentence

    render_sentence_progress(session)
    st.markdown("<br>", unsafe_allow_html=True)
    render_flashcard(main_text=sentence.english, corner_text=sentence.topic, style=SENTENCE_STYLE)
    st.markdown("<br>", unsafe_allow_html=True)

    if render_speech_button(session):
        controller.speak_sentence()
    play_speech(controller.take_pending_speech())

    if not session.show_translation:
        if st.button("Çeviriyi göster", use_container_width=True):
            controller.reveal_translation()
    else:
        render_flashcard(
            main_text=sentence.turkish,
            subtitle=f"— {sentence.author}" if sentence.author else "",
            style=TRANSLATION_STYLE,
        )
        st.markdown("<br>", unsafe_allow_html=True)
        clicked = render_word_chips(session)
        if clicked is not None:
            controller.select_word(clicked)

    st.markdown("<br>", unsafe_allow_html=True)
    col1, _, col2 = st.columns([1, 3, 1])
    with col1:
        if st.button("⬅️", disabled=not session.can_go_back, use_container_width=True, help="Önceki cümle"):
            controller.go_previous()
    with col2:
        if st.button("➡️", type="primary", use_container_width=True, help="Sonraki cümle"):
            controller.go_next()

    if session.selected_word:
        render_word_dialog(session.selected_word)


# ---- Main App ----

def main():
    """Main app entry point."""
    st.markdown(PAGE_CSS, unsafe_allow_html=True)
    session = get_study_session()

    render_status_bar(session)
    _review_scan()

    controller.ensure_sentences()

    if session.current_sentence is None:
        render_loading_screen()
        return

    render_card()
    render_word_progress(session)


if __name__ == "__main__":
    main()
