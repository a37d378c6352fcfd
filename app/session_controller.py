"""
Session event handlers for the Streamlit page.

Each handler applies one user event to the StudySession held in
session_state. Handlers that change what is on screen trigger a rerun.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_quote_source, get_study_session


def ensure_sentences() -> None:
    """
    Load sentences on first run and whenever the card nears the end.
    """
    session = get_study_session()
    if not session.should_load_sentences():
        return
    with st.spinner("Yeni cümleler yükleniyor..."):
        added = session.ensure_sentences(get_quote_source())
    print(f"[SESSION] +{added} sentences, {len(session.sentences)} loaded")


def go_next() -> None:
    get_study_session().next_sentence()
    st.rerun()


def go_previous() -> None:
    get_study_session().previous_sentence()
    st.rerun()


def reveal_translation() -> None:
    get_study_session().reveal_translation()
    st.rerun()


def select_word(word: str) -> None:
    get_study_session().select_word(word)
    st.rerun()


def dismiss_word() -> None:
    get_study_session().dismiss_word()
    st.rerun()


def mark_word(word: str, learned: bool) -> None:
    """
    Apply the dialog decision and close it.
    """
    record = get_study_session().mark_word_status(word, learned)
    if learned:
        print(f"[REVIEW] '{word}' learned ({record.review_count}), next review {record.next_review:%Y-%m-%d %H:%M}")
    st.rerun()


def speak_sentence() -> None:
    """
    Queue the current sentence for the browser speech engine.
    """
    text = get_study_session().speak()
    if text:
        st.session_state.pending_speech = text
    st.rerun()


def take_pending_speech() -> str | None:
    return st.session_state.pop("pending_speech", None)


def scan_reviews() -> bool:
    """
    Rescan due words and the playback flag.

    Returns:
        True if the page should rerun
    """
    return get_study_session().background_scan()
