"""
Streamlit session state helpers.
"""

from __future__ import annotations

import streamlit as st

from core.quote_source import QuoteSource, get_default_source
from core.study_session import StudySession


@st.cache_resource
def get_quote_source() -> QuoteSource:
    """
    Build the quote source once per server process.
    """
    return get_default_source()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "study" not in st.session_state:
        st.session_state.study = StudySession()
    if "pending_speech" not in st.session_state:
        st.session_state.pending_speech = None


def get_study_session() -> StudySession:
    return st.session_state.study
