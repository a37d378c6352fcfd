"""
Word Progress UI

Renders the table of every word the user has decided on.
"""

import streamlit as st

from core.progress import build_word_progress_df
from core.study_session import StudySession


def render_word_progress(session: StudySession) -> None:
    with st.expander("📊 Kelime Durumu"):
        if not session.learned_words:
            st.info("Henüz işaretlenmiş kelime yok.")
            return
        st.dataframe(
            build_word_progress_df(session.learned_words),
            hide_index=True,
            use_container_width=True,
        )
