"""
Status Bar UI

Renders daily/monthly counters, the goal and the review alert.
"""

import streamlit as st

from core.progress import MONTHLY_GOAL
from core.study_session import StudySession


def render_status_bar(session: StudySession) -> None:
    """
    Render the counters row with a due-word badge on the goal.
    """
    col1, col2, col3, col4 = st.columns([3, 1, 1, 1])

    with col1:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        st.markdown("**English Academy**")

    with col2:
        st.metric("Bugün", session.completed_today)

    with col3:
        st.metric("Bu Ay", session.monthly_words)

    with col4:
        due = len(session.review_words)
        st.metric(
            "Hedef",
            MONTHLY_GOAL,
            delta=f"🔄 {due}" if due else None,
            delta_color="inverse",
        )

    st.divider()


def render_review_alert(session: StudySession) -> None:
    """Show the review reminder while any word is due."""
    due = len(session.review_words)
    if due > 0:
        st.warning(f"🔁 **Tekrar Zamanı!** {due} kelimeyi tekrar etmen gerekiyor")


def render_sentence_progress(session: StudySession) -> None:
    """Render the sentence number, topic and goal progress bar."""
    sentence = session.current_sentence
    col1, col2 = st.columns([3, 1])
    with col1:
        st.caption(f"Cümle {session.current_index + 1}")
    with col2:
        if sentence is not None:
            st.caption(f"🏷️ {sentence.topic}")
    st.progress(int(session.goal_progress))
