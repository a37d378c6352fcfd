"""UI Components for English Academy"""

from app.ui.flashcard import render_flashcard
from app.ui.status_bar import (
    render_status_bar,
    render_review_alert,
    render_sentence_progress,
)
from app.ui.word_chips import render_word_chips
from app.ui.word_dialog import render_word_dialog
from app.ui.speech_button import render_speech_button, play_speech
from app.ui.progress_table import render_word_progress

__all__ = [
    "render_flashcard",
    "render_status_bar",
    "render_review_alert",
    "render_sentence_progress",
    "render_word_chips",
    "render_word_dialog",
    "render_speech_button",
    "play_speech",
    "render_word_progress",
]
