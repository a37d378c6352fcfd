"""
Tests for the study session controller.
"""

from datetime import datetime, timedelta, timezone

import requests

from core.quote_source import FALLBACK_SENTENCES
from core.schemas import QuotePayload, Sentence
from core.study_session import StudySession


T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


class StubSource:
    """Returns (or raises) one queued item per fetch."""

    def __init__(self, batches):
        self.batches = list(batches)
        self.calls = []

    def fetch_quotes(self):
        self.calls.append(len(self.calls))
        batch = self.batches.pop(0)
        if isinstance(batch, Exception):
            raise batch
        return batch


def _quotes(n, start=0):
    return [
        QuotePayload(content=f"Quote number {i} about learning", author="Anon", tags=["Test"])
        for i in range(start, start + n)
    ]


def _sentences(n):
    return [
        Sentence(english=f"Sentence number {i}", turkish=f"Cümle {i}", new_words=("sentence", "number"))
        for i in range(n)
    ]


def test_empty_session_shows_loading():
    session = StudySession()
    assert session.current_sentence is None
    assert not session.needs_more_sentences()
    assert session.should_load_sentences()
    assert not hasattr(session, "loading")


def test_append_never_resets_existing_sentences():
    session = StudySession()
    session.append_sentences(FALLBACK_SENTENCES)
    first = session.sentences
    session.append_sentences(_sentences(3))
    assert session.sentences[:2] == first
    assert len(session.sentences) == 5


def test_prefetch_threshold():
    session = StudySession()
    session.append_sentences(_sentences(10))
    for index in range(7):
        session.current_index = index
        assert not session.needs_more_sentences()
    session.current_index = 7
    assert session.needs_more_sentences()


def test_forward_navigation_near_end_appends():
    source = StubSource([_quotes(10), _quotes(10, start=10)])
    session = StudySession()

    assert session.ensure_sentences(source) == 10
    first_batch = session.sentences
    assert session.ensure_sentences(source) == 0

    for _ in range(7):
        session.next_sentence()
        session.ensure_sentences(source)
    assert session.current_index == 7
    assert len(session.sentences) == 20
    assert session.sentences[:10] == first_batch
    assert [s.english for s in session.sentences] == [f"Quote number {i} about learning" for i in range(20)]
    assert session.current_sentence == first_batch[7]
    assert len(source.calls) == 2


def test_failing_source_appends_fallback_pair():
    session = StudySession()
    session.ensure_sentences(StubSource([requests.ConnectionError("offline")]))
    assert session.sentences == FALLBACK_SENTENCES

    session.next_sentence()
    session.ensure_sentences(StubSource([ValueError("bad payload")]))
    assert session.sentences == FALLBACK_SENTENCES + FALLBACK_SENTENCES
    assert session.current_sentence == FALLBACK_SENTENCES[1]


def test_navigation_resets_card_and_guards_first_sentence():
    session = StudySession()
    session.append_sentences(_sentences(5))
    session.previous_sentence()
    assert session.current_index == 0
    assert not session.can_go_back

    session.reveal_translation()
    session.select_word("sentence")
    session.next_sentence()
    assert session.current_index == 1
    assert not session.show_translation
    assert session.selected_word is None

    session.reveal_translation()
    session.previous_sentence()
    assert session.current_index == 0
    assert not session.show_translation


def test_moving_past_loaded_range_shows_loading():
    session = StudySession()
    session.append_sentences(_sentences(1))
    session.next_sentence()
    assert session.current_sentence is None


def test_mark_learned_updates_counters_and_schedule():
    session = StudySession()
    session.select_word("technology")
    record = session.mark_word_status("technology", learned=True, now=T0)

    assert record.next_review == T0 + timedelta(days=1)
    assert session.completed_today == 1
    assert session.monthly_words == 1
    assert session.selected_word is None
    assert session.get_word_status("technology") == "learned"

    later = T0 + timedelta(hours=2)
    record = session.mark_word_status("technology", learned=True, now=later)
    assert record.review_count == 2
    assert record.next_review == later + timedelta(days=3)
    assert session.monthly_words == 2


def test_learned_word_not_due_immediately():
    session = StudySession()
    session.mark_word_status("magic", learned=True, now=T0)
    assert "magic" not in session.scan_reviews(now=T0)
    assert "magic" in session.scan_reviews(now=T0 + timedelta(days=1))
    assert session.get_word_status("magic") == "review"


def test_mark_learned_removes_word_from_due_set():
    session = StudySession()
    session.mark_word_status("magic", learned=True, now=T0)
    session.scan_reviews(now=T0 + timedelta(days=2))
    assert session.review_words == {"magic"}

    session.mark_word_status("magic", learned=True, now=T0 + timedelta(days=2))
    assert session.review_words == frozenset()


def test_mark_known_resets_and_leaves_review():
    session = StudySession()
    session.mark_word_status("house", learned=True, now=T0)
    session.mark_word_status("house", learned=False, now=T0)

    record = session.learned_words["house"]
    assert not record.learned
    assert record.review_count == 0
    assert record.next_review is None
    assert session.monthly_words == 1
    assert "house" not in session.scan_reviews(now=T0 + timedelta(days=400))


def test_mark_status_replaces_containers():
    session = StudySession()
    words_before = session.learned_words
    session.mark_word_status("stand", learned=False, now=T0)
    assert session.learned_words is not words_before
    assert words_before == {}


def test_goal_progress_is_capped():
    session = StudySession(monthly_words=25)
    assert session.goal_progress == 50.0
    session.monthly_words = 80
    assert session.goal_progress == 100.0


def test_speak_sets_busy_flag_until_estimated_end():
    session = StudySession()
    assert session.speak(now=T0) is None
    assert not session.playback.is_playing

    session.append_sentences(FALLBACK_SENTENCES)
    assert session.speak(now=T0) == FALLBACK_SENTENCES[0].english
    assert session.refresh_playback(now=T0)
    assert not session.refresh_playback(now=T0 + timedelta(minutes=1))


def test_word_dialog_survives_background_scan():
    session = StudySession()
    session.append_sentences(FALLBACK_SENTENCES)
    session.speak(now=T0)
    session.reveal_translation()
    session.select_word("sufficient")

    # playback finished: something changed, but the open dialog blocks the rerun
    assert not session.background_scan(now=T0 + timedelta(minutes=1))
    assert not session.playback.is_playing
    assert session.selected_word == "sufficient"

    session.mark_word_status("sufficient", learned=True, now=T0)
    assert session.selected_word is None


def test_background_scan_reruns_when_due_set_changes():
    session = StudySession()
    session.mark_word_status("magic", learned=True, now=T0)
    assert not session.background_scan(now=T0)
    assert session.background_scan(now=T0 + timedelta(days=1))
    assert not session.background_scan(now=T0 + timedelta(days=1))


def test_dismiss_closes_dialog_without_decision():
    session = StudySession()
    session.select_word("house")
    session.dismiss_word()
    assert session.selected_word is None
    assert "house" not in session.learned_words
