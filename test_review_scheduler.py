"""
Tests for the fixed-interval review scheduler and word transitions.
"""

from datetime import datetime, timedelta, timezone

from core import review
from core.schemas import LearnedWordData


T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def test_interval_table_is_clamped():
    expected = [1, 3, 7, 14, 30, 30, 30]
    for count, days in enumerate(expected):
        assert review.get_review_interval(count) == timedelta(days=days)
    assert review.get_review_interval(100) == timedelta(days=30)


def test_next_review_date_is_now_plus_interval():
    assert review.get_next_review_date(2, T0) == T0 + timedelta(days=7)


def test_first_learn_due_after_one_day_then_three():
    record = review.mark_learned(None, T0)
    assert record.learned
    assert record.review_count == 1
    assert record.next_review == T0 + timedelta(days=1)

    later = T0 + timedelta(hours=5)
    record = review.mark_learned(record, later)
    assert record.review_count == 2
    assert record.next_review == later + timedelta(days=3)


def test_review_count_never_decreases_while_learned():
    record = None
    counts = []
    for i in range(7):
        record = review.mark_learned(record, T0 + timedelta(days=i))
        counts.append(record.review_count)
    assert counts == sorted(counts)
    assert counts[-1] == 7


def test_mark_known_resets_record():
    record = review.mark_known(T0)
    assert record == LearnedWordData(learned=False, last_seen=T0, review_count=0, next_review=None)


def test_find_due_words_only_returns_elapsed_learned_words():
    words = {
        "magic": review.mark_learned(None, T0),
        "house": review.mark_learned(review.mark_learned(None, T0), T0),
        "stand": review.mark_known(T0),
    }
    assert review.find_due_words(words, T0) == frozenset()
    assert review.find_due_words(words, T0 + timedelta(days=1)) == {"magic"}
    assert review.find_due_words(words, T0 + timedelta(days=3)) == {"magic", "house"}
    assert "stand" not in review.find_due_words(words, T0 + timedelta(days=365))


def test_new_due_date_is_in_future():
    record = review.mark_learned(None, T0)
    assert not review.is_due(record, T0)
    assert record.next_review > T0
