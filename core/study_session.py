"""
Study session state.

StudySession owns everything the page shows: the loaded sentences, the
card position, word records and counters. Methods replace containers
rather than mutating them, so a rerun never sees a half-updated state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from core import review
from core.progress import goal_progress_percent, word_status
from core.quote_source import QuoteSource, load_sentences
from core.schemas import LearnedWordData, Sentence
from core.speech import PlaybackState, refresh_playback, start_playback


# Load more sentences once the card is this close to the end
PREFETCH_THRESHOLD = 3


@dataclass
class StudySession:
    sentences: tuple[Sentence, ...] = ()
    current_index: int = 0
    show_translation: bool = False
    selected_word: Optional[str] = None

    learned_words: dict[str, LearnedWordData] = field(default_factory=dict)
    review_words: frozenset[str] = frozenset()

    completed_today: int = 0
    monthly_words: int = 0

    playback: PlaybackState = field(default_factory=PlaybackState)

    # ---- Sentences ----

    @property
    def current_sentence(self) -> Optional[Sentence]:
        """The sentence on the card, or None while loading."""
        if 0 <= self.current_index < len(self.sentences):
            return self.sentences[self.current_index]
        return None

    def append_sentences(self, batch: Iterable[Sentence]) -> None:
        self.sentences = self.sentences + tuple(batch)

    def needs_more_sentences(self) -> bool:
        """True when the card is within PREFETCH_THRESHOLD of the end."""
        return (
            len(self.sentences) > 0
            and self.current_index >= len(self.sentences) - PREFETCH_THRESHOLD
        )

    def should_load_sentences(self) -> bool:
        """True on the first run and whenever the card nears the end."""
        return not self.sentences or self.needs_more_sentences()

    def ensure_sentences(self, source: QuoteSource) -> int:
        """
        Load one more batch from `source` if the card needs it.

        Returns:
            Number of sentences appended (0 when nothing was loaded)
        """
        if not self.should_load_sentences():
            return 0
        batch = load_sentences(source)
        self.append_sentences(batch)
        return len(batch)

    # ---- Navigation ----

    @property
    def can_go_back(self) -> bool:
        return self.current_index > 0

    def _reset_card(self) -> None:
        self.show_translation = False
        self.selected_word = None

    def next_sentence(self) -> None:
        self.current_index += 1
        self._reset_card()

    def previous_sentence(self) -> None:
        if not self.can_go_back:
            return
        self.current_index -= 1
        self._reset_card()

    def reveal_translation(self) -> None:
        self.show_translation = True

    # ---- Words ----

    def select_word(self, word: str) -> None:
        self.selected_word = word

    def dismiss_word(self) -> None:
        """Close the word dialog without a decision."""
        self.selected_word = None

    def get_word_status(self, word: str) -> str:
        return word_status(self.learned_words.get(word), self.review_words, word)

    def mark_word_status(
        self,
        word: str,
        learned: bool,
        now: Optional[datetime] = None
    ) -> LearnedWordData:
        """
        Apply a learned / known decision to a word.

        Args:
            word: Word text as extracted
            learned: True for "learned", False for "already known"
            now: Decision time (defaults to current UTC time)

        Returns:
            The word's new record
        """
        now = now or review.utc_now()
        if learned:
            record = review.mark_learned(self.learned_words.get(word), now)
            self.monthly_words += 1
            self.completed_today += 1
            self.review_words = self.review_words - {word}
        else:
            record = review.mark_known(now)

        self.learned_words = {**self.learned_words, word: record}
        self.selected_word = None
        return record

    def scan_reviews(self, now: Optional[datetime] = None) -> frozenset[str]:
        """Recompute the due set from scratch."""
        self.review_words = review.find_due_words(self.learned_words, now)
        return self.review_words

    def background_scan(self, now: Optional[datetime] = None) -> bool:
        """
        Periodic rescan of due words and the playback flag.

        Returns:
            True if the page should rerun. Always False while the word
            dialog is open, so a rerun never closes it mid-decision.
        """
        now = now or review.utc_now()
        before = self.review_words
        was_playing = self.playback.is_playing
        self.scan_reviews(now)
        self.refresh_playback(now)
        changed = self.review_words != before or self.playback.is_playing != was_playing
        return changed and self.selected_word is None

    # ---- Progress ----

    @property
    def goal_progress(self) -> float:
        return goal_progress_percent(self.monthly_words)

    # ---- Playback ----

    def speak(self, now: Optional[datetime] = None) -> Optional[str]:
        """
        Start speaking the current sentence.

        Returns:
            Text to hand to the speech engine, or None if nothing is loaded
        """
        sentence = self.current_sentence
        if sentence is None:
            return None
        self.playback = start_playback(sentence.english, now or review.utc_now())
        return sentence.english

    def refresh_playback(self, now: Optional[datetime] = None) -> bool:
        """Update and return the busy flag."""
        self.playback = refresh_playback(self.playback, now or review.utc_now())
        return self.playback.is_playing

