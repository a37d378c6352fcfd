"""
Sentence playback through the browser's speech synthesis.

The Streamlit page cannot receive the utterance's end event, so the busy
flag is cleared once an estimated speaking time has passed.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional


SPEECH_LANG = "en-US"
SPEECH_RATE = 0.8
WORDS_PER_MINUTE = 150  # at rate 1.0
MIN_SPEECH_SECONDS = 1.0


@dataclass(frozen=True)
class PlaybackState:
    is_playing: bool = False
    ends_at: Optional[datetime] = None


def estimate_duration(text: str, rate: float = SPEECH_RATE) -> timedelta:
    """Rough speaking time for `text` at the given rate."""
    words = len(text.split())
    seconds = words / (WORDS_PER_MINUTE * rate) * 60
    return timedelta(seconds=max(seconds, MIN_SPEECH_SECONDS))


def start_playback(text: str, now: datetime, rate: float = SPEECH_RATE) -> PlaybackState:
    return PlaybackState(is_playing=True, ends_at=now + estimate_duration(text, rate))


def refresh_playback(state: PlaybackState, now: datetime) -> PlaybackState:
    """Clear the busy flag once playback should have finished."""
    if state.is_playing and state.ends_at is not None and now >= state.ends_at:
        return PlaybackState()
    return state


def _js_string(value: str) -> str:
    return json.dumps(value).replace("</", "<\\/")


def build_speech_script(
    text: str,
    lang: str = SPEECH_LANG,
    rate: float = SPEECH_RATE
) -> str:
    """
    Build an HTML snippet that speaks `text` in the browser.

    Does nothing when speechSynthesis is unavailable. The component runs in
    an iframe, so the parent window's synthesizer is preferred.
    """
    return f"""
        <script>
          (function() {{
            var w = window.parent && window.parent.speechSynthesis ? window.parent : window;
            if (!('speechSynthesis' in w)) {{ return; }}
            var u = new w.SpeechSynthesisUtterance({_js_string(text)});
            u.lang = {_js_string(lang)};
            u.rate = {rate};
            w.speechSynthesis.speak(u);
          }})();
        </script>
        """
