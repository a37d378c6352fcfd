"""
Card style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "32px 24px"
CARD_MIN_HEIGHT = "180px"
CARD_RADIUS = "24px"
SENTENCE_BG_COLOR = "rgba(255, 255, 255, 0.04)"
TRANSLATION_BG_COLOR = "rgba(59, 130, 246, 0.08)"
CARD_BORDER = "1px solid rgba(255, 255, 255, 0.08)"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "1.8em"
DEFAULT_MAIN_COLOR = "rgba(255, 255, 255, 0.95)"
DEFAULT_MAIN_WEIGHT = "300"
DEFAULT_SUBTITLE_FONT_SIZE = "0.95em"
DEFAULT_SUBTITLE_COLOR = "#93c5fd"
DEFAULT_CORNER_FONT_SIZE = "0.8em"
DEFAULT_CORNER_COLOR = "#60a5fa"


@dataclass(frozen=True)
class CardStyle:
    """
    Visual style preset for sentence cards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    main_weight: str = DEFAULT_MAIN_WEIGHT
    subtitle_font_size: str = DEFAULT_SUBTITLE_FONT_SIZE
    subtitle_color: str = DEFAULT_SUBTITLE_COLOR
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    bg_color: str = SENTENCE_BG_COLOR
    min_height: str = CARD_MIN_HEIGHT


DEFAULT_CARD_STYLE = CardStyle()


# ---- Presets ----

SENTENCE_STYLE = CardStyle(
    main_font_size="1.9em",
    bg_color=SENTENCE_BG_COLOR,
)

TRANSLATION_STYLE = CardStyle(
    main_font_size="1.3em",
    main_color="rgba(255, 255, 255, 0.9)",
    bg_color=TRANSLATION_BG_COLOR,
    min_height="0",
)

WORD_DIALOG_STYLE = CardStyle(
    main_font_size="1.6em",
    main_weight="600",
    subtitle_font_size="1.15em",
    bg_color="rgba(255, 255, 255, 0.08)",
    min_height="0",
)


# ---- Page Theme ----

PAGE_CSS = """
<style>
.stApp {
    background: #000;
    color: #fff;
}
.stApp h1 { font-size: 1.2rem; font-weight: 500; }
div[data-testid="stMetricValue"] { font-size: 1.3rem; }
</style>
"""
