"""
Flashcard UI Component

Renders the sentence card and its translation panel.
"""

from __future__ import annotations

from html import escape

import streamlit as st
from app.ui.flashcard_style import (
    CARD_BORDER,
    CARD_PADDING,
    CARD_RADIUS,
    DEFAULT_CARD_STYLE,
    CardStyle,
)


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: CardStyle | None = None,
) -> None:
    """
    Render a glass-style card.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text below the main text
        corner_text: Optional text in the top-right corner
        style: Style preset (defaults to DEFAULT_CARD_STYLE)
    """
    style = style or DEFAULT_CARD_STYLE

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 14px; right: 18px; '
            f'font-size: {style.corner_font_size}; color: {style.corner_color}; '
            'padding: 2px 10px; border-radius: 999px; '
            f'border: {CARD_BORDER};">{escape(corner_text)}</div>'
        )

    main_html = (
        f'<p style="font-size: {style.main_font_size}; color: {style.main_color}; '
        f'font-weight: {style.main_weight}; margin: 0; text-align: center; '
        'line-height: 1.5; overflow-wrap: anywhere;">'
        f"{escape(main_text)}</p>"
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; '
            f'color: {style.subtitle_color}; margin: 12px 0 0 0; '
            f'text-align: center;">{escape(subtitle)}</p>'
        )

    html = (
        f'<div style="background: {style.bg_color}; padding: {CARD_PADDING}; '
        f'border-radius: {CARD_RADIUS}; border: {CARD_BORDER}; '
        'backdrop-filter: blur(20px) saturate(180%); '
        f'min-height: {style.min_height}; display: flex; flex-direction: column; '
        'align-items: center; justify-content: center; position: relative;">'
        f"{corner_html}{main_html}{subtitle_html}</div>"
    )

    st.markdown(html, unsafe_allow_html=True)
