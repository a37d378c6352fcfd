"""
Static English -> Turkish word dictionary used by the word dialog.
"""

from __future__ import annotations

from typing import Final


MISSING_TRANSLATION: Final[str] = "Çeviri bulunamadı"

TRANSLATIONS: Final[dict[str, str]] = {
    "usually": "genellikle",
    "breakfast": "kahvaltı",
    "before": "önce",
    "neighbor": "komşu",
    "barks": "havlar",
    "loudly": "yüksek sesle",
    "medicine": "ilaç",
    "twice": "iki kez",
    "told": "söyledi",
    "saving": "biriktirmek",
    "laptop": "dizüstü bilgisayar",
    "studies": "çalışmalar",
    "delayed": "gecikmek",
    "heavy rain": "şiddetli yağmur",
    "fluently": "akıcı bir şekilde",
    "translator": "çevirmen",
    "ordered": "sipariş etmek",
    "comedy": "komedi",
    "weekend": "hafta sonu",
    "comfortable": "rahat",
    "quite": "oldukça",
    "expensive": "pahalı",
    "forgot": "unutmak",
    "umbrella": "şemsiye",
    "completely wet": "tamamen ıslak",
    "closes": "kapatmak",
    "weekdays": "hafta içi",
    "sufficient": "yeterli",
    "advanced": "gelişmiş",
    "technology": "teknoloji",
    "equivalent": "eşdeğer",
    "magic": "sihir",
    "house": "ev",
    "divided": "bölünmüş",
    "against": "karşısında",
    "itself": "kendisi",
    "cannot": "yapamaz",
    "stand": "durmak",
}


def translate_word(word: str) -> str:
    """Look up a word, returning a placeholder when it is unknown."""
    return TRANSLATIONS.get(word, MISSING_TRANSLATION)
