"""
Tests for vocabulary extraction.
"""

from core.vocabulary import STOP_WORDS, extract_new_words, tokenize


def test_tokenize_lowercases_and_strips_punctuation():
    assert tokenize("Hello, World! It's fine.") == ["hello", "world", "its", "fine"]


def test_keeps_first_three_long_non_stop_words():
    text = "Any sufficiently advanced technology is equivalent to magic."
    assert extract_new_words(text) == ("sufficiently", "advanced", "technology")


def test_skips_short_words_and_stop_words():
    text = "The cat would have been there with them"
    words = extract_new_words(text)
    assert words == ("there", "them")
    for word in words:
        assert len(word) > 3
        assert word not in STOP_WORDS


def test_preserves_order_and_duplicates():
    assert extract_new_words("magic magic house") == ("magic", "magic", "house")


def test_result_never_exceeds_limit():
    text = "alpha bravo charlie delta echo foxtrot"
    assert len(extract_new_words(text)) == 3
    assert extract_new_words(text, limit=1) == ("alpha",)


def test_empty_and_punctuation_only_text():
    assert extract_new_words("") == ()
    assert extract_new_words("... !!! ??") == ()


def test_extra_whitespace_is_ignored():
    assert extract_new_words("  house\tdivided \n against  ") == ("house", "divided", "against")


def test_translation_lookup():
    from core.translations import MISSING_TRANSLATION, translate_word

    assert translate_word("technology") == "teknoloji"
    assert translate_word("Technology") == MISSING_TRANSLATION
    assert translate_word("sufficiently") == MISSING_TRANSLATION
