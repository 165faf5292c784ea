from typeahead.normalize import (
    clean_query,
    clean_query_lowercase,
    collation_key,
    remove_diacritics,
)


def test_remove_diacritics_strips_accents():
    assert remove_diacritics("café") == "cafe"
    assert remove_diacritics("Ångström") == "Angstrom"
    assert remove_diacritics("naïve façade") == "naive facade"


def test_remove_diacritics_folds_ligatures():
    assert remove_diacritics("Æ") == "AE"
    assert remove_diacritics("æther") == "aether"
    assert remove_diacritics("Œuvre") == "OEuvre"
    assert remove_diacritics("straße") == "strasse"


def test_remove_diacritics_decomposes_compatibility_forms():
    # U+FB01 LATIN SMALL LIGATURE FI
    assert remove_diacritics("ﬁsh") == "fish"


def test_remove_diacritics_handles_decomposed_input():
    assert remove_diacritics("e\u0301") == "e"
    assert remove_diacritics("") == ""


def test_clean_query_keeps_case_and_replaces_nbsp():
    assert clean_query("Zoë\u00a0Ray") == "Zoe Ray"


def test_clean_query_lowercase():
    assert clean_query_lowercase("Crème\u00a0Brûlée") == "creme brulee"
    assert clean_query_lowercase("ÆON") == "aeon"


def test_collation_key_is_case_and_accent_insensitive_first():
    words = ["banana", "Apple", "éclair", "apple"]
    assert sorted(words, key=collation_key) == ["apple", "Apple", "banana", "éclair"]
