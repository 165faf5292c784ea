from __future__ import annotations

"""
Text normalisation helpers shared by every matcher and ranker.

The goal is that query and candidate pass through the same folding so
the rest of the package compares strings over one normalised alphabet.

Public helpers:

* remove_diacritics(text) -> str
    Strip combining marks and fold the ligatures decomposition misses.

* clean_query(text) -> str
    remove_diacritics plus non-breaking space -> plain space.

* clean_query_lowercase(text) -> str
    Lowercased clean_query; the form used for every comparison.

* collation_key(text) -> tuple
    Sort key approximating a locale-aware compare for tie-breaks.
"""

from typing import Tuple
import unicodedata

from . import config

_LIGATURE_TABLE = str.maketrans(config.LIGATURE_FOLDS)


def _is_mark(ch: str) -> bool:
    # Mn, Mc and Me: every combining mark category.
    return unicodedata.category(ch).startswith("M")


def remove_diacritics(text: str) -> str:
    """Decompose, drop combining marks, then fold leftover ligatures.

    'café' -> 'cafe', 'Æ' -> 'AE', 'straße' -> 'strasse'.
    """
    decomposed = unicodedata.normalize(config.UNICODE_NORMAL_FORM, text)
    stripped = "".join(ch for ch in decomposed if not _is_mark(ch))
    return stripped.translate(_LIGATURE_TABLE)


def clean_query(query: str) -> str:
    query = remove_diacritics(query)
    query = query.replace(config.NBSP, " ")
    return query


def clean_query_lowercase(query: str) -> str:
    query = query.lower()
    query = clean_query(query)
    return query


def collation_key(text: str) -> Tuple[str, str, str]:
    """Key for the default alphabetical tie-break.

    Orders primarily on the folded form so 'apple' < 'Banana' < 'éclair',
    then by accents, then lowercase ahead of uppercase.
    """
    return (clean_query_lowercase(text), text.lower(), text.swapcase())
