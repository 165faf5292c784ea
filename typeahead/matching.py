"""Boolean query/source predicates and a prefix range lookup.

These never rank anything; callers use them to filter candidates before
(or instead of) triage.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .normalize import remove_diacritics


def _fold(text: str) -> str:
    return remove_diacritics(text.lower())


def _split_words(text: str, split_char: str) -> List[str]:
    # An empty separator splits into single characters.
    if not split_char:
        return list(text)
    return [w for w in text.split(split_char) if w]


def query_matches_string_in_order(query: str, source_str: str, split_char: str) -> bool:
    """Match ``query`` against ``source_str`` in order.

    A single-token query (no ``split_char``) may match anywhere in the
    source. Once the query contains ``split_char`` the match has to start
    at the start of a source token: for 'ab cd ef' the query may be
    'ab c' or 'cd ef' but not 'b cd ef'.
    """
    source_lower = _fold(source_str)
    query_lower = _fold(query)

    if split_char not in query:
        return query_lower in source_lower

    return source_lower.startswith(query_lower) or (split_char + query_lower) in source_lower


def query_matches_string_in_any_order(query: str, source_str: str, split_char: str) -> bool:
    """Match the words of ``query`` to words of ``source_str`` in any order.

    Every query word has to be a prefix of a *different* source word,
    after lowercasing and diacritic removal. Query words are assigned
    greedily, each to the first unused source word it prefixes.
    """
    search_words = _split_words(_fold(query), split_char)
    source_words = _split_words(_fold(source_str), split_char)

    if len(search_words) > len(source_words):
        return False

    available = list(source_words)
    for search_word in search_words:
        for i, source_word in enumerate(available):
            if source_word.startswith(search_word):
                del available[i]
                break
        else:
            return False

    return True


def last_prefix_match(prefix: str, words: Sequence[str]) -> Optional[int]:
    """
    Index of the lexicographically last entry of ``words`` that starts
    with ``prefix``, or None when nothing does.

    ``words`` must be sorted. The binary search converges on the upper
    bound of the prefix span (the first entry after the last match), so
    a prefix that sorts strictly between entries is still located.
    Unsorted input gives an unspecified answer, never an error.
    """
    left = 0
    right = len(words)
    found = False
    while left < right:
        mid = (left + right) // 2
        word = words[mid]
        if word.startswith(prefix):
            left = mid + 1
            found = True
        elif word < prefix:
            left = mid + 1
        else:
            right = mid
    if found:
        return left - 1
    return None
