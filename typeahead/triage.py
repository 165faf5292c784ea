# typeahead/triage.py
from __future__ import annotations

"""
Triage: partition candidates into priority tiers against a query, then
rank inside each tier.

Tiers, best first:
  1) exact_matches                         equal after case/diacritic folding
  2) begins_with_case_sensitive_matches    verbatim prefix
  3) begins_with_case_insensitive_matches  prefix ignoring case, or ignoring
                                           case and diacritics
  4) word_boundary_matches                 folded query flanked by word
                                           boundaries in the folded item
  5) no_matches
"""

import re
from functools import cmp_to_key
from typing import Callable, List, NamedTuple, Optional, Pattern, Sequence, Tuple, TypeVar

from loguru import logger

from . import config
from .normalize import clean_query_lowercase, collation_key
from .pipeline_types import TriageMatches, TriageResult
from .scoring import score_match

T = TypeVar("T")


class _Probe(NamedTuple):
    query: str
    item: str
    normalized_query: str
    normalized_item: str
    boundary: Pattern[str]


def word_boundary_pattern(normalized_query: str, boundary_chars: Optional[str] = None) -> Pattern[str]:
    """Regex finding ``normalized_query`` between word boundaries (or the string ends)."""
    if boundary_chars is None:
        boundary_chars = config.WORD_BOUNDARY_CHARS
    needle = re.escape(normalized_query)
    if not boundary_chars:
        return re.compile(rf"\A{needle}\Z")
    cls = "".join(re.escape(ch) for ch in boundary_chars)
    return re.compile(rf"(?:\A|[{cls}]){needle}(?:\Z|[{cls}])")


def _is_exact(p: _Probe) -> bool:
    return p.normalized_item == p.normalized_query


def _begins_case_sensitive(p: _Probe) -> bool:
    return p.item.startswith(p.query)


def _begins_case_insensitive(p: _Probe) -> bool:
    # Reached only when the verbatim prefix test failed.
    if p.item.lower().startswith(p.query.lower()):
        return True
    return p.normalized_item.startswith(p.normalized_query)


def _at_word_boundary(p: _Probe) -> bool:
    return p.boundary.search(p.normalized_item) is not None


# Order matters: each test assumes every earlier one failed.
TIER_RULES: Tuple[Tuple[str, Callable[[_Probe], bool]], ...] = (
    ("exact_matches", _is_exact),
    ("begins_with_case_sensitive_matches", _begins_case_sensitive),
    ("begins_with_case_insensitive_matches", _begins_case_insensitive),
    ("word_boundary_matches", _at_word_boundary),
)


def _classify(p: _Probe) -> str:
    for tier, predicate in TIER_RULES:
        if predicate(p):
            return tier
    return "no_matches"


def triage_raw(
    query: str,
    objs: Sequence[T],
    get_item: Callable[[T], str],
    word_boundary_chars: Optional[str] = None,
) -> TriageResult[T]:
    """Split ``objs`` into the five tiers, keeping input order inside each."""
    result: TriageResult[T] = TriageResult()

    if not query:
        result.no_matches = list(objs)
        return result

    normalized_query = clean_query_lowercase(query)
    boundary = word_boundary_pattern(normalized_query, word_boundary_chars)

    for obj in objs:
        item = get_item(obj)
        probe = _Probe(
            query=query,
            item=item,
            normalized_query=normalized_query,
            normalized_item=clean_query_lowercase(item),
            boundary=boundary,
        )
        getattr(result, _classify(probe)).append(obj)

    logger.debug(
        "triage {!r}: exact={} prefix={} iprefix={} boundary={} none={}",
        query,
        len(result.exact_matches),
        len(result.begins_with_case_sensitive_matches),
        len(result.begins_with_case_insensitive_matches),
        len(result.word_boundary_matches),
        len(result.no_matches),
    )
    return result


def triage(
    query: str,
    objs: Sequence[T],
    get_item: Callable[[T], str],
    sorting_comparator: Optional[Callable[[T, T], int]] = None,
    word_boundary_chars: Optional[str] = None,
) -> TriageMatches[T]:
    """
    Rank ``objs`` against ``query``.

    Inside the exact and begins-with tiers items sort by descending
    score_match; begins-with ties fall back to ``sorting_comparator``
    (a cmp-style ``(a, b) -> int``) or alphabetical order. The
    word-boundary tier sorts by the comparator/alphabetical order alone.
    Non-matching items keep their input order in ``rest``.
    """
    raw = triage_raw(query, objs, get_item, word_boundary_chars=word_boundary_chars)

    def match_score(obj: T) -> float:
        return score_match(get_item(obj), query)

    if sorting_comparator is not None:
        tie_break = cmp_to_key(sorting_comparator)
    else:
        def tie_break(obj: T):
            return collation_key(get_item(obj))

    def by_score_then_tie_break(tier: List[T]) -> List[T]:
        # Two stable passes: tie-break order survives among equal scores.
        return sorted(sorted(tier, key=tie_break), key=match_score, reverse=True)

    matches: List[T] = []
    matches += sorted(raw.exact_matches, key=match_score, reverse=True)
    matches += by_score_then_tie_break(raw.begins_with_case_sensitive_matches)
    matches += by_score_then_tie_break(raw.begins_with_case_insensitive_matches)
    matches += sorted(raw.word_boundary_matches, key=tie_break)

    return TriageMatches(matches=matches, rest=raw.no_matches)
