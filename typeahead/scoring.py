"""Match confidence for a single candidate against a query.

The score is only a secondary sort key inside a triage tier; it never
moves a candidate between tiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from .normalize import remove_diacritics

EXACT_PREFIX_SCORE = 1.0
FOLDED_PREFIX_SCORE = 0.70
NO_MATCH_SCORE = 0.0


@dataclass(frozen=True)
class FirstCharProfile:
    """How the first characters of query and item relate once they fold equal."""

    query_has_diacritic: bool
    item_has_diacritic: bool
    case_matches: bool

    @property
    def same_diacritics(self) -> bool:
        return self.query_has_diacritic == self.item_has_diacritic

    @classmethod
    def compare(cls, item_first: str, query_first: str) -> "FirstCharProfile":
        both_upper = item_first == item_first.upper() and query_first == query_first.upper()
        both_lower = item_first == item_first.lower() and query_first == query_first.lower()
        return cls(
            query_has_diacritic=query_first != remove_diacritics(query_first),
            item_has_diacritic=item_first != remove_diacritics(item_first),
            case_matches=both_upper or both_lower,
        )


ScoreRule = Tuple[Callable[[FirstCharProfile], bool], float]

# First rule that holds wins. The last rule is reached only when exactly
# one side carries a diacritic and the query does not.
MATCH_SCORE_RULES: Tuple[ScoreRule, ...] = (
    # 'É' vs 'Éa', 'ą' vs 'ąa'
    (lambda p: p.same_diacritics and p.case_matches and p.query_has_diacritic, 0.99),
    # 'e' vs 'ea'
    (lambda p: p.same_diacritics and p.case_matches, 0.95),
    # 'É' vs 'éa'
    (lambda p: p.same_diacritics and p.query_has_diacritic, 0.90),
    # 'E' vs 'ea'
    (lambda p: p.same_diacritics, 0.85),
    # 'É' vs 'Ea'
    (lambda p: p.query_has_diacritic, 0.80),
    # 'E' vs 'Éa'
    (lambda p: p.item_has_diacritic, 0.75),
)


def _fold(text: str) -> str:
    return remove_diacritics(text.lower())


def score_match(item: str, query: str) -> float:
    """
    Score in [0, 1] for how closely ``item`` matches ``query``:

      1.0         item starts with query verbatim
      0.99..0.75  first characters fold equal; see MATCH_SCORE_RULES
      0.70        item starts with query after case/diacritic folding
      0.0         otherwise
    """
    if item.startswith(query):
        return EXACT_PREFIX_SCORE

    item_first = item[:1]
    query_first = query[:1]
    if _fold(item_first) == _fold(query_first):
        profile = FirstCharProfile.compare(item_first, query_first)
        for predicate, score in MATCH_SCORE_RULES:
            if predicate(profile):
                return score

    if _fold(item).startswith(_fold(query)):
        return FOLDED_PREFIX_SCORE

    return NO_MATCH_SCORE
