"""
Emoji-specific matching and ordering on top of triage.

sort_emojis layers the emoji business rules over the generic ranking:
perfect name matches first, then popular unicode emoji that decently
match, then triage order with realm emoji ahead of unicode emoji in each
bucket. A final pass removes unicode duplicates.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, List, Optional, Sequence, Set, TypeVar, Union

from loguru import logger

from . import config
from .config import RealmEmoji, UnicodeEmoji
from .matching import query_matches_string_in_order
from .normalize import clean_query_lowercase
from .triage import triage

E = TypeVar("E")

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def _decode_code_point(segment: str) -> str:
    if not _HEX_RE.fullmatch(segment):
        logger.warning("Invalid emoji code segment {!r}; using replacement character", segment)
        return config.REPLACEMENT_CHAR
    try:
        return chr(int(segment, 16))
    except (ValueError, OverflowError):
        logger.warning("Emoji code point {!r} out of range; using replacement character", segment)
        return config.REPLACEMENT_CHAR


def parse_unicode_emoji_code(code: str) -> str:
    """'1f44b-1f3fd' -> the literal waving hand with a skin tone modifier."""
    return "".join(_decode_code_point(segment) for segment in code.split("-"))


def get_emoji_matcher(query: str) -> Callable[[Union[RealmEmoji, UnicodeEmoji]], bool]:
    """
    Predicate for emoji suggestions matching ``query``, either as the
    literal emoji character(s) or by name ("thumbs up" ~ "thumbs_up").
    """
    query = query.replace(" ", config.EMOJI_SPLIT_CHAR)
    query = clean_query_lowercase(query)

    def matches(emoji: Union[RealmEmoji, UnicodeEmoji]) -> bool:
        # Fold the literal too: the query lost its combining marks (keycaps, U+FE0F).
        if not emoji.is_realm_emoji:
            if clean_query_lowercase(parse_unicode_emoji_code(emoji.emoji_code)) == query:
                return True
        return query_matches_string_in_order(query, emoji.emoji_name, config.EMOJI_SPLIT_CHAR)

    return matches


def is_decent_match(name: str, query: str) -> bool:
    """True when some underscore-separated piece of ``name`` starts with ``query``."""
    pieces = name.lower().split(config.EMOJI_SPLIT_CHAR)
    return any(piece.startswith(query) for piece in pieces)


def prioritise_realm_emojis(emojis: Iterable[E]) -> List[E]:
    emojis = list(emojis)
    return [e for e in emojis if e.is_realm_emoji] + [e for e in emojis if not e.is_realm_emoji]


def dedupe_emojis(emojis: Sequence[E]) -> List[E]:
    """
    Drop unicode emoji whose code was already emitted (aliases such as
    'thumbs_up' / '+1') and unicode emoji shadowed by a realm emoji with
    the same name. Realm emoji always stay.
    """
    realm_emoji_names: Set[str] = {e.emoji_name for e in emojis if e.is_realm_emoji}
    seen_codes: Set[str] = set()
    unique: List[E] = []
    for emoji in emojis:
        if emoji.is_realm_emoji:
            unique.append(emoji)
        elif emoji.emoji_code not in seen_codes and emoji.emoji_name not in realm_emoji_names:
            seen_codes.add(emoji.emoji_code)
            unique.append(emoji)
    return unique


def sort_emojis(
    objs: Sequence[E],
    query: str,
    popular_emojis: Optional[Iterable[str]] = None,
) -> List[E]:
    """Order emoji for typeahead on ``query``; see module docstring."""
    query = query.replace(" ", config.EMOJI_SPLIT_CHAR).lower()
    popular_set = frozenset(config.POPULAR_EMOJIS if popular_emojis is None else popular_emojis)

    def is_popular(emoji) -> bool:
        return (
            not emoji.is_realm_emoji
            and emoji.emoji_code in popular_set
            and is_decent_match(emoji.emoji_name, query)
        )

    perfect_matches = [e for e in objs if e.emoji_name == query]
    without_perfect = [e for e in objs if e.emoji_name != query]

    popular_matches = [e for e in without_perfect if is_popular(e)]
    others = [e for e in without_perfect if not is_popular(e)]

    triaged = triage(query, others, lambda e: e.emoji_name)

    ordered = (
        perfect_matches
        + popular_matches
        + prioritise_realm_emojis(triaged.matches)
        + prioritise_realm_emojis(triaged.rest)
    )
    unique = dedupe_emojis(ordered)
    logger.debug(
        "sort_emojis {!r}: perfect={} popular={} matches={} rest={} dropped={}",
        query,
        len(perfect_matches),
        len(popular_matches),
        len(triaged.matches),
        len(triaged.rest),
        len(ordered) - len(unique),
    )
    return unique
