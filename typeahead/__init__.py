"""
typeahead

Text matching and ranking for typeahead/autocomplete:
 - diacritic-insensitive normalisation (normalize)
 - in-order / any-order word matching and sorted prefix lookup (matching)
 - match confidence scoring (scoring)
 - tiered candidate triage (triage)
 - emoji-specific matching and ordering (emoji)
"""

from loguru import logger

from .config import (
    POPULAR_EMOJIS,
    WORD_BOUNDARY_CHARS,
    Emoji,
    EmojiSuggestion,
    RealmEmoji,
    RealmEmojiSuggestion,
    UnicodeEmoji,
    UnicodeEmojiSuggestion,
    parse_emoji,
    parse_emoji_suggestion,
)
from .emoji import (
    dedupe_emojis,
    get_emoji_matcher,
    is_decent_match,
    parse_unicode_emoji_code,
    prioritise_realm_emojis,
    sort_emojis,
)
from .matching import (
    last_prefix_match,
    query_matches_string_in_any_order,
    query_matches_string_in_order,
)
from .normalize import clean_query, clean_query_lowercase, remove_diacritics
from .pipeline_types import TriageMatches, TriageResult
from .scoring import score_match
from .triage import triage, triage_raw

# Library code stays quiet unless the application opts in.
logger.disable("typeahead")

__all__ = [
    "POPULAR_EMOJIS",
    "WORD_BOUNDARY_CHARS",
    "Emoji",
    "EmojiSuggestion",
    "RealmEmoji",
    "RealmEmojiSuggestion",
    "UnicodeEmoji",
    "UnicodeEmojiSuggestion",
    "parse_emoji",
    "parse_emoji_suggestion",
    "dedupe_emojis",
    "get_emoji_matcher",
    "is_decent_match",
    "parse_unicode_emoji_code",
    "prioritise_realm_emojis",
    "sort_emojis",
    "last_prefix_match",
    "query_matches_string_in_any_order",
    "query_matches_string_in_order",
    "clean_query",
    "clean_query_lowercase",
    "remove_diacritics",
    "TriageMatches",
    "TriageResult",
    "score_match",
    "triage",
    "triage_raw",
]

__version__ = "0.1.0"
