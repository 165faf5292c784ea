from __future__ import annotations

import os
from typing import Annotated, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


# ---------------------------
# Popular emoji
# ---------------------------

# Hand-picked emoji codes that get extra precedence in emoji typeahead.
# They are "popular" for historical reasons only; nobody measured usage,
# and measuring now would be biased toward these since they are easier
# to submit. Any of them is favoured as long as its name is a decent
# match, so 1f44d surfaces for both "+" (as in "+1") and "th" (as in
# "thumbs_up"). Keep the emoji picker layout in mind before growing it.
POPULAR_EMOJIS: Tuple[str, ...] = (
    "1f44d",  # +1
    "1f389",  # tada
    "1f642",  # smile
    "2764",   # heart
    "1f6e0",  # working_on_it
    "1f419",  # octopus
)


# ---------------------------
# Text processing
# ---------------------------

# Space, underscore, slash and hyphen count as word boundaries for triage.
DEFAULT_WORD_BOUNDARY_CHARS = " _/-"
WORD_BOUNDARY_CHARS = os.getenv("TYPEAHEAD_WORD_BOUNDARY_CHARS") or DEFAULT_WORD_BOUNDARY_CHARS

# NFKD also splits compatibility forms (ligature "ﬁ", superscripts, ...).
UNICODE_NORMAL_FORM = "NFKD"

# Letters that decomposition leaves alone but users type as digraphs.
LIGATURE_FOLDS: Dict[str, str] = {
    "Æ": "AE",
    "æ": "ae",
    "Œ": "OE",
    "œ": "oe",
    "ß": "ss",
}

NBSP = "\u00a0"
REPLACEMENT_CHAR = "\ufffd"

# Emoji names are underscore-joined words ("thumbs_up").
EMOJI_SPLIT_CHAR = "_"


# ---------------------------
# Pydantic models shared around the package
# ---------------------------

class RealmEmoji(BaseModel):
    """
    Custom emoji defined by a realm (workspace). Realm emoji have no
    unicode code point sequence, so there is deliberately no emoji_code.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    emoji_name: str
    reaction_type: Literal["realm_emoji", "zulip_extra_emoji"] = "realm_emoji"
    is_realm_emoji: Literal[True] = True
    emoji_url: Optional[str] = None


class UnicodeEmoji(BaseModel):
    """
    Standard unicode emoji. emoji_code is the hyphen-joined hex code
    points, e.g. "1f44d" or "1f44b-1f3fd".
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    emoji_name: str
    emoji_code: str = Field(min_length=1)
    reaction_type: Literal["unicode_emoji"] = "unicode_emoji"
    is_realm_emoji: Literal[False] = False
    emoji_url: Optional[str] = None


class RealmEmojiSuggestion(RealmEmoji):
    type: Literal["emoji"] = "emoji"


class UnicodeEmojiSuggestion(UnicodeEmoji):
    type: Literal["emoji"] = "emoji"


Emoji = Annotated[Union[RealmEmoji, UnicodeEmoji], Field(discriminator="reaction_type")]
EmojiSuggestion = Annotated[
    Union[RealmEmojiSuggestion, UnicodeEmojiSuggestion],
    Field(discriminator="reaction_type"),
]

_EMOJI_ADAPTER: TypeAdapter = TypeAdapter(Emoji)
_SUGGESTION_ADAPTER: TypeAdapter = TypeAdapter(EmojiSuggestion)


def parse_emoji(raw: dict) -> Union[RealmEmoji, UnicodeEmoji]:
    """Build the right emoji variant from a raw catalog row."""
    return _EMOJI_ADAPTER.validate_python(raw)


def parse_emoji_suggestion(raw: dict) -> Union[RealmEmojiSuggestion, UnicodeEmojiSuggestion]:
    return _SUGGESTION_ADAPTER.validate_python(raw)
