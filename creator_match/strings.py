# creator_match/strings.py
"""
Text helpers for keyword matching against creator bios.

Two public helpers:
    normalize_string(text)        -> lower-cased, accent-free text
    word_is_in_text(text, word)   -> whole-token match, emoji-aware

Matching is token based, never substring based: "ban" does not match
"bananas" and "chat" does not match "#snapchat", but "hello" matches
"💪hello" because emoji act as separators.
"""

from __future__ import annotations

from typing import Callable, List
import re
import unicodedata

import emoji


# Combining diacritical marks block (U+0300–U+036F)
_diacritics_re = re.compile(r"[\u0300-\u036f]")

# Anything that can't be part of a token
_separator_re = re.compile(r"[^a-z0-9]+")

EmojiStripper = Callable[[str], str]


def strip_emoji(text: str) -> str:
    """
    Replace each emoji sequence (ZWJ, skin tones, flags, keycaps) with a space.

    Only the matched spans are replaced; stray variation selectors and
    other leftovers stay put so the separator split still sees them.
    """
    pieces: List[str] = []
    last = 0
    for match in emoji.emoji_list(text):
        pieces.append(text[last:match["match_start"]])
        pieces.append(" ")
        last = match["match_end"]
    pieces.append(text[last:])
    return "".join(pieces)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def normalize_string(text: str) -> str:
    """
    Lower-case and remove accents.

    "CRÈME brûlée" -> "creme brulee". Punctuation, spacing and emoji are
    left exactly where they were. The result stays in NFD form.
    """
    small_text = text.lower()
    return _diacritics_re.sub("", unicodedata.normalize("NFD", small_text))


# ---------------------------------------------------------------------------
# Tokenization / matching
# ---------------------------------------------------------------------------

def tokenize(text: str, emoji_stripper: EmojiStripper = strip_emoji) -> List[str]:
    """
    Normalize and split text into [a-z0-9] tokens.

    Emoji sequences are removed as whole units first so that keycaps like
    "1️⃣" don't leave a stray "1" token behind.
    """
    normal_text = emoji_stripper(normalize_string(text))
    return [extract for extract in _separator_re.split(normal_text) if extract]


def word_is_in_text(
    text: str,
    word: str,
    emoji_stripper: EmojiStripper = strip_emoji,
) -> bool:
    normal_word = normalize_string(word)
    return any(extract == normal_word for extract in tokenize(text, emoji_stripper))
