"""
wordlist.py

Loading and cleaning word lists.

Raw lists (one word per line) usually carry capitals, ё, hyphenated or Latin
entries and words of every length; the defaults keep only lowercase Cyrillic
words of WORD_LENGTH letters with ё folded into е.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from .game import WORD_LENGTH

_CYRILLIC = re.compile(r"[А-Яа-яЁё]+")


def normalize_word(
    word: str,
    *,
    length: int = WORD_LENGTH,
    cyrillic_only: bool = True,
    map_yo: bool = True,
    lower: bool = True,
) -> Optional[str]:
    """Returns the cleaned word, or None when it should be dropped."""
    word = word.rstrip("\r\n")
    if len(word) != length:
        return None
    if cyrillic_only and not _CYRILLIC.fullmatch(word):
        return None
    if map_yo:
        word = word.replace("ё", "е").replace("Ё", "Е")
    if lower:
        lowered = word.lower()
        # some chars lowercase into more than one char
        if len(lowered) != len(word):
            return None
        word = lowered
    return word


def filter_words(
    lines: Iterable[str],
    *,
    length: int = WORD_LENGTH,
    cyrillic_only: bool = True,
    map_yo: bool = True,
    lower: bool = True,
) -> List[str]:
    out = set()
    for line in lines:
        w = normalize_word(line, length=length, cyrillic_only=cyrillic_only, map_yo=map_yo, lower=lower)
        if w is not None:
            out.add(w)
    return sorted(out)


# load_words_from_file loads a sorted, deduplicated word list, one word per line;
# bytes that are not UTF-8 raise UnicodeDecodeError instead of being dropped
def load_words_from_file(path: str, **options) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return filter_words(f, **options)
