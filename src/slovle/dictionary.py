"""
dictionary.py

Indexed collection of same-length candidate words.

Every narrowing call (deny_chars, only_chars_at_positions, ...) returns a new
Dictionary rebuilt from the surviving words, so older values stay valid and
can be kept around by the caller.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Iterator, Set, Tuple

from .positions import CharPos

WordIndex = int

CharIndex = Dict[str, FrozenSet[WordIndex]]


class Dictionary:
    def __init__(
        self,
        words: Tuple[str, ...],
        global_char_index: CharIndex,
        char_at_pos_index: Dict[CharPos, CharIndex],
    ):
        self._words = words
        self._words_set = frozenset(words)
        self._global_char_index = global_char_index
        self._char_at_pos_index = char_at_pos_index

    @classmethod
    def empty(cls) -> "Dictionary":
        return cls((), {}, {})

    # from_words builds both indexes in one pass over every character
    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Dictionary":
        # Deduplicate while keeping order
        seen: Set[str] = set()
        ordered = []
        for w in words:
            if w not in seen:
                seen.add(w)
                ordered.append(w)

        global_char_index: Dict[str, Set[WordIndex]] = {}
        char_at_pos_index: Dict[CharPos, Dict[str, Set[WordIndex]]] = {}
        for index, word in enumerate(ordered):
            for pos, ch in enumerate(word):
                global_char_index.setdefault(ch, set()).add(index)
                char_at_pos_index.setdefault(pos, {}).setdefault(ch, set()).add(index)

        return cls(
            tuple(ordered),
            {ch: frozenset(ix) for ch, ix in global_char_index.items()},
            {
                pos: {ch: frozenset(ix) for ch, ix in by_char.items()}
                for pos, by_char in char_at_pos_index.items()
            },
        )

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def words_set(self) -> FrozenSet[str]:
        return self._words_set

    @property
    def global_char_index(self) -> CharIndex:
        return self._global_char_index

    @property
    def char_at_pos_index(self) -> Dict[CharPos, CharIndex]:
        return self._char_at_pos_index

    @property
    def word_len(self) -> int:
        return len(self._words[0]) if self._words else 0

    def word_in_dict(self, word: str) -> bool:
        return word in self._words_set

    def char_stats(self) -> Dict[str, int]:
        """Number of words each character occurs in."""
        return {ch: len(ix) for ch, ix in self._global_char_index.items()}

    # ---- narrowing -------------------------------------------------------

    def deny_chars(self, chars: Iterable[str]) -> "Dictionary":
        return self._remove_indices(self._indices_by_chars(chars))

    def deny_chars_at_positions(self, positions: Iterable[CharPos], chars: Iterable[str]) -> "Dictionary":
        return self._remove_indices(self._indices_by_positions_and_chars(positions, chars))

    def only_chars(self, chars: Iterable[str]) -> "Dictionary":
        return self._keep_indices(self._indices_by_chars(chars))

    def only_chars_at_positions(self, positions: Iterable[CharPos], chars: Iterable[str]) -> "Dictionary":
        return self._keep_indices(self._indices_by_positions_and_chars(positions, chars))

    def _indices_by_chars(self, chars: Iterable[str]) -> Set[WordIndex]:
        out: Set[WordIndex] = set()
        for ch in set(chars):
            out.update(self._global_char_index.get(ch, ()))
        return out

    def _indices_by_positions_and_chars(
        self, positions: Iterable[CharPos], chars: Iterable[str]
    ) -> Set[WordIndex]:
        chars = set(chars)
        out: Set[WordIndex] = set()
        for pos in set(positions):
            by_char = self._char_at_pos_index.get(pos)
            if by_char is None:
                continue
            for ch in chars:
                out.update(by_char.get(ch, ()))
        return out

    def _remove_indices(self, to_remove: Set[WordIndex]) -> "Dictionary":
        if not to_remove:
            return self
        return Dictionary.from_words(w for i, w in enumerate(self._words) if i not in to_remove)

    # an empty keep-set means the constraints are unsatisfiable, not an error
    def _keep_indices(self, to_keep: Set[WordIndex]) -> "Dictionary":
        if not to_keep:
            return Dictionary.empty()
        return Dictionary.from_words(w for i, w in enumerate(self._words) if i in to_keep)

    # ---- container protocol ---------------------------------------------

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words_set

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._words == other._words

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        preview = " ".join(self._words[:5])
        more = " ..." if len(self._words) > 5 else ""
        return f"Dictionary({len(self._words)} words: {preview}{more})"
