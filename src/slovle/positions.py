"""
positions.py

Per-word index of which slots every character occupies.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Set

CharPos = int


class CharPositions:
    def __init__(self, index: Dict[str, Set[CharPos]], word_len: int):
        self._index = index
        self._word_len = word_len

    @classmethod
    def from_word(cls, word: str) -> "CharPositions":
        index: Dict[str, Set[CharPos]] = {}
        for pos, ch in enumerate(word):
            index.setdefault(ch, set()).add(pos)
        return cls(index, len(word))

    @property
    def word_len(self) -> int:
        return self._word_len

    def positions(self, ch: str) -> FrozenSet[CharPos]:
        return frozenset(self._index.get(ch, ()))

    # remove drops a single (ch, pos) pair; the char disappears once it has no slots left
    def remove(self, ch: str, pos: CharPos) -> None:
        slots = self._index.get(ch)
        if slots is None:
            return
        slots.discard(pos)
        if not slots:
            del self._index[ch]

    def copy(self) -> "CharPositions":
        return CharPositions({ch: set(slots) for ch, slots in self._index.items()}, self._word_len)

    def __contains__(self, ch: str) -> bool:
        return ch in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharPositions):
            return NotImplemented
        return self._index == other._index and self._word_len == other._word_len

    def __repr__(self) -> str:
        body = ", ".join(f"{ch!r}: {sorted(slots)}" for ch, slots in sorted(self._index.items()))
        return f"CharPositions({{{body}}}, word_len={self._word_len})"
