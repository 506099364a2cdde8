"""
attempt.py

Scoring of one guess against the secret word.

Text form of an attempt: every guessed char followed by a marker
- '+' exact (right letter, right slot)
- '?' the letter is in the word, but somewhere else
- ' ' the letter is not in the word (or all its copies are already claimed)
Example: "к а+з+н?а?"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .dictionary import Dictionary
from .errors import FormatError, LengthMismatchError, NotInDictionaryError
from .positions import CharPositions


class CharResult(Enum):
    EXACT = "+"
    NOT_IN_POSITION = "?"
    UNSUCCESSFUL = " "

    @classmethod
    def from_marker(cls, marker: str) -> "CharResult":
        try:
            return cls(marker)
        except ValueError:
            raise FormatError(f"Unexpected char result marker: {marker!r}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AttemptChar:
    ch: str
    state: CharResult

    def __str__(self) -> str:
        return f"{self.ch}{self.state}"


@dataclass(frozen=True)
class Attempt:
    chars: Tuple[AttemptChar, ...]

    # inspect scores guess against the secret using Wordle's duplicate-letter rule
    @classmethod
    def inspect(cls, guess: str, secret: CharPositions, dictionary: Dictionary) -> "Attempt":
        """
        Two passes, left to right. Exact hits are credited first; every credited
        letter is consumed from a private copy of the secret index, so a letter
        repeated in the guess is credited at most as many times as it occurs in
        the secret.
        """
        if len(guess) != secret.word_len:
            raise LengthMismatchError(expected=secret.word_len, got=len(guess))
        if not dictionary.word_in_dict(guess):
            raise NotInDictionaryError(guess)

        remaining = secret.copy()
        states: List[Optional[CharResult]] = [None] * len(guess)

        # first pass: exact
        for pos, ch in enumerate(guess):
            if pos in remaining.positions(ch):
                states[pos] = CharResult.EXACT
                remaining.remove(ch, pos)

        # second pass: present elsewhere, or not at all
        for pos, ch in enumerate(guess):
            if states[pos] is not None:
                continue
            slots = remaining.positions(ch)
            if slots:
                states[pos] = CharResult.NOT_IN_POSITION
                remaining.remove(ch, min(slots))
            else:
                states[pos] = CharResult.UNSUCCESSFUL

        return cls(tuple(AttemptChar(ch, state) for ch, state in zip(guess, states)))  # type: ignore[arg-type]

    @classmethod
    def parse(cls, text: str) -> "Attempt":
        if len(text) % 2:
            raise FormatError(f"Attempt text must be (char, marker) pairs, got {len(text)} chars")
        return cls(tuple(AttemptChar(text[i], CharResult.from_marker(text[i + 1])) for i in range(0, len(text), 2)))

    @property
    def word(self) -> str:
        return "".join(c.ch for c in self.chars)

    def is_win(self) -> bool:
        return all(c.state is CharResult.EXACT for c in self.chars)

    def __iter__(self) -> Iterator[AttemptChar]:
        return iter(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    def __str__(self) -> str:
        return "".join(str(c) for c in self.chars)


def is_win(attempt: Attempt) -> bool:
    return attempt.is_win()
