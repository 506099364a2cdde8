"""
constraints.py

Translate scored attempts into dictionary-narrowing steps.

Each constraint is a small value that knows which Dictionary call it stands
for, so a driver loop can log what it learned before applying it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Set, Union

from .attempt import Attempt, CharResult
from .dictionary import Dictionary
from .positions import CharPos


@dataclass(frozen=True)
class CharsNotInWord:
    chars: FrozenSet[str]

    def apply(self, dictionary: Dictionary) -> Dictionary:
        return dictionary.deny_chars(self.chars)

    def __str__(self) -> str:
        return f"no {''.join(sorted(self.chars))}"


@dataclass(frozen=True)
class CharNotAtPos:
    ch: str
    pos: CharPos

    def apply(self, dictionary: Dictionary) -> Dictionary:
        return dictionary.deny_chars_at_positions({self.pos}, {self.ch})

    def __str__(self) -> str:
        return f"{self.ch} not at {self.pos}"


@dataclass(frozen=True)
class CharInWord:
    ch: str

    def apply(self, dictionary: Dictionary) -> Dictionary:
        return dictionary.only_chars({self.ch})

    def __str__(self) -> str:
        return f"has {self.ch}"


@dataclass(frozen=True)
class CharAtPos:
    ch: str
    pos: CharPos

    def apply(self, dictionary: Dictionary) -> Dictionary:
        return dictionary.only_chars_at_positions({self.pos}, {self.ch})

    def __str__(self) -> str:
        return f"{self.ch} at {self.pos}"


Constraint = Union[CharsNotInWord, CharNotAtPos, CharInWord, CharAtPos]


def constraints_from_attempt(attempt: Attempt) -> List[Constraint]:
    # a letter marked ' ' is only wholly absent when no other copy of it scored
    confirmed = {c.ch for c in attempt if c.state is not CharResult.UNSUCCESSFUL}

    out: List[Constraint] = []
    absent: Set[str] = set()
    for pos, c in enumerate(attempt):
        if c.state is CharResult.EXACT:
            out.append(CharAtPos(c.ch, pos))
        elif c.state is CharResult.NOT_IN_POSITION:
            out.append(CharNotAtPos(c.ch, pos))
            out.append(CharInWord(c.ch))
        elif c.ch in confirmed:
            out.append(CharNotAtPos(c.ch, pos))
        else:
            absent.add(c.ch)
    if absent:
        out.append(CharsNotInWord(frozenset(absent)))
    return out


def apply_constraints(dictionary: Dictionary, constraints: Iterable[Constraint]) -> Dictionary:
    for constraint in constraints:
        dictionary = constraint.apply(dictionary)
    return dictionary


def narrow(dictionary: Dictionary, attempt: Attempt) -> Dictionary:
    return apply_constraints(dictionary, constraints_from_attempt(attempt))


def undetermined_positions(attempts: Iterable[Attempt], word_len: int) -> Set[CharPos]:
    """Slots that no attempt has scored as exact yet."""
    todo = set(range(word_len))
    for attempt in attempts:
        for pos, c in enumerate(attempt):
            if c.state is CharResult.EXACT:
                todo.discard(pos)
    return todo
