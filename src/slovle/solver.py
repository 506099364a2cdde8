"""
solver.py

Greedy next-guess suggestion.

For every slot that is still open we know, from the remaining candidate words,
how often each letter sits there. The solver fixes the most likely
(slot, letter) pair, narrows the dictionary to words that agree, and repeats
until every slot is fixed. The product of the picked probabilities is the
chance that the suggested word is the secret, kept as an exact Fraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Iterable, List, Optional, Set

from .attempt import Attempt
from .constraints import constraints_from_attempt, undetermined_positions
from .dictionary import Dictionary
from .errors import LengthMismatchError
from .logs import LogFn
from .positions import CharPos


@dataclass(frozen=True)
class Candidate:
    pos: CharPos
    ch: str
    probability: Fraction
    count: int


@dataclass(frozen=True)
class Suggestion:
    word: str
    probability: Fraction


# position_stats: slot -> letter -> number of words with that letter in that slot
def position_stats(dictionary: Dictionary) -> Dict[CharPos, Dict[str, int]]:
    return {
        pos: {ch: len(indices) for ch, indices in by_char.items()}
        for pos, by_char in dictionary.char_at_pos_index.items()
    }


def _rank(c: Candidate):
    # higher probability, then more words, then smaller letter, then smaller slot
    return (-c.probability, -c.count, c.ch, c.pos)


def best_candidate(dictionary: Dictionary, positions: Iterable[CharPos]) -> Optional[Candidate]:
    best: Optional[Candidate] = None
    for pos in positions:
        by_char = dictionary.char_at_pos_index.get(pos)
        if not by_char:
            continue
        total = sum(len(indices) for indices in by_char.values())
        for ch, indices in by_char.items():
            cand = Candidate(pos=pos, ch=ch, probability=Fraction(len(indices), total), count=len(indices))
            if best is None or _rank(cand) < _rank(best):
                best = cand
    return best


def suggest_word(
    dictionary: Dictionary,
    positions: Optional[Iterable[CharPos]] = None,
    log: Optional[LogFn] = None,
) -> Optional[Suggestion]:
    """
    Returns None when there is nothing to suggest: the dictionary is empty
    (constraints were unsatisfiable) or no slot is left open.
    """
    todo: Set[CharPos] = set(range(dictionary.word_len)) if positions is None else set(positions)
    if not dictionary or not todo:
        return None

    probability = Fraction(1)
    while todo:
        cand = best_candidate(dictionary, todo)
        if cand is None:
            return None
        if log is not None:
            log(f"solver: fix {cand.ch} at {cand.pos} p={cand.probability} ({cand.count} words)")
        dictionary = dictionary.only_chars_at_positions({cand.pos}, {cand.ch})
        todo.discard(cand.pos)
        probability *= cand.probability

    # every word left agrees on all the fixed slots
    return Suggestion(word=dictionary.words[0], probability=probability)


class Solver:
    """Keeps a dictionary in sync with the attempts made so far."""

    def __init__(self, dictionary: Dictionary, log: Optional[LogFn] = None):
        self._word_len = dictionary.word_len
        self._candidates = dictionary
        self._attempts: List[Attempt] = []
        self._log = log

    @property
    def candidates(self) -> Dictionary:
        return self._candidates

    @property
    def attempts(self) -> List[Attempt]:
        return list(self._attempts)

    @property
    def undetermined(self) -> Set[CharPos]:
        return undetermined_positions(self._attempts, self._word_len)

    def apply(self, attempt: Attempt) -> Dictionary:
        if len(attempt) != self._word_len:
            raise LengthMismatchError(expected=self._word_len, got=len(attempt))

        before = len(self._candidates)
        for constraint in constraints_from_attempt(attempt):
            self._candidates = constraint.apply(self._candidates)
            if self._log is not None:
                self._log(f"solver: {constraint} -> {len(self._candidates)} words")
        self._attempts.append(attempt)

        if self._log is not None:
            self._log(f"solver: filtered candidates {before} -> {len(self._candidates)}")
        return self._candidates

    def suggest(self) -> Optional[Suggestion]:
        return suggest_word(self._candidates, self.undetermined, log=self._log)
