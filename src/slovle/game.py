"""
game.py

One round of the game: a secret word, a tries bound and the attempts so far.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .attempt import Attempt
from .dictionary import Dictionary
from .errors import AlreadyWonError, ConstructionError, TriesExhaustedError
from .positions import CharPositions

WORD_LENGTH = 5
DEFAULT_MAX_TRIES = 6


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def finished(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class Game:
    def __init__(self, dictionary: Dictionary, secret: str, max_tries: int = DEFAULT_MAX_TRIES):
        if not dictionary.word_in_dict(secret):
            raise ConstructionError(f"Game initiated with word not in dict: {secret!r}")
        self._dictionary = dictionary
        self._secret = secret
        self._secret_positions = CharPositions.from_word(secret)
        self._max_tries = max_tries
        self._attempts: List[Attempt] = []

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def word_len(self) -> int:
        return self._secret_positions.word_len

    @property
    def max_tries(self) -> int:
        return self._max_tries

    @property
    def attempts(self) -> Tuple[Attempt, ...]:
        return tuple(self._attempts)

    # status is recomputed from the attempt list every time
    @property
    def status(self) -> GameStatus:
        if self._attempts and self._attempts[-1].is_win():
            return GameStatus.WON
        if len(self._attempts) >= self._max_tries:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    def try_guess(self, guess: str) -> Attempt:
        """
        Score guess and record it.

        Raises ValidationError subclasses for a bad guess (nothing is recorded,
        the turn is not used up), AlreadyWonError / TriesExhaustedError once the
        game is over.
        """
        status = self.status
        if status is GameStatus.WON:
            raise AlreadyWonError()
        if status is GameStatus.LOST:
            raise TriesExhaustedError()

        attempt = Attempt.inspect(guess, self._secret_positions, self._dictionary)
        self._attempts.append(attempt)
        return attempt
