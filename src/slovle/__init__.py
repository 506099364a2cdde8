"""Five-letter Cyrillic word game: scoring rules, dictionary index and solver."""

from .attempt import Attempt, AttemptChar, CharResult, is_win
from .constraints import constraints_from_attempt, narrow, undetermined_positions
from .dictionary import Dictionary
from .errors import (
    AlreadyWonError,
    ConstructionError,
    FormatError,
    GameStateError,
    LengthMismatchError,
    NotInDictionaryError,
    SlovleError,
    TriesExhaustedError,
    ValidationError,
)
from .game import DEFAULT_MAX_TRIES, WORD_LENGTH, Game, GameStatus
from .positions import CharPositions
from .solver import Candidate, Solver, Suggestion, best_candidate, position_stats, suggest_word
from .wordlist import filter_words, load_words_from_file

__all__ = [
    "AlreadyWonError",
    "Attempt",
    "AttemptChar",
    "Candidate",
    "CharPositions",
    "CharResult",
    "ConstructionError",
    "DEFAULT_MAX_TRIES",
    "Dictionary",
    "FormatError",
    "Game",
    "GameStateError",
    "GameStatus",
    "LengthMismatchError",
    "NotInDictionaryError",
    "SlovleError",
    "Solver",
    "Suggestion",
    "TriesExhaustedError",
    "ValidationError",
    "WORD_LENGTH",
    "best_candidate",
    "constraints_from_attempt",
    "filter_words",
    "is_win",
    "load_words_from_file",
    "narrow",
    "position_stats",
    "suggest_word",
    "undetermined_positions",
]
