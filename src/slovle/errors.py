"""Exceptions raised by the slovle game engine."""


class SlovleError(Exception):
    """Base class for every error raised by slovle."""


class ValidationError(SlovleError, ValueError):
    """A guess was rejected; the turn is not consumed and the caller may retry."""


class LengthMismatchError(ValidationError):
    def __init__(self, expected: int, got: int):
        super().__init__("Input string length not matched to word")
        self.expected = expected
        self.got = got


class NotInDictionaryError(ValidationError):
    def __init__(self, word: str):
        super().__init__("Word not in dictionary")
        self.word = word


class GameStateError(SlovleError):
    """The game is already finished; further guesses are a caller bug."""


class AlreadyWonError(GameStateError):
    def __init__(self):
        super().__init__("Already won")


class TriesExhaustedError(GameStateError):
    def __init__(self):
        super().__init__("Tries exhausted")


class FormatError(SlovleError, ValueError):
    """Attempt text could not be parsed."""


class ConstructionError(SlovleError, ValueError):
    """A game was started with a secret word that is not in the dictionary."""
