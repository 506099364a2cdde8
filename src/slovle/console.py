"""
console.py

Line-oriented game loop: prompt, read a guess, print the scored attempt.
Reading and writing go through plain callables so the loop can be driven
from stdin/stdout or from a list of lines in tests.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional, Set

from .attempt import Attempt, CharResult
from .errors import ValidationError
from .game import Game, GameStatus

WriteFn = Callable[[str], None]

KEYBOARD_ROWS = (
    "йцукенгшщзхъ",
    "фывапролджэ",
    "ячсмитьбю",
)


def render_keyboard(available: Set[str]) -> str:
    lines = ["Available chars:"]
    for row in KEYBOARD_ROWS:
        lines.append("".join(ch if ch in available else " " for ch in row))
    return "\n".join(lines) + "\n"


# absent_chars are the letters the attempt proved are not in the secret at all
def absent_chars(attempt: Attempt) -> Set[str]:
    scored = {c.ch for c in attempt if c.state is not CharResult.UNSUCCESSFUL}
    return {c.ch for c in attempt if c.state is CharResult.UNSUCCESSFUL and c.ch not in scored}


def run_game(
    game: Game,
    lines: Iterable[str],
    write: WriteFn,
    available: Optional[Set[str]] = None,
) -> GameStatus:
    """
    Play game to the end, reading one guess per line.

    Rejected guesses (wrong length, unknown word) are reported and the same
    turn is asked again. Raises EOFError if input runs out before the game ends.
    """
    avail = set(game.dictionary.global_char_index) if available is None else set(available)
    it: Iterator[str] = iter(lines)

    turn = 1
    while not game.status.finished:
        write(render_keyboard(avail))
        write(f"Enter try {turn} of {game.max_tries}: ")
        line = next(it, None)
        if line is None:
            raise EOFError("Unexpected end of input")

        try:
            attempt = game.try_guess(line.strip().lower())
        except ValidationError as e:
            write(f"Attempt error: {e}\n")
            continue

        avail -= absent_chars(attempt)
        write(f"{attempt}\n")
        turn += 1

    return game.status
