"""
simulate.py

Plays the solver against many secrets.

Every turn records how many candidate words were still alive and the exact
odds the solver gave its own suggestion, so the report can show how fast the
dictionary shrinks and how well those odds predict a hit.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Iterable, List, Optional, Tuple

import tqdm

from .dictionary import Dictionary
from .errors import GameStateError, ValidationError
from .game import DEFAULT_MAX_TRIES, Game, GameStatus
from .logs import LogFn
from .solver import Solver


@dataclass(frozen=True)
class Turn:
    guess: str
    candidates: int  # words alive before the guess
    probability: Fraction  # solver's odds that guess is the secret
    attempt: str


@dataclass(frozen=True)
class Playthrough:
    secret: str
    status: GameStatus
    turns: Tuple[Turn, ...]

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON


def simulate_game(
    dictionary: Dictionary,
    secret: str,
    *,
    max_tries: int = DEFAULT_MAX_TRIES,
    log: Optional[LogFn] = None,
) -> Playthrough:
    game = Game(dictionary, secret, max_tries)
    solver = Solver(dictionary)

    turns: List[Turn] = []
    while game.status is GameStatus.IN_PROGRESS:
        suggestion = solver.suggest()
        if suggestion is None:
            break
        alive = len(solver.candidates)

        try:
            attempt = game.try_guess(suggestion.word)
        except (ValidationError, GameStateError) as e:
            # suggestions always come from the dictionary, so this is a bug
            raise RuntimeError(f"solver suggested an unplayable word {suggestion.word!r}: {e}") from e
        if log is not None:
            log(f"{secret}: turn {len(game.attempts)} {attempt} p={suggestion.probability}")

        turns.append(Turn(suggestion.word, alive, suggestion.probability, str(attempt)))
        solver.apply(attempt)

    return Playthrough(secret=secret, status=game.status, turns=tuple(turns))


def simulate(
    dictionary: Dictionary,
    secrets: Iterable[str],
    *,
    max_tries: int = DEFAULT_MAX_TRIES,
    show_progress: bool = True,
    log: Optional[LogFn] = None,
) -> List[Playthrough]:
    secrets = list(secrets)
    iterator = tqdm.tqdm(secrets, desc="Simulating", unit="game") if show_progress else secrets
    return [simulate_game(dictionary, s, max_tries=max_tries, log=log) for s in iterator]


# shrink_curve: turn number -> mean number of candidates alive before that turn
def shrink_curve(playthroughs: Iterable[Playthrough]) -> Dict[int, float]:
    totals: Counter = Counter()
    games: Counter = Counter()
    for p in playthroughs:
        for n, turn in enumerate(p.turns, start=1):
            totals[n] += turn.candidates
            games[n] += 1
    return {n: totals[n] / games[n] for n in sorted(games)}


def summarize(playthroughs: Iterable[Playthrough]) -> str:
    playthroughs = list(playthroughs)
    if not playthroughs:
        return "No games played."

    won = [p for p in playthroughs if p.won]
    lost = [p for p in playthroughs if not p.won]
    tries = Counter(len(p.turns) for p in won)

    lines = [f"Games: {len(playthroughs)} | won {len(won)} | lost {len(lost)}"]
    if won:
        lines.append("Tries to win: " + " ".join(f"{t}:{tries[t]}" for t in sorted(tries)))
        # expected hits if every guess had the odds the solver claimed
        expected = sum(turn.probability for p in playthroughs for turn in p.turns)
        lines.append(f"Hits: {len(won)}, expected from solver odds: {float(expected):.2f}")

    curve = shrink_curve(playthroughs)
    lines.append("Candidates before turn (mean): " + " ".join(f"{n}:{c:.1f}" for n, c in curve.items()))

    opening = playthroughs[0].turns[0] if playthroughs[0].turns else None
    if opening is not None:
        lines.append(f"Opening guess: {opening.guess} (p = {opening.probability})")
    if lost:
        lines.append("Lost: " + ", ".join(p.secret for p in lost[:10]) + (" ..." if len(lost) > 10 else ""))
    return "\n".join(lines)


def plot_results(*, playthroughs: List[Playthrough], out_path: str) -> None:
    # Import matplotlib only if plotting is requested.
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt  # noqa: E402

    curve = shrink_curve(playthroughs)
    tries = Counter(len(p.turns) if p.won else 0 for p in playthroughs)

    fig, (left, right) = plt.subplots(1, 2, figsize=(11, 4))

    left.plot(list(curve), list(curve.values()), marker="o")
    left.set_yscale("log")
    left.set_title("Candidates left")
    left.set_xlabel("Turn")
    left.set_ylabel("mean words alive")

    won_tries = sorted(t for t in tries if t)
    labels = [str(t) for t in won_tries]
    heights = [tries[t] for t in won_tries]
    colors = ["C0"] * len(won_tries)
    if tries[0]:
        labels.append("lost")
        heights.append(tries[0])
        colors.append("C3")
    right.bar(labels, heights, color=colors)
    right.set_title("Tries to win")
    right.set_ylabel("# games")

    fig.tight_layout()
    fig.savefig(out_path, dpi=120)
    plt.close(fig)
