#!/usr/bin/env python3
"""
cli.py

Command line front end.

Subcommands:
  play      play a game against a random secret from the word list
  suggest   helper for a game played elsewhere: type back each scored attempt
            ("к а+з+н?а?") and get the next suggestion
  simulate  run the solver against every secret and print statistics
  filter    clean a raw word list (stdin -> stdout)

Usage:
  python3 -m slovle.cli play --words words.txt
  python3 -m slovle.cli suggest --words words.txt --verbose
  python3 -m slovle.cli simulate --words words.txt --limit 200 --plot results.png
  python3 -m slovle.cli filter --length 5 < raw.txt > words.txt
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional

from .attempt import Attempt
from .dictionary import Dictionary
from .console import run_game
from .errors import ConstructionError, FormatError, ValidationError
from .game import DEFAULT_MAX_TRIES, WORD_LENGTH, Game, GameStatus
from .logs import make_loggers
from .simulate import plot_results, simulate, summarize
from .solver import Solver
from .wordlist import filter_words, load_words_from_file


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _load_dictionary(path: str) -> Optional[Dictionary]:
    try:
        words = load_words_from_file(path)
    except OSError as e:
        print(f"Cannot read word list {path}: {e}", file=sys.stderr)
        return None
    except UnicodeDecodeError as e:
        print(f"Word list {path} is not valid UTF-8: {e}", file=sys.stderr)
        return None
    if not words:
        print(f"Loaded 0 usable words from {path}. Check the file.", file=sys.stderr)
        return None
    return Dictionary.from_words(words)


def cmd_play(args: argparse.Namespace) -> int:
    log, _log_debug = make_loggers(args.verbose, args.debug)
    dictionary = _load_dictionary(args.words)
    if dictionary is None:
        return 2

    secret = args.secret if args.secret else random.Random(args.seed).choice(dictionary.words)
    log(f"game: loaded {len(dictionary)} words, max tries = {args.max_tries}")
    try:
        game = Game(dictionary, secret, args.max_tries)
    except ConstructionError as e:
        print(e, file=sys.stderr)
        return 2

    try:
        status = run_game(game, sys.stdin, _write)
    except EOFError:
        print(f"\nNo more input. Word is: {game.secret}")
        return 1

    if status is GameStatus.WON:
        print("Win!")
        return 0
    print("Fail!")
    print(f"Word is: {game.secret}")
    return 1


def cmd_suggest(args: argparse.Namespace) -> int:
    log, log_debug = make_loggers(args.verbose, args.debug)
    dictionary = _load_dictionary(args.words)
    if dictionary is None:
        return 2

    solver = Solver(dictionary, log=log_debug)
    log(f"solver: loaded {len(dictionary)} words")

    print("\n=== slovle suggestions ===")
    print("After each guess type its result: every letter followed by '+', '?' or a space.")
    print("Example: к а+з+н?а?")
    print("Type 'quit' to exit.\n")

    turn = 1
    while True:
        n = len(solver.candidates)
        if n == 0:
            print("No candidates left. Either the word list doesn't match the game's dictionary,")
            print("or an attempt was mistyped.")
            return 1

        print(f"Turn {turn} | Remaining candidates: {n}")
        if n <= 20:
            print("Candidates:", " ".join(solver.candidates))

        suggestion = solver.suggest()
        if suggestion is not None:
            p = suggestion.probability
            print(f"Suggested guess: {suggestion.word}  (p = {p}, ~{float(p):.2%})\n")

        try:
            line = input("Enter the attempt result: ")
        except EOFError:
            return 0
        if line.strip() == "quit":
            return 0

        try:
            attempt = Attempt.parse(line.rstrip("\r\n"))
            solver.apply(attempt)
        except (FormatError, ValidationError) as e:
            print(f"{e}\n")
            continue

        if attempt.is_win():
            print(f"Solved in {turn} turns.")
            return 0
        print("")
        turn += 1


def cmd_simulate(args: argparse.Namespace) -> int:
    log, log_debug = make_loggers(args.verbose, args.debug)
    dictionary = _load_dictionary(args.words)
    if dictionary is None:
        return 2

    secrets: List[str] = list(dictionary.words)
    if args.limit and args.limit > 0:
        secrets = secrets[: args.limit]
    log(f"simulate: {len(secrets)} secrets, max tries = {args.max_tries}")

    results = simulate(
        dictionary,
        secrets,
        max_tries=args.max_tries,
        show_progress=not args.no_progress,
        log=log_debug,
    )
    print(summarize(results))

    if args.plot:
        try:
            plot_results(playthroughs=results, out_path=args.plot)
            print(f"Wrote plot: {args.plot}")
        except ModuleNotFoundError as e:
            print(f"Plot requested but missing dependency: {e}. Install matplotlib to use --plot.", file=sys.stderr)
            return 2
    return 0


def cmd_filter(args: argparse.Namespace) -> int:
    words = filter_words(
        sys.stdin,
        length=args.length,
        cyrillic_only=not args.any_script,
        map_yo=not args.keep_yo,
        lower=not args.keep_case,
    )
    for w in words:
        print(w)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="slovle", description="Five-letter Cyrillic word game and solver.")
    sub = ap.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--words", type=str, required=True, help="Word list, one word per line.")
        p.add_argument("--verbose", action="store_true", help="Print detailed progress to stderr.")
        p.add_argument("--debug", action="store_true", help="Very verbose logs (every solver step).")

    p_play = sub.add_parser("play", help="Play against a random secret word.")
    add_common(p_play)
    p_play.add_argument("--max-tries", type=int, default=DEFAULT_MAX_TRIES)
    p_play.add_argument("--seed", type=int, default=None, help="Seed for picking the secret.")
    p_play.add_argument("--secret", type=str, default=None, help=argparse.SUPPRESS)
    p_play.set_defaults(func=cmd_play)

    p_suggest = sub.add_parser("suggest", help="Suggest guesses for a game played elsewhere.")
    add_common(p_suggest)
    p_suggest.set_defaults(func=cmd_suggest)

    p_sim = sub.add_parser("simulate", help="Run solver simulations and print statistics.")
    add_common(p_sim)
    p_sim.add_argument("--limit", type=int, default=0, help="Limit number of secrets (0 = no limit).")
    p_sim.add_argument("--max-tries", type=int, default=DEFAULT_MAX_TRIES)
    p_sim.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    p_sim.add_argument("--plot", type=str, default=None, help="Write a matplotlib graph to this path.")
    p_sim.set_defaults(func=cmd_simulate)

    p_filter = sub.add_parser("filter", help="Clean a raw word list read from stdin.")
    p_filter.add_argument("--length", type=int, default=WORD_LENGTH, help="Word length.")
    p_filter.add_argument("--any-script", action="store_true", help="Keep words that are not all Cyrillic.")
    p_filter.add_argument("--keep-yo", action="store_true", help="Do not map ё to е.")
    p_filter.add_argument("--keep-case", action="store_true", help="Do not convert to lowercase.")
    p_filter.set_defaults(func=cmd_filter)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
