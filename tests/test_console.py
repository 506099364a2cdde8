import pytest

from slovle import Attempt, Game, GameStatus
from slovle.console import KEYBOARD_ROWS, absent_chars, render_keyboard, run_game

ALL_KEYS = set("".join(KEYBOARD_ROWS))

FULL_KEYBOARD = "Available chars:\nйцукенгшщзхъ\nфывапролджэ\nячсмитьбю\n"
NO_K_KEYBOARD = "Available chars:\nйцу енгшщзхъ\nфывапролджэ\nячсмитьбю\n"


def play(game, text):
    out = []
    lines = iter(text.splitlines(keepends=True))
    status = run_game(game, lines, out.append, available=ALL_KEYS)
    return status, "".join(out), lines


def test_render_keyboard():
    assert render_keyboard(ALL_KEYS - {"к"}) == NO_K_KEYBOARD


def test_win(dictionary):
    status, out, lines = play(Game(dictionary, "сазан", 6), "сазан\n")
    assert status is GameStatus.WON
    assert out == FULL_KEYBOARD + "Enter try 1 of 6: с+а+з+а+н+\n"
    assert next(lines, None) is None


def test_win_at_edge(dictionary):
    status, out, _ = play(Game(dictionary, "сазан", 2), "казан\nсазан\n")
    assert status is GameStatus.WON
    assert out == (
        FULL_KEYBOARD
        + "Enter try 1 of 2: к а+з+а+н+\n"
        + NO_K_KEYBOARD
        + "Enter try 2 of 2: с+а+з+а+н+\n"
    )


def test_fail_leaves_rest_of_input(dictionary):
    status, out, lines = play(Game(dictionary, "сазан", 2), "казан\nфазан\nсазан\n")
    assert status is GameStatus.LOST
    assert out == (
        FULL_KEYBOARD
        + "Enter try 1 of 2: к а+з+а+н+\n"
        + NO_K_KEYBOARD
        + "Enter try 2 of 2: ф а+з+а+н+\n"
    )
    assert next(lines) == "сазан\n"


def test_rejected_guess_asks_same_turn_again(dictionary):
    status, out, _ = play(Game(dictionary, "сазан", 6), "топ\nабвгд\nсазан\n")
    assert status is GameStatus.WON
    assert out == (
        FULL_KEYBOARD
        + "Enter try 1 of 6: Attempt error: Input string length not matched to word\n"
        + FULL_KEYBOARD
        + "Enter try 1 of 6: Attempt error: Word not in dictionary\n"
        + FULL_KEYBOARD
        + "Enter try 1 of 6: с+а+з+а+н+\n"
    )


def test_input_is_normalized(dictionary):
    status, _, _ = play(Game(dictionary, "сазан", 6), "  САЗАН \n")
    assert status is GameStatus.WON


def test_end_of_input(dictionary):
    with pytest.raises(EOFError):
        play(Game(dictionary, "сазан", 6), "казан\n")


def test_default_keyboard_uses_dictionary_letters(dictionary):
    out = []
    run_game(Game(dictionary, "сазан", 6), ["сазан"], out.append)
    # щ never occurs in the word list
    assert "щ" not in out[0]
    assert "с" in out[0]


def test_absent_chars():
    # the second а is unscored but another а was credited, so а stays available
    assert absent_chars(Attempt.parse("п+а+р+а д ")) == {"д"}
    assert absent_chars(Attempt.parse("к а+з+н?а?")) == {"к"}
