from collections import Counter

import pytest

from slovle import (
    Attempt,
    AttemptChar,
    CharPositions,
    CharResult,
    Dictionary,
    FormatError,
    LengthMismatchError,
    NotInDictionaryError,
    is_win,
)

E, N, U = CharResult.EXACT, CharResult.NOT_IN_POSITION, CharResult.UNSUCCESSFUL


def score(guess, secret, dictionary):
    return Attempt.inspect(guess, CharPositions.from_word(secret), dictionary)


def states(attempt):
    return [c.state for c in attempt]


def test_kazna_against_sazan(dictionary):
    attempt = score("казна", "сазан", dictionary)
    assert states(attempt) == [U, E, E, N, N]
    assert str(attempt) == "к а+з+н?а?"
    assert attempt.word == "казна"


def test_duplicate_letter_credited_once(dictionary):
    attempt = score("парад", "парус", dictionary)
    assert states(attempt) == [E, E, E, U, U]
    assert str(attempt) == "п+а+р+а д "


def test_exact_beats_earlier_misplaced(dictionary):
    # the н at slot 2 would be misplaced, but the only н is taken by the exact hit at slot 4
    attempt = score("банан", "сазан", dictionary)
    assert str(attempt) == "б а+н а+н+"


def test_self_is_win(dictionary, words):
    for w in words:
        attempt = score(w, w, dictionary)
        assert all(s is E for s in states(attempt))
        assert attempt.is_win()
        assert is_win(attempt)


def test_not_win(dictionary):
    assert not score("казан", "сазан", dictionary).is_win()


def test_duplicate_letter_conservation(dictionary, words):
    for secret in words:
        secret_counts = Counter(secret)
        for guess in words:
            attempt = score(guess, secret, dictionary)
            credited = Counter(c.ch for c in attempt if c.state is not U)
            for ch, n in credited.items():
                assert n <= secret_counts[ch], (secret, guess, str(attempt))


def test_length_mismatch(dictionary):
    with pytest.raises(LengthMismatchError) as exc:
        score("топ", "сазан", dictionary)
    assert exc.value.expected == 5
    assert exc.value.got == 3
    assert str(exc.value) == "Input string length not matched to word"


def test_not_in_dictionary(dictionary):
    with pytest.raises(NotInDictionaryError):
        score("абвгд", "сазан", dictionary)


def test_length_checked_before_membership(dictionary):
    with pytest.raises(LengthMismatchError):
        score("абв", "сазан", dictionary)


def test_secret_index_not_consumed(dictionary):
    secret = CharPositions.from_word("сазан")
    Attempt.inspect("фазан", secret, dictionary)
    assert secret == CharPositions.from_word("сазан")


def test_attempt_is_immutable(dictionary):
    attempt = score("казна", "сазан", dictionary)
    with pytest.raises(AttributeError):
        attempt.chars = ()


def test_char_result_markers():
    assert str(E) == "+"
    assert str(N) == "?"
    assert str(U) == " "
    assert CharResult.from_marker("?") is N
    with pytest.raises(FormatError):
        CharResult.from_marker("а")


def test_display_attempt():
    attempt = Attempt(
        (
            AttemptChar("а", E),
            AttemptChar("б", N),
            AttemptChar("в", U),
            AttemptChar("г", E),
            AttemptChar("д", N),
        )
    )
    assert str(attempt) == "а+б?в г+д?"
    assert str(attempt.chars[0]) == "а+"


def test_parse():
    attempt = Attempt.parse("к а+з+н?а?")
    assert attempt.word == "казна"
    assert states(attempt) == [U, E, E, N, N]
    assert str(attempt) == "к а+з+н?а?"


def test_parse_bad_marker():
    with pytest.raises(FormatError):
        Attempt.parse("к!а+з+н?а?")


def test_parse_odd_length():
    with pytest.raises(FormatError):
        Attempt.parse("к а+з+н?а")


def test_other_word_lengths():
    d = Dictionary.from_words(["кот", "ток"])
    attempt = Attempt.inspect("ток", CharPositions.from_word("кот"), d)
    assert str(attempt) == "т?о+к?"
