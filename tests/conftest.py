import pytest

from slovle import Dictionary

WORDS = [
    "сазан",
    "казна",
    "казан",
    "фазан",
    "парад",
    "парус",
    "бедро",
    "карта",
    "каток",
    "бегун",
    "мойка",
    "ножик",
    "рыбак",
    "сокол",
    "топор",
    "вагон",
    "метро",
    "пирог",
    "ручка",
    "банан",
    "лиман",
    "радар",
]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def dictionary():
    return Dictionary.from_words(WORDS)
