from slovle import CharPositions


def test_from_word():
    index = CharPositions.from_word("сазан")
    assert index.word_len == 5
    assert index.positions("с") == {0}
    assert index.positions("а") == {1, 3}
    assert index.positions("з") == {2}
    assert index.positions("н") == {4}


def test_positions_missing_char():
    assert CharPositions.from_word("сазан").positions("б") == frozenset()


def test_remove_drops_char_when_empty():
    index = CharPositions.from_word("сазан")
    index.remove("а", 1)
    assert index.positions("а") == {3}
    assert "а" in index
    index.remove("а", 3)
    assert "а" not in index
    # removing something that is not there is a no-op
    index.remove("а", 3)
    index.remove("б", 0)
    assert index.word_len == 5


def test_copy_is_independent():
    index = CharPositions.from_word("сазан")
    work = index.copy()
    work.remove("с", 0)
    assert index.positions("с") == {0}
    assert work.positions("с") == frozenset()
    assert index != work
    assert index == CharPositions.from_word("сазан")
