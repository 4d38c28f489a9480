import pytest

from chainhash.hashing import hash_name, hash_name_stepwise

NAMES = ["+", "-", "!=", "<=", ":=", "and", "cell", "get-file", "new-symbol",
         "put-file", "quote", "type", "é", ""]


@pytest.mark.parametrize("func", [hash_name, hash_name_stepwise])
@pytest.mark.parametrize("size", [1, 7, 34, 44, 2**32])
def test_result_in_range(func, size):
    for name in NAMES:
        assert 0 <= func(name, size) < size


@pytest.mark.parametrize("func", [hash_name, hash_name_stepwise])
def test_empty_name_hashes_to_zero(func):
    assert func("", 44) == 0


@pytest.mark.parametrize("func", [hash_name, hash_name_stepwise])
def test_size_one_always_zero(func):
    assert {func(name, 1) for name in NAMES} == {0}


@pytest.mark.parametrize("func", [hash_name, hash_name_stepwise])
@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_size_rejected(func, size):
    with pytest.raises(ValueError):
        func("abc", size)


def test_plus_in_table_of_44():
    assert hash_name("+", 44) == 1


@pytest.mark.parametrize("name", ["+", "a", "z", "!"])
@pytest.mark.parametrize("size", [34, 44, 97])
def test_single_char_variants_agree(name, size):
    assert hash_name(name, size) == hash_name_stepwise(name, size)


def test_pinned_values():
    assert hash_name_stepwise("+", 34) == 13
    assert hash_name_stepwise("ab", 34) == 18
    assert hash_name("ab", 44) == 30