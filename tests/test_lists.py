import pytest

from gamebreaker.lists import ListEntry, find_pos, find_value, get_string


@pytest.fixture
def entries():
    return [ListEntry(8, "alpha"), ListEntry(8, "beta"), ListEntry(4, "gamma")]


def test_get_string_every_item_followed_by_separator(entries):
    result = get_string(entries, ";")
    assert result.endswith(";")
    assert result.count(";") == len(entries)
    assert result.split(";")[:-1] == [e.data for e in entries]


def test_get_string_pinned_value():
    assert get_string([ListEntry(8, "a"), ListEntry(8, "b")], ",") == "a,b,"


def test_get_string_empty_list():
    assert not get_string([], "|")


def test_find_value(entries):
    assert find_value(entries, 1) == "beta"


def test_find_value_out_of_range(entries):
    with pytest.raises(IndexError):
        find_value(entries, len(entries))


def test_find_pos_round_trip(entries):
    for index, entry in enumerate(entries):
        assert find_pos(entries, entry.data) == index
        assert find_value(entries, find_pos(entries, entry.data)) == entry.data


def test_find_pos_first_match():
    items = [ListEntry(8, "x"), ListEntry(4, "x")]
    assert find_pos(items, "x") == 0


def test_find_pos_missing(entries):
    assert find_pos(entries, "delta") == -1