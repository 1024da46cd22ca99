import pytest

from datastructs.strings import RollingHash, edit_distance, find_substring, z_algorithm


@pytest.mark.parametrize("s, t, expected", [
    ("biting", "whiten", 4),
    ([1, 3, 2, 4], [1, 5, 2, 6, 4, 3], 3),
    ("", "abc", 3),
    ("same", "same", 0),
])
def test_edit_distance(s, t, expected):
    assert edit_distance(s, t) == expected


def test_z_algorithm():
    assert z_algorithm("ababa") == [5, 0, 3, 0, 1]
    assert z_algorithm("aaaa") == [4, 3, 2, 1]
    assert z_algorithm("") == []


def test_find_substring():
    s = RollingHash("unvhusmjlvieloveuybouqvnqjygutqlovedkfsdfgheaiuloveaeiuvaygayfg")
    t = RollingHash("love")
    assert find_substring(s, t) == [12, 31, 47]
    assert find_substring(t, s) == []


def test_rolling_hash_ranges():
    h = RollingHash("abcabc")
    assert len(h) == 6
    assert h.hash(0, 3) == h.hash(3, 6)
    assert h.hash(0, 3) != h.hash(1, 4)
    assert h.hash(2, 2) == 0
    assert h.hash() == RollingHash(b"abcabc").hash()
