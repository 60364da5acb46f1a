import pytest

from algobox.searching import (
    binary_search,
    contains_pattern,
    rabin_karp,
    sliding_window_max,
)

SORTED = [1, 4, 7, 9, 16, 56, 70]


def test_binary_search_source_example():
    assert binary_search(SORTED, 16) == 4


def test_binary_search_finds_every_element():
    for index, value in enumerate(SORTED):
        assert binary_search(SORTED, value) == index


@pytest.mark.parametrize("missing", [0, 5, 17, 71])
def test_binary_search_missing(missing):
    assert binary_search(SORTED, missing) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_rabin_karp_source_example():
    assert rabin_karp("GEEKS FOR GEEKS", "GEEK") == [0, 10]


@pytest.mark.parametrize(
    "text,pattern",
    [
        ("aaaaa", "aa"),
        ("abracadabra", "abra"),
        ("hello world", "o"),
        ("mississippi", "issi"),
        ("abc", "abc"),
    ],
)
def test_rabin_karp_matches_every_occurrence(text, pattern):
    found = rabin_karp(text, pattern)
    expected = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert found == expected


def test_rabin_karp_small_modulus_still_exact():
    text = "the quick brown fox jumps over the lazy dog"
    found = rabin_karp(text, "the", modulus=3)
    assert all(text[i : i + 3] == "the" for i in found)
    assert len(found) == text.count("the")


def test_rabin_karp_pattern_longer_than_text():
    assert rabin_karp("ab", "abc") == []


def test_rabin_karp_rejects_bad_modulus():
    with pytest.raises(ValueError):
        rabin_karp("abc", "a", modulus=0)


def test_sliding_window_source_example():
    data = [12, 156, 73, 93, 59, 83, 51, 73, 101, 456]
    assert sliding_window_max(data, 3) == [156, 156, 93, 93, 83, 83, 101, 456]


@pytest.mark.parametrize("k", [1, 2, 4, 7])
def test_sliding_window_matches_window_maximum(k):
    data = [5, -2, 8, 8, 1, 0, 13, 4, -9, 6, 6]
    result = sliding_window_max(data, k)
    assert len(result) == len(data) - k + 1
    for start, value in enumerate(result):
        assert value == max(data[start : start + k])


def test_sliding_window_of_one_is_identity():
    data = [3, 1, 2]
    assert sliding_window_max(data, 1) == data


@pytest.mark.parametrize("k", [0, -1, 4])
def test_sliding_window_rejects_bad_size(k):
    with pytest.raises(ValueError):
        sliding_window_max([1, 2, 3], k)


def test_contains_pattern_found():
    assert contains_pattern("pattern matching", "match") is True


def test_contains_pattern_not_found():
    assert contains_pattern("pattern matching", "mismatch") is False


def test_contains_pattern_at_end():
    assert contains_pattern("abcdef", "def") is True


def test_contains_pattern_overrunning_end():
    assert contains_pattern("abcde", "defg") is False


def test_contains_pattern_empty_text():
    assert contains_pattern("", "") is False
    assert contains_pattern("", "a") is False


def test_contains_pattern_empty_pattern():
    assert contains_pattern("abc", "") is True