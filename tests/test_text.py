import pytest

from cbasics.text import count_occurrences, is_palindrome, string_length

MESSAGE = "Hello, world!"


def test_count_occurrences_in_message():
    assert count_occurrences(MESSAGE, "o") == 2


def test_count_matches_str_count():
    for ch in set(MESSAGE) | {"z"}:
        assert count_occurrences(MESSAGE, ch) == MESSAGE.count(ch)


def test_count_requires_single_character():
    with pytest.raises(ValueError):
        count_occurrences(MESSAGE, "lo")
    with pytest.raises(ValueError):
        count_occurrences(MESSAGE, "")


def test_palindromes():
    assert is_palindrome("racecar")
    assert is_palindrome("")
    assert is_palindrome("a")
    assert not is_palindrome("hello")


def test_palindrome_is_case_sensitive():
    assert not is_palindrome("Racecar")


def test_string_length():
    assert string_length(MESSAGE) == 13
    assert string_length("") == 0
    assert string_length(MESSAGE * 3) == 3 * string_length(MESSAGE)