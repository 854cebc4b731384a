"""Simple string utilities."""


def count_occurrences(text: str, char: str) -> int:
    """Return how many times the single character ``char`` appears in ``text``."""
    if len(char) != 1:
        raise ValueError("char must be a single character")
    return sum(1 for ch in text if ch == char)


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def string_length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return sum(1 for _ in text)