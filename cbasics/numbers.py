"""Small number-theory and arithmetic routines."""

from __future__ import annotations

import cmath
import math
from collections.abc import Iterable


def _digits(number: int) -> list[int]:
    """Return the decimal digits of ``abs(number)``, most significant first."""
    return [int(ch) for ch in str(abs(number))]


def is_armstrong(number: int) -> bool:
    """Return True if ``number`` equals the sum of its digits each raised to the digit count.

    Zero has no digits and counts as an Armstrong number. A negative number
    is tested with negated digits, so ``-153`` qualifies just as ``153`` does.
    """
    if number == 0:
        return True
    digits = _digits(number)
    count = len(digits)
    sign = -1 if number < 0 else 1
    return sum((sign * d) ** count for d in digits) == number


def factorial(n: int) -> int:
    """Return ``n!``; raise ValueError for negative ``n``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, n + 1))


def factors(number: int) -> list[int]:
    """Return the positive divisors of ``number`` in ascending order.

    Non-positive numbers have no divisors in this sense and give an empty list.
    """
    return [i for i in range(1, number + 1) if number % i == 0]


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``.

    Values of ``n`` below 2 are returned unchanged.
    """
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_series(terms: int) -> list[int]:
    """Return the first ``terms`` Fibonacci numbers, starting from 0."""
    series = []
    first, second = 0, 1
    for _ in range(terms):
        series.append(first)
        first, second = second, first + second
    return series


def two_largest(values: Iterable[int]) -> tuple[int, int]:
    """Return ``(largest, second_largest)`` found in a single pass.

    Both start at the first value; the second largest is only replaced by a
    later value that exceeds it and differs from the current largest.
    Raises ValueError when ``values`` is empty.
    """
    iterator = iter(values)
    try:
        largest = next(iterator)
    except StopIteration:
        raise ValueError("two_largest() requires at least one value") from None
    second = largest
    for value in iterator:
        if value > largest:
            second, largest = largest, value
        elif value > second and value != largest:
            second = value
    return largest, second


def largest_of_three(a, b, c):
    """Return the largest of three values, preferring the earliest on ties."""
    largest = a
    if b > largest:
        largest = b
    if c > largest:
        largest = c
    return largest


def multiplication_table(number: int) -> list[str]:
    """Return the ten lines ``"n x i = n*i"`` for i from 1 to 10."""
    return [f"{number} x {i} = {number * i}" for i in range(1, 11)]


def is_even(number: int) -> bool:
    """Return True if ``number`` is divisible by two."""
    return number % 2 == 0


def is_palindrome_number(number: int) -> bool:
    """Return True if the decimal digits of ``number`` read the same reversed.

    The sign is kept while reversing, so ``-121`` is a palindrome.
    """
    sign = -1 if number < 0 else 1
    reversed_number = sign * int(str(abs(number))[::-1])
    return reversed_number == number


def power(base: float, exponent: float) -> float:
    """Return ``base`` raised to ``exponent`` as a float.

    Raises ValueError where the result is not a real number.
    """
    return math.pow(base, exponent)


def is_prime(number: int) -> bool:
    """Return True if ``number`` is prime, by trial division up to ``number // 2``."""
    if number < 2:
        return False
    return all(number % i != 0 for i in range(2, number // 2 + 1))


def solve_quadratic(a: float, b: float, c: float) -> tuple[complex | float, ...]:
    """Return the roots of ``a*x**2 + b*x + c``.

    Two distinct real roots come back as floats, a repeated root as a
    one-element tuple, and complex roots as a conjugate pair with the
    positive imaginary part first. Raises ValueError when ``a`` is zero.
    """
    if a == 0:
        raise ValueError("coefficient 'a' must be non-zero")
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))
    if discriminant == 0:
        return (-b / (2 * a),)
    real_part = -b / (2 * a)
    imaginary_part = cmath.sqrt(discriminant).imag / (2 * a)
    return (complex(real_part, imaginary_part), complex(real_part, -imaginary_part))


def is_strong(number: int) -> bool:
    """Return True if ``number`` equals the sum of the factorials of its digits.

    Only positive numbers contribute digits, so zero qualifies and negative
    numbers never do.
    """
    total = sum(factorial(d) for d in _digits(number)) if number > 0 else 0
    return total == number


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a