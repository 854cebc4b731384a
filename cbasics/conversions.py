"""Conversion of integers to binary and hexadecimal digit strings."""


def to_binary(number: int) -> str:
    """Return the binary digits of ``number``.

    Zero and negative numbers produce ``"0"``.
    """
    if number <= 0:
        return "0"
    digits = []
    while number > 0:
        number, bit = divmod(number, 2)
        digits.append(str(bit))
    return "".join(reversed(digits))


def to_hex(number: int) -> str:
    """Return the upper-case hexadecimal digits of a non-negative ``number``."""
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    alphabet = "0123456789ABCDEF"
    digits = []
    while number:
        number, remainder = divmod(number, 16)
        digits.append(alphabet[remainder])
    return "".join(reversed(digits))