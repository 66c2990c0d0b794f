"""Base-83 integer packing used by blurhash tokens."""

from utils.constants import BASE, BASE83_ALPHABET, BASE83_LOOKUP
from utils.errors import InvalidCharacter


def decode_base83(text: str, offset: int = 0) -> int:
    """Decode most-significant-digit-first base-83 text to an integer.

    ``offset`` is only used to report the position of a bad character
    relative to the enclosing token.
    """
    value = 0
    for pos, char in enumerate(text):
        digit = BASE83_LOOKUP.get(char)
        if digit is None:
            raise InvalidCharacter(char, offset + pos)
        value = value * BASE + digit
    return value


def encode_base83(value: int, length: int) -> str:
    """Encode a non-negative integer as exactly ``length`` base-83 digits."""
    if value < 0 or value // BASE ** length != 0:
        raise ValueError(f"{value} does not fit in {length} base83 digits")
    return "".join(
        BASE83_ALPHABET[(value // BASE ** (length - i)) % BASE]
        for i in range(1, length + 1)
    )
