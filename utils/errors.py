"""Decode errors.

Every error aborts the current call; there is no partial output. They all
derive from ValueError so callers that only care about "bad input" can catch
that.
"""

from typing import Optional


class BlurHashError(ValueError):
    """Malformed token or invalid decode request."""


class InvalidCharacter(BlurHashError):
    """A character outside the base-83 alphabet."""

    def __init__(self, char: str, position: Optional[int] = None):
        self.char = char
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid base83 character {char!r}{where}")


class TokenTooShort(BlurHashError):
    """Token shorter than the 6-character minimum."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"BlurHash must be at least 6 characters, got {length}")


class LengthMismatch(BlurHashError):
    """Token length disagrees with the grid declared by its size flag."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"BlurHash length mismatch: size flag requires {expected} characters, got {actual}"
        )


class InvalidDimensions(BlurHashError):
    """Requested output size is not positive."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        super().__init__(f"Width and height must be positive, got {width}x{height}")
