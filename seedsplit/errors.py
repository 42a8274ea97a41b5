"""
Error kinds raised by seed-split.

Every error derives from SeedSplitError so callers can catch one type.
Validation errors are also ValueErrors and DivisionByZero is also a
ZeroDivisionError, so code expecting the built-in types keeps working.
"""

from __future__ import annotations


class SeedSplitError(Exception):
    """Base class for all seed-split errors."""


class InvalidThreshold(SeedSplitError, ValueError):
    """Threshold/count pair is not a valid sharing configuration."""

    def __init__(self, threshold: int, count: int, reason: str) -> None:
        self.threshold = threshold
        self.count = count
        super().__init__(f"{reason} (threshold={threshold}, count={count})")


class DivisionByZero(SeedSplitError, ZeroDivisionError):
    """Inverse of the zero field element was requested."""


class DuplicateIndex(SeedSplitError, ValueError):
    """Two shares passed to combine carry the same index."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Duplicate share index: {index}")


class InsufficientShares(SeedSplitError, ValueError):
    """Fewer than two shares passed to combine."""

    def __init__(self, given: int) -> None:
        self.given = given
        super().__init__(f"At least 2 shares are required, got {given}")


class UnknownWord(SeedSplitError, ValueError):
    """A phrase word is not in the wordlist."""

    def __init__(self, word: str, position: int) -> None:
        self.word = word
        self.position = position
        super().__init__(f"Unknown word {word!r} at position {position + 1}")


class WordCountMismatch(SeedSplitError, ValueError):
    """Phrase length does not match a supported field width."""

    def __init__(self, expected: tuple[int, ...], actual: int) -> None:
        self.expected = expected
        self.actual = actual
        wanted = " or ".join(str(n) for n in expected)
        super().__init__(f"Expected {wanted} words, got {actual}")


class InvalidLength(SeedSplitError, ValueError):
    """Byte buffer is not 16 or 32 bytes long."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Expected 16 or 32 bytes, got {length}")


class FieldSizeMismatch(SeedSplitError, ValueError):
    """Operands or shares belong to different fields."""


class ElementOutOfRange(SeedSplitError, ValueError):
    """Integer does not fit in the field's bit width."""

    def __init__(self, bits: int) -> None:
        self.bits = bits
        super().__init__(f"Value out of range for GF(2^{bits})")


class RandomSourceError(SeedSplitError, ValueError):
    """Random source returned the wrong number of bytes."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Random source returned {actual} bytes, expected {expected}")


class InvalidShareIndex(SeedSplitError, ValueError):
    """Share index outside 1..255."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Share index out of range [1, 255]: {index}")


class InvalidShareLine(SeedSplitError, ValueError):
    """Share line is not '<index> <words...>'."""


class WordlistError(SeedSplitError):
    """Wordlist could not be loaded or is malformed."""


class ConfigError(SeedSplitError):
    """Configuration value has the wrong type or an unsupported value."""
