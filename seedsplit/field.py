"""
Binary extension field arithmetic over GF(2^128) and GF(2^256).

Elements are polynomials over GF(2) stored as Python ints: bit i is the
coefficient of z^i. Addition is XOR, multiplication is carry-less
multiplication reduced modulo a fixed irreducible polynomial.

Reduction polynomials:
    GF(2^128): z^128 + z^7 + z^2 + z + 1
    GF(2^256): z^256 + z^10 + z^5 + z^2 + 1

Usage:
    size = FieldSize.from_byte_length(len(data))
    a = FieldElement.from_bytes(data)
    b = multiply(a, invert(a))
    assert b == FieldElement.one(size)
"""

from __future__ import annotations

import enum
import secrets
from dataclasses import dataclass
from typing import Callable

from seedsplit import (
    FIELD_128_BITS,
    FIELD_128_POLY,
    FIELD_256_BITS,
    FIELD_256_POLY,
    WORD_BITS,
)
from seedsplit.errors import (
    DivisionByZero,
    ElementOutOfRange,
    FieldSizeMismatch,
    InvalidLength,
    RandomSourceError,
    WordCountMismatch,
)

# Any callable returning n secure random bytes, e.g. secrets.token_bytes
RandomSource = Callable[[int], bytes]


class FieldSize(enum.Enum):
    """Supported field widths, in bits."""

    BITS_128 = FIELD_128_BITS
    BITS_256 = FIELD_256_BITS

    @property
    def bits(self) -> int:
        return self.value

    @property
    def byte_width(self) -> int:
        return self.value // 8

    @property
    def word_count(self) -> int:
        """Words needed to spell one element (12 or 24)."""
        return -(-self.value // WORD_BITS)

    @property
    def modulus(self) -> int:
        """Reduction polynomial, including the z^bits term."""
        if self is FieldSize.BITS_128:
            return FIELD_128_POLY
        return FIELD_256_POLY

    @classmethod
    def from_byte_length(cls, length: int) -> FieldSize:
        for size in cls:
            if size.byte_width == length:
                return size
        raise InvalidLength(length)

    @classmethod
    def from_word_count(cls, count: int) -> FieldSize:
        for size in cls:
            if size.word_count == count:
                return size
        raise WordCountMismatch(tuple(s.word_count for s in cls), count)

    @classmethod
    def for_long(cls, long: bool) -> FieldSize:
        """Field used for freshly generated phrases (long = 24 words)."""
        return cls.BITS_256 if long else cls.BITS_128


@dataclass(frozen=True)
class FieldElement:
    """An immutable element of GF(2^bits).

    Attributes:
        size: The field this element belongs to.
        value: Integer whose bit i is the coefficient of z^i.
    """

    size: FieldSize
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < (1 << self.size.bits):
            raise ElementOutOfRange(self.size.bits)

    def __repr__(self) -> str:
        # Never print element values, they are secrets or shares
        return f"FieldElement(size={self.size.name})"

    @classmethod
    def zero(cls, size: FieldSize) -> FieldElement:
        return cls(size, 0)

    @classmethod
    def one(cls, size: FieldSize) -> FieldElement:
        return cls(size, 1)

    @classmethod
    def from_bytes(cls, data: bytes) -> FieldElement:
        """Read 16 or 32 little-endian bytes as an element."""
        size = FieldSize.from_byte_length(len(data))
        return cls(size, int.from_bytes(data, "little"))

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.size.byte_width, "little")

    def is_zero(self) -> bool:
        return self.value == 0


def _check_same_field(a: FieldElement, b: FieldElement) -> None:
    if a.size is not b.size:
        raise FieldSizeMismatch(
            f"Operands from different fields: GF(2^{a.size.bits}) and GF(2^{b.size.bits})"
        )


def _clmul_reduce(a: int, b: int, size: FieldSize) -> int:
    """Shift-and-add multiplication, reducing after every shift."""
    top = 1 << size.bits
    modulus = size.modulus
    p = 0
    while b:
        if b & 1:
            p ^= a
        a <<= 1
        if a & top:
            a ^= modulus
        b >>= 1
    return p


def add(a: FieldElement, b: FieldElement) -> FieldElement:
    """Field addition (XOR). Also subtraction, since -x == x."""
    _check_same_field(a, b)
    return FieldElement(a.size, a.value ^ b.value)


def multiply(a: FieldElement, b: FieldElement) -> FieldElement:
    """Field multiplication modulo the size's reduction polynomial."""
    _check_same_field(a, b)
    return FieldElement(a.size, _clmul_reduce(a.value, b.value, a.size))


def invert(a: FieldElement) -> FieldElement:
    """Multiplicative inverse via the binary extended Euclidean algorithm.

    Raises:
        DivisionByZero: If a is zero.
    """
    if a.is_zero():
        raise DivisionByZero(f"No inverse for 0 in GF(2^{a.size.bits})")

    # Invariants: a * g1 == u and a * g2 == v (mod f)
    u, v = a.value, a.size.modulus
    g1, g2 = 1, 0
    while u != 1:
        j = u.bit_length() - v.bit_length()
        if j < 0:
            u, v = v, u
            g1, g2 = g2, g1
            j = -j
        u ^= v << j
        g1 ^= g2 << j
    return FieldElement(a.size, g1)


def random_element(size: FieldSize, rng: RandomSource | None = None) -> FieldElement:
    """Draw a uniform element from byte_width random bytes.

    Every bit pattern is a valid element, so no rejection sampling is needed.
    """
    rng = rng or secrets.token_bytes
    data = rng(size.byte_width)
    if len(data) != size.byte_width:
        raise RandomSourceError(size.byte_width, len(data))
    return FieldElement(size, int.from_bytes(data, "little"))
