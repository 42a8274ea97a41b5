"""
Shamir's Secret Sharing over GF(2^128) / GF(2^256).

The secret is the constant term of a random polynomial of degree
threshold - 1. Share i is the polynomial evaluated at x = i.

Shares are 1-indexed (index 0 would expose the secret directly).
Maximum 255 shares (share indices are encoded as a single byte).

Combining fewer shares than the original threshold silently returns a
wrong element: the scheme carries no redundancy to detect it.

Usage:
    shares = split(secret, threshold=3, count=5)
    recovered = combine(shares[:3])
    assert recovered == secret
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from seedsplit import MAX_SHARES
from seedsplit.errors import (
    DuplicateIndex,
    FieldSizeMismatch,
    InsufficientShares,
    InvalidShareIndex,
    InvalidThreshold,
)
from seedsplit.field import (
    FieldElement,
    FieldSize,
    RandomSource,
    add,
    invert,
    multiply,
    random_element,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    """A single share from Shamir's Secret Sharing.

    Attributes:
        index: The x-coordinate (1-based, 1..255).
        value: The polynomial evaluated at index.
    """

    index: int
    value: FieldElement

    def __post_init__(self) -> None:
        if not 1 <= self.index <= MAX_SHARES:
            raise InvalidShareIndex(self.index)

    @property
    def size(self) -> FieldSize:
        return self.value.size

    def x(self) -> FieldElement:
        """The share index as a field element."""
        return FieldElement(self.size, self.index)


class _Polynomial:
    """Ephemeral sharing polynomial. Coefficients are wiped on context exit.

    coefficients[0] is the secret, coefficients[1:] are random.
    """

    def __init__(self, coefficients: list[FieldElement]) -> None:
        self._coefficients = coefficients

    @classmethod
    def random(
        cls, secret: FieldElement, degree: int, rng: RandomSource | None
    ) -> _Polynomial:
        coefficients = [secret]
        for _ in range(degree):
            coefficients.append(random_element(secret.size, rng))
        return cls(coefficients)

    def __enter__(self) -> _Polynomial:
        return self

    def __exit__(self, *exc_info) -> None:
        self.wipe()

    def wipe(self) -> None:
        if self._coefficients:
            zero = FieldElement.zero(self._coefficients[0].size)
            for i in range(len(self._coefficients)):
                self._coefficients[i] = zero
        self._coefficients.clear()

    def evaluate(self, x: FieldElement) -> FieldElement:
        """Evaluate at x using Horner's method."""
        result = FieldElement.zero(x.size)
        for c in reversed(self._coefficients):
            result = add(multiply(result, x), c)
        return result


def split(
    secret: FieldElement,
    threshold: int,
    count: int,
    rng: RandomSource | None = None,
) -> list[Share]:
    """Split a secret element into shares.

    Args:
        secret: The element to split.
        threshold: Minimum number of shares needed to reconstruct (t).
        count: Total number of shares to create (n).
        rng: Secure random byte source; defaults to secrets.token_bytes.
            Consumed threshold - 1 times.

    Returns:
        ``count`` shares with indices 1..count. Any ``threshold`` of them
        reconstruct the secret.

    Raises:
        InvalidThreshold: If not 1 <= threshold <= count <= 255.
    """
    if threshold < 1:
        raise InvalidThreshold(threshold, count, "Threshold must be at least 1")
    if count < threshold:
        raise InvalidThreshold(threshold, count, "Count must be >= threshold")
    if count > MAX_SHARES:
        raise InvalidThreshold(threshold, count, f"Count exceeds limit ({MAX_SHARES})")

    with _Polynomial.random(secret, threshold - 1, rng) as poly:
        shares = [
            Share(index=i, value=poly.evaluate(FieldElement(secret.size, i)))
            for i in range(1, count + 1)
        ]

    log.debug(
        "Split %d-bit secret into %d shares (threshold %d)",
        secret.size.bits, count, threshold,
    )
    return shares


def combine(shares: list[Share]) -> FieldElement:
    """Reconstruct the secret using Lagrange interpolation at x=0.

    Every given share is used; the caller must supply at least the
    original threshold. Fewer yields a wrong element, not an error.

    Raises:
        InsufficientShares: Fewer than 2 shares.
        FieldSizeMismatch: Shares from different field widths.
        DuplicateIndex: Two shares with the same index.
    """
    if len(shares) < 2:
        raise InsufficientShares(len(shares))

    size = shares[0].size
    if any(s.size is not size for s in shares):
        raise FieldSizeMismatch("All shares must use the same field width")

    seen: set[int] = set()
    for s in shares:
        if s.index in seen:
            raise DuplicateIndex(s.index)
        seen.add(s.index)

    xs = [s.x() for s in shares]
    result = FieldElement.zero(size)

    for i, share in enumerate(shares):
        # L_i(0) = prod (0 - x_j) / (x_i - x_j); in GF(2^w) both are XOR
        numerator = FieldElement.one(size)
        denominator = FieldElement.one(size)
        for j, xj in enumerate(xs):
            if i == j:
                continue
            numerator = multiply(numerator, xj)
            denominator = multiply(denominator, add(xs[i], xj))

        basis = multiply(numerator, invert(denominator))
        result = add(result, multiply(share.value, basis))

    log.debug("Combined %d shares in %d-bit field", len(shares), size.bits)
    return result
