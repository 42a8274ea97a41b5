"""
Phrase session — binds seed phrases and share lines to the wordlist codec
and the sharing engine.

Field width is inferred from word count: 12 words use GF(2^128),
24 words use GF(2^256).

Share line format:
    <index> <word1> <word2> ... <wordK>
"""

from __future__ import annotations

import logging
from typing import Iterable

from seedsplit import DEFAULT_LANGUAGE
from seedsplit.errors import FieldSizeMismatch, InvalidShareLine
from seedsplit.field import FieldElement, FieldSize, RandomSource, random_element
from seedsplit.sharing import Share, combine, split
from seedsplit.wordlist import decode, encode

log = logging.getLogger(__name__)


def _to_phrase(element: FieldElement, checksum: bool, language: str) -> str:
    return " ".join(encode(element.to_bytes(), checksum=checksum, language=language))


def _from_phrase(words: list[str], language: str) -> FieldElement:
    return FieldElement.from_bytes(decode(words, language=language))


def random_phrase(
    long: bool = False,
    rng: RandomSource | None = None,
    *,
    language: str = DEFAULT_LANGUAGE,
    checksum: bool = True,
) -> str:
    """Generate a fresh 12-word (or 24-word if ``long``) seed phrase."""
    element = random_element(FieldSize.for_long(long), rng)
    return _to_phrase(element, checksum, language)


def format_share_line(
    share: Share,
    *,
    language: str = DEFAULT_LANGUAGE,
    checksum: bool = True,
) -> str:
    """Render a share as '<index> <words...>'."""
    return f"{share.index} {_to_phrase(share.value, checksum, language)}"


def parse_share_line(line: str, *, language: str = DEFAULT_LANGUAGE) -> Share:
    """Parse '<index> <words...>' into a Share.

    Raises:
        InvalidShareLine: Missing or non-numeric index prefix.
        InvalidShareIndex: Index outside 1..255.
        WordCountMismatch / UnknownWord: Bad phrase part.
    """
    parts = line.split()
    if not parts:
        raise InvalidShareLine("Empty share line")
    prefix, words = parts[0], parts[1:]
    # str.isdigit() also accepts characters like '²' that int() rejects
    if not (prefix.isascii() and prefix.isdigit()):
        raise InvalidShareLine(
            f"Share line must start with a decimal index, got {prefix!r}"
        )
    return Share(index=int(prefix), value=_from_phrase(words, language))


def split_phrase(
    phrase: str,
    threshold: int,
    count: int,
    rng: RandomSource | None = None,
    *,
    language: str = DEFAULT_LANGUAGE,
    checksum: bool = True,
) -> list[str]:
    """Split a seed phrase into ``count`` share lines, ``threshold`` to recover."""
    secret = _from_phrase(phrase.split(), language)
    shares = split(secret, threshold, count, rng)
    log.info(
        "Split %d-word phrase into %d shares (threshold %d)",
        secret.size.word_count, count, threshold,
    )
    return [format_share_line(s, language=language, checksum=checksum) for s in shares]


def combine_phrases(
    lines: Iterable[str],
    *,
    language: str = DEFAULT_LANGUAGE,
    checksum: bool = True,
) -> str:
    """Recover the seed phrase from share lines.

    Raises:
        FieldSizeMismatch: Share lines of different word counts.
    """
    shares = [parse_share_line(line, language=language) for line in lines]
    sizes = {s.size for s in shares}
    if len(sizes) > 1:
        raise FieldSizeMismatch(
            "All shares must have the same number of words, got "
            + " and ".join(str(s.word_count) for s in sorted(sizes, key=lambda s: s.bits))
        )
    secret = combine(shares)
    log.info("Recovered %d-word phrase from %d shares", secret.size.word_count, len(shares))
    return _to_phrase(secret, checksum, language)
