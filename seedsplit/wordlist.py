"""
Wordlist codec — lossless mapping between field-width byte strings and
mnemonic word sequences.

The byte string is read most-significant-bit first and cut into 11-bit
groups, each indexing the 2048-word dictionary. 128 bits need 12 words
(4 padding bits), 256 bits need 24 words (8 padding bits). Padding is
appended at the low end of the last word and ignored on decode.

Padding is zero by default. With ``checksum=True`` it carries the leading
bits of SHA-256(data), which is exactly the standard mnemonic checksum,
so encoded shares and seeds are accepted by ordinary wallet software.

The dictionary itself is the standard list shipped with the ``mnemonic``
package.
"""

from __future__ import annotations

import functools
import hashlib
import logging
import unicodedata
from typing import Iterable

from mnemonic import Mnemonic

from seedsplit import DEFAULT_LANGUAGE, WORD_BITS, WORDLIST_SIZE
from seedsplit.errors import UnknownWord, WordCountMismatch, WordlistError
from seedsplit.field import FieldSize

log = logging.getLogger(__name__)

_WORD_MASK = WORDLIST_SIZE - 1


def available_languages() -> list[str]:
    return sorted(Mnemonic.list_languages())


@functools.lru_cache(maxsize=None)
def load_wordlist(language: str = DEFAULT_LANGUAGE) -> tuple[str, ...]:
    """Load and validate the wordlist for ``language``. Cached per process.

    Raises:
        WordlistError: Unknown language, or list is not 2048 distinct words.
    """
    if language not in Mnemonic.list_languages():
        raise WordlistError(
            f"Unknown wordlist language {language!r} "
            f"(available: {', '.join(available_languages())})"
        )
    words = tuple(Mnemonic(language).wordlist)
    if len(words) != WORDLIST_SIZE or len(set(words)) != WORDLIST_SIZE:
        raise WordlistError(
            f"Wordlist {language!r} must contain {WORDLIST_SIZE} distinct words, "
            f"got {len(set(words))} distinct of {len(words)}"
        )
    log.debug("Loaded %s wordlist (%d words)", language, len(words))
    return words


@functools.lru_cache(maxsize=None)
def _word_index(language: str) -> dict[str, int]:
    return {_normalize(word): i for i, word in enumerate(load_wordlist(language))}


def _normalize(word: str) -> str:
    """Lookup key: NFKD (the form the mnemonic wordlists use), lowercased."""
    return unicodedata.normalize("NFKD", word.strip().lower())


def _padding_bits(size: FieldSize) -> int:
    return size.word_count * WORD_BITS - size.bits


def encode(
    data: bytes,
    *,
    checksum: bool = False,
    language: str = DEFAULT_LANGUAGE,
) -> list[str]:
    """Encode 16 or 32 bytes as 12 or 24 words.

    Args:
        data: The raw bytes to encode.
        checksum: Fill the padding bits with the SHA-256 checksum instead of zeros.
        language: Wordlist language.

    Returns:
        The words, in order.

    Raises:
        InvalidLength: If data is not 16 or 32 bytes.
    """
    size = FieldSize.from_byte_length(len(data))
    pad = _padding_bits(size)

    bits = int.from_bytes(data, "big") << pad
    if checksum:
        digest = int.from_bytes(hashlib.sha256(data).digest(), "big")
        bits |= digest >> (256 - pad)

    wordlist = load_wordlist(language)
    count = size.word_count
    return [
        wordlist[(bits >> (WORD_BITS * (count - 1 - i))) & _WORD_MASK]
        for i in range(count)
    ]


def decode(
    words: str | Iterable[str],
    size: FieldSize | None = None,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> bytes:
    """Decode a 12 or 24 word phrase back into its 16 or 32 bytes.

    Args:
        words: Word sequence, or a whitespace-separated phrase.
            Case and Unicode composition (NFC or NFKD) do not matter.
        size: Expected field size. Inferred from the word count if omitted.
        language: Wordlist language.

    Returns:
        The decoded bytes. Padding bits are dropped without validation.

    Raises:
        WordCountMismatch: Word count does not match the field size.
        UnknownWord: A word is not in the wordlist.
    """
    if isinstance(words, str):
        words = words.split()
    words = [_normalize(w) for w in words]

    if size is None:
        size = FieldSize.from_word_count(len(words))
    elif len(words) != size.word_count:
        raise WordCountMismatch((size.word_count,), len(words))

    index = _word_index(language)
    bits = 0
    for position, word in enumerate(words):
        try:
            bits = (bits << WORD_BITS) | index[word]
        except KeyError:
            raise UnknownWord(word, position) from None

    bits >>= _padding_bits(size)
    return bits.to_bytes(size.byte_width, "big")
