"""
Tests for the wordlist codec (seedsplit.wordlist).
"""

from __future__ import annotations

import random
import secrets
import unicodedata

import pytest

from seedsplit.errors import (
    InvalidLength,
    UnknownWord,
    WordCountMismatch,
    WordlistError,
)
from seedsplit.field import FieldSize
from seedsplit.wordlist import available_languages, decode, encode, load_wordlist


# ---------------------------------------------------------------------------
# Wordlist loading
# ---------------------------------------------------------------------------


def test_wordlist_shape():
    words = load_wordlist()
    assert len(words) == 2048
    assert len(set(words)) == 2048
    assert words[0] == "abandon"
    assert words[-1] == "zoo"


def test_wordlist_cached():
    assert load_wordlist("english") is load_wordlist("english")


def test_unknown_language():
    with pytest.raises(WordlistError, match="Unknown wordlist language"):
        load_wordlist("klingon")


def test_english_available():
    assert "english" in available_languages()


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------


def test_encode_word_counts():
    assert len(encode(bytes(16))) == 12
    assert len(encode(bytes(32))) == 24


def test_encode_zero_padding():
    assert encode(bytes(16)) == ["abandon"] * 12
    assert encode(bytes(32)) == ["abandon"] * 24


def test_encode_first_word_is_top_11_bits():
    # 0xFFE0 -> top 11 bits all set
    data = b"\xff\xe0" + bytes(14)
    assert encode(data)[0] == "zoo"
    assert encode(data)[1:] == ["abandon"] * 11


def test_encode_checksum_vectors():
    """Checksum padding reproduces the standard mnemonic test vectors."""
    assert encode(bytes(16), checksum=True) == ["abandon"] * 11 + ["about"]
    assert encode(bytes(32), checksum=True) == ["abandon"] * 23 + ["art"]
    assert encode(b"\xff" * 16, checksum=True) == ["zoo"] * 11 + ["wrong"]
    assert " ".join(encode(b"\x7f" * 16, checksum=True)) == (
        "legal winner thank year wave sausage worth useful legal winner thank yellow"
    )


def test_encode_invalid_length():
    for length in (0, 8, 15, 17, 31, 33):
        with pytest.raises(InvalidLength):
            encode(bytes(length))


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------


def test_roundtrip_random():
    rng = random.Random(11)
    for width in (16, 32):
        for _ in range(25):
            data = rng.randbytes(width)
            assert decode(encode(data)) == data
            assert decode(encode(data, checksum=True)) == data


def test_roundtrip_edges():
    for width in (16, 32):
        for data in (bytes(width), b"\xff" * width, secrets.token_bytes(width)):
            assert decode(encode(data)) == data


def test_decode_ignores_padding():
    zero = bytes(16)
    assert decode(["abandon"] * 12) == zero
    assert decode(["abandon"] * 11 + ["about"]) == zero
    # "acid" is index 15: all four padding bits set
    assert decode(["abandon"] * 11 + ["acid"]) == zero


def test_decode_accepts_string_and_case():
    phrase = "legal winner thank year wave sausage worth useful legal winner thank yellow"
    assert decode(phrase) == b"\x7f" * 16
    assert decode("  " + phrase.upper() + "\n") == b"\x7f" * 16


def test_decode_with_explicit_size():
    assert decode(["abandon"] * 24, FieldSize.BITS_256) == bytes(32)


def test_decode_size_mismatch():
    with pytest.raises(WordCountMismatch) as exc:
        decode(["abandon"] * 12, FieldSize.BITS_256)
    assert exc.value.expected == (24,)
    assert exc.value.actual == 12


def test_decode_wrong_word_count():
    for count in (0, 11, 13, 18, 23, 25):
        with pytest.raises(WordCountMismatch) as exc:
            decode(["abandon"] * count)
        assert exc.value.actual == count


def test_decode_unknown_word():
    words = ["abandon"] * 12
    words[3] = "zzzzz"
    with pytest.raises(UnknownWord) as exc:
        decode(words)
    assert exc.value.word == "zzzzz"
    assert exc.value.position == 3
    assert "zzzzz" in str(exc.value)


def _nfc(words):
    return [unicodedata.normalize("NFC", w) for w in words]


def test_decode_accepts_composed_accents():
    # Spanish list starts with "ábaco"; typed precomposed it must still match
    assert decode(_nfc(["ábaco"] * 12), language="spanish") == bytes(16)


def test_roundtrip_composed_input_non_english():
    rng = random.Random(5)
    for language in ("spanish", "french"):
        for width in (16, 32):
            data = rng.randbytes(width)
            words = encode(data, checksum=True, language=language)
            assert decode(_nfc(words), language=language) == data
            assert decode(" ".join(_nfc(words)).upper(), language=language) == data
