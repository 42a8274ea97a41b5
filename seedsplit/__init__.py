"""
seed-split — Shamir's Secret Sharing for mnemonic seed phrases.

Architecture:
    Field:     GF(2^128) for 12-word phrases, GF(2^256) for 24-word phrases
    Sharing:   random polynomial of degree t-1, shares at x = 1..n
    Wordlist:  11 bits per word, 2048-word mnemonic dictionary
    Share:     "<index> <word1> <word2> ... <wordK>" (one per line)
"""

__version__ = "0.1.0"

# Field constants
FIELD_128_BITS = 128
FIELD_256_BITS = 256
# z^128 + z^7 + z^2 + z + 1
FIELD_128_POLY = (1 << 128) | 0x87
# z^256 + z^10 + z^5 + z^2 + 1
FIELD_256_POLY = (1 << 256) | 0x425

# Wordlist constants
WORD_BITS = 11
WORDLIST_SIZE = 2048  # 2 ** WORD_BITS
DEFAULT_LANGUAGE = "english"

# Sharing constants
MAX_SHARES = 255  # share indices are single bytes, 0 is the secret itself

# Config constants
CONFIG_ENV_VAR = "SEEDSPLIT_CONFIG"
CONFIG_DEFAULT_PATH = "~/.seedsplit/config.toml"
