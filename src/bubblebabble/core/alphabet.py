from __future__ import annotations

from types import MappingProxyType

# Keep these stable: any change breaks every encoding ever produced.
VOWELS = "aeiouy"  # 6 symbols, 0..5
CONSONANTS = "bcdfghklmnprstvz"  # 16 symbols, 0..15
SENTINEL = "x"  # 17th consonant slot, parity tuple only

HEADER = "x"
TRAILER = "x"
SEPARATOR = "-"

EMPTY_ENCODING = "xexax"

CHECKSUM_INIT = 1

ALPHABET: frozenset[str] = frozenset(VOWELS + CONSONANTS + SENTINEL + SEPARATOR)

VOWEL_INDEX = MappingProxyType({ch: i for i, ch in enumerate(VOWELS)})
CONSONANT_INDEX = MappingProxyType({ch: i for i, ch in enumerate(CONSONANTS)})


def next_checksum(checksum: int, left: int, right: int) -> int:
    """Fold one complete 2-byte group into the running checksum (0..35)."""
    return (checksum * 5 + left * 7 + right) % 36
