from __future__ import annotations

from bubblebabble.core.alphabet import (
    ALPHABET,
    CHECKSUM_INIT,
    CONSONANT_INDEX,
    EMPTY_ENCODING,
    HEADER,
    SENTINEL,
    SEPARATOR,
    TRAILER,
    VOWEL_INDEX,
    next_checksum,
)
from bubblebabble.errors import (
    ChecksumMismatch,
    Corrupted,
    ExpectedConsonant,
    ExpectedVowel,
    InvalidByte,
    MalformedHeader,
    MalformedTrailer,
    NonAscii,
)

# VCVC-C
GROUP_LEN = 6


def _as_text(encoded: str | bytes | bytearray | memoryview) -> tuple[str, bool]:
    """Return (text, is_str). Bytes map 1:1 to chars so positions stay byte offsets."""
    if isinstance(encoded, str):
        return encoded, True
    if isinstance(encoded, (bytes, bytearray, memoryview)):
        return bytes(encoded).decode("latin-1"), False
    raise TypeError(f"encoded must be str or bytes-like, got {type(encoded).__name__}")


def _vowel(text: str, pos: int) -> int:
    idx = VOWEL_INDEX.get(text[pos])
    if idx is None:
        raise ExpectedVowel(pos, text[pos])
    return idx


def _consonant(text: str, pos: int) -> int:
    idx = CONSONANT_INDEX.get(text[pos])
    if idx is None:
        raise ExpectedConsonant(pos, text[pos])
    return idx


def _decode_triple(a: int, b: int, c: int, checksum: int) -> int:
    high = (a - checksum % 6) % 6
    low = (c - checksum // 6) % 6
    # 2-bit fields: 4 and 5 cannot come out of the encoder
    if high >= 4 or low >= 4:
        raise Corrupted()
    return (high << 6) | (b << 2) | low


def decode(encoded: str | bytes | bytearray | memoryview) -> bytes:
    """
    Decode a Bubble Babble string back to bytes.

    Scans left to right and raises the first problem found (see
    ``bubblebabble.errors``). Positions are offsets into ``encoded``:
    the header is position 0.

        >>> decode("xigak-nyryk-humil-bosek-sonax")
        b'Pineapple'
    """
    text, is_str = _as_text(encoded)
    if text == EMPTY_ENCODING:
        return b""

    has_header = text.startswith(HEADER)
    has_trailer = text.endswith(TRAILER)
    # order matters: "x" has a header but no separate trailer
    if not (has_header and has_trailer and len(text) >= 2):
        if has_header:
            raise MalformedTrailer()
        if has_trailer:
            raise MalformedHeader()
        raise Corrupted()

    end = len(text) - 1  # trailer
    for pos in range(1, end):
        ch = text[pos]
        if ch not in ALPHABET:
            if is_str and not ch.isascii():
                raise NonAscii(pos, ch)
            raise InvalidByte(pos, ch)

    out = bytearray()
    checksum = CHECKSUM_INIT
    pos = 1
    while end - pos >= GROUP_LEN:
        left = _decode_triple(
            _vowel(text, pos),
            _consonant(text, pos + 1),
            _vowel(text, pos + 2),
            checksum,
        )
        hi = _consonant(text, pos + 3)
        if text[pos + 4] != SEPARATOR:
            raise Corrupted()
        right = (hi << 4) | _consonant(text, pos + 5)

        checksum = next_checksum(checksum, left, right)
        out.append(left)
        out.append(right)
        pos += GROUP_LEN

    if end - pos != 3:
        raise Corrupted()

    a = _vowel(text, pos)
    if text[pos + 1] == SENTINEL:
        c = _vowel(text, pos + 2)
        if a != checksum % 6 or c != checksum // 6:
            raise ChecksumMismatch(checksum, text[pos : pos + 3])
        return bytes(out)

    b = _consonant(text, pos + 1)
    c = _vowel(text, pos + 2)
    out.append(_decode_triple(a, b, c, checksum))
    return bytes(out)
