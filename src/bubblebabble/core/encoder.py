from __future__ import annotations

from bubblebabble.core.alphabet import (
    CHECKSUM_INIT,
    CONSONANTS,
    EMPTY_ENCODING,
    HEADER,
    SENTINEL,
    SEPARATOR,
    TRAILER,
    VOWELS,
    next_checksum,
)


def as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"data must be bytes-like or str, got {type(data).__name__}")


def _triple(byte: int, checksum: int) -> str:
    a = (((byte >> 6) & 3) + checksum) % 6
    b = (byte >> 2) & 15
    c = ((byte & 3) + checksum // 6) % 6
    return VOWELS[a] + CONSONANTS[b] + VOWELS[c]


def _parity(checksum: int) -> str:
    return VOWELS[checksum % 6] + SENTINEL + VOWELS[checksum // 6]


def encode(data: bytes | bytearray | memoryview | str) -> str:
    """
    Encode bytes with Bubble Babble.

    Every 2 input bytes become one ``VCVC-C`` group; the last group is a
    triple for an odd trailing byte, or the parity tuple (checksum) when the
    length is even. ``str`` input is encoded as UTF-8 first.

        >>> encode(b"Pineapple")
        'xigak-nyryk-humil-bosek-sonax'
    """
    raw = as_bytes(data)
    if not raw:
        return EMPTY_ENCODING

    parts: list[str] = [HEADER]
    checksum = CHECKSUM_INIT
    n_pairs = len(raw) // 2

    for i in range(n_pairs):
        left = raw[2 * i]
        right = raw[2 * i + 1]
        parts.append(_triple(left, checksum))
        parts.append(CONSONANTS[(right >> 4) & 15])
        parts.append(SEPARATOR)
        parts.append(CONSONANTS[right & 15])
        checksum = next_checksum(checksum, left, right)

    if len(raw) % 2:
        parts.append(_triple(raw[-1], checksum))
    else:
        parts.append(_parity(checksum))

    parts.append(TRAILER)
    return "".join(parts)
