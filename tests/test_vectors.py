from __future__ import annotations

import pytest

import bubblebabble
from bubblebabble import decode, encode

# Golden vectors
#
# IMPORTANT: These tests pin the exact Bubble Babble output.
# The first three come from the published format description; the rest pin
# edge shapes (single byte, one full group + parity).
VECTORS: list[tuple[bytes, str]] = [
    (b"", "xexax"),
    (b"1234567890", "xesef-disof-gytuf-katof-movif-baxux"),
    (b"Pineapple", "xigak-nyryk-humil-bosek-sonax"),
    (b"\x00", "xebax"),
    (b"\x00\x00", "xebab-byxax"),
]


@pytest.mark.parametrize("data,expected", VECTORS)
def test_encode_golden(data: bytes, expected: str) -> None:
    assert encode(data) == expected


@pytest.mark.parametrize("data,encoded", VECTORS)
def test_decode_golden(data: bytes, encoded: str) -> None:
    assert decode(encoded) == data


def test_package_level_api() -> None:
    assert bubblebabble.encode(b"Pineapple") == "xigak-nyryk-humil-bosek-sonax"
    assert bubblebabble.decode("xexax") == b""
    assert isinstance(bubblebabble.__version__, str)


def test_encode_accepts_str_and_buffers() -> None:
    assert encode("Pineapple") == encode(b"Pineapple")
    assert encode(bytearray(b"1234567890")) == "xesef-disof-gytuf-katof-movif-baxux"
    assert encode(memoryview(b"Pineapple")) == "xigak-nyryk-humil-bosek-sonax"
    # str is UTF-8 encoded first
    assert decode(encode("Ωλ")) == "Ωλ".encode("utf-8")


def test_decode_accepts_bytes() -> None:
    assert decode(b"xigak-nyryk-humil-bosek-sonax") == b"Pineapple"
    assert decode(bytearray(b"xexax")) == b""


def test_type_errors() -> None:
    with pytest.raises(TypeError):
        encode(123)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        decode(None)  # type: ignore[arg-type]


def test_output_shape() -> None:
    enc = encode(b"abcdef")
    assert enc[0] == "x" and enc[-1] == "x"
    words = enc.split("-")
    assert len(words) == 4
    assert all(len(w) == 5 for w in words[1:-1])
    # even length: last group is the parity tuple
    assert enc[-3] == "x"


def test_checksum_offsets_identical_bytes() -> None:
    # same byte value, different checksum state, different triple
    interior = encode(b"AAAAA")[1:-1]
    # triples sit at the start of each 6-char group
    assert interior[0:3] == "ibe"
    assert interior[6:9] == "ubu"
