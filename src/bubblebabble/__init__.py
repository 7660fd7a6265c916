"""Bubble Babble binary-to-text encoding.

    >>> import bubblebabble
    >>> bubblebabble.encode(b"1234567890")
    'xesef-disof-gytuf-katof-movif-baxux'
    >>> bubblebabble.decode("xexax")
    b''
"""

from __future__ import annotations

from bubblebabble.core.decoder import decode
from bubblebabble.core.encoder import encode
from bubblebabble.errors import (
    BubbleBabbleError,
    ChecksumMismatch,
    Corrupted,
    DecodeError,
    ExpectedConsonant,
    ExpectedVowel,
    InvalidByte,
    MalformedHeader,
    MalformedTrailer,
    NonAscii,
)

__version__ = "0.1.0"

__all__ = [
    "BubbleBabbleError",
    "ChecksumMismatch",
    "Corrupted",
    "DecodeError",
    "ExpectedConsonant",
    "ExpectedVowel",
    "InvalidByte",
    "MalformedHeader",
    "MalformedTrailer",
    "NonAscii",
    "__version__",
    "decode",
    "encode",
]
