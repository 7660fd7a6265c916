"""Typed errors for bubblebabble.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- Decode errors carry the offending position/symbol and compare equal by value.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_MALFORMED = 11
EXIT_CORRUPTED = 12
EXIT_CHECKSUM_MISMATCH = 13


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage error (invalid args, unreadable input, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unexpected error)"),
    ExitCodeInfo(EXIT_MALFORMED, "MALFORMED", "Missing 'x' header or trailer"),
    ExitCodeInfo(
        EXIT_CORRUPTED,
        "CORRUPTED",
        "Corrupted input (bad length, bad symbol, impossible field value)",
    ),
    ExitCodeInfo(
        EXIT_CHECKSUM_MISMATCH, "CHECKSUM_MISMATCH", "Parity tuple does not match the checksum"
    ),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE. Do not edit manually.\n")
    lines.append("> Source of truth: `src/bubblebabble/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- All library errors extend `BubbleBabbleError` and carry an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class BubbleBabbleError(Exception):
    """Base error for bubblebabble."""

    exit_code: int = EXIT_GENERIC


class UsageError(BubbleBabbleError):
    exit_code = EXIT_USAGE


class DecodeError(BubbleBabbleError):
    """Base for every decode failure. Equal when type and args are equal."""

    message: str = "decode failed"

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class MalformedHeader(DecodeError):
    exit_code = EXIT_MALFORMED
    message = "missing required 'x' header"


class MalformedTrailer(DecodeError):
    exit_code = EXIT_MALFORMED
    message = "missing required 'x' trailer"


class Corrupted(DecodeError):
    exit_code = EXIT_CORRUPTED
    message = "corrupted input"


class _SymbolError(DecodeError):
    exit_code = EXIT_CORRUPTED

    def __init__(self, position: int, symbol: str) -> None:
        super().__init__(position, symbol)
        self.position = position
        self.symbol = symbol

    def __str__(self) -> str:
        return f"{self.message}: {self.symbol!r} at position {self.position}"


class InvalidByte(_SymbolError):
    message = "symbol not in encoding alphabet"


class NonAscii(InvalidByte):
    message = "non-ASCII character outside of encoding alphabet"


class ExpectedVowel(_SymbolError):
    message = "expected vowel"


class ExpectedConsonant(_SymbolError):
    message = "expected consonant"


class ChecksumMismatch(DecodeError):
    exit_code = EXIT_CHECKSUM_MISMATCH
    message = "checksum mismatch"

    def __init__(self, expected: int, actual: str) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"{self.message}: checksum={self.expected} parity tuple={self.actual!r}"
