"""bubblebabble CLI.

This is the stable CLI entrypoint (console-script: ``bubblebabble``).

UX policy:
  - ``encode`` reads raw bytes, writes one line of text.
  - ``decode`` reads text (surrounding whitespace ignored), writes raw bytes.
  - INPUT/OUTPUT default to stdin/stdout; ``-`` means the same.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from bubblebabble.core.decoder import decode
from bubblebabble.core.encoder import encode
from bubblebabble.errors import EXIT_GENERIC, BubbleBabbleError, UsageError


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    p.add_argument("-o", "--output", default="-", help="Output file (default: stdout)")
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _read_input(arg: str) -> bytes:
    if arg == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(arg).read_bytes()
    except OSError as e:
        raise UsageError(f"cannot read input: {arg}: {e.strerror or e}") from e


def _write_output(arg: str, data: bytes) -> None:
    if arg == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    try:
        Path(arg).write_bytes(data)
    except OSError as e:
        raise UsageError(f"cannot write output: {arg}: {e.strerror or e}") from e


def _cmd_encode(input_arg: str, output_arg: str) -> int:
    data = _read_input(input_arg)
    _write_output(output_arg, (encode(data) + "\n").encode("ascii"))
    return 0


def _cmd_decode(input_arg: str, output_arg: str) -> int:
    raw = _read_input(input_arg)
    # encodings are ASCII; keep bytes so bad input is reported by byte offset
    _write_output(output_arg, decode(raw.strip()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bubblebabble", description="Bubble Babble binary-to-text encoding"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_e = sub.add_parser("encode", help="Encode raw bytes to Bubble Babble")
    _add_common_args(p_e)

    p_d = sub.add_parser("decode", help="Decode Bubble Babble to raw bytes")
    _add_common_args(p_d)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "encode":
            return _cmd_encode(ns.input, ns.output)
        if ns.cmd == "decode":
            return _cmd_decode(ns.input, ns.output)
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except BubbleBabbleError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[bubblebabble] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[bubblebabble] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
