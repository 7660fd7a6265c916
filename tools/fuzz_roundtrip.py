#!/usr/bin/env python3
"""Seeded round-trip + tamper soak for bubblebabble.

Goal:
- deterministic, repeatable random inputs (same --seed, same run)
- every input must round-trip exactly
- every single-symbol tamper must either raise a DecodeError or decode to
  different bytes whose re-encoding is the tampered string (a valid encoding)
- produce a JSON report, fail fast (non-zero exit) on any violation

Usage examples:
  python tools/fuzz_roundtrip.py --iters 1000
  python tools/fuzz_roundtrip.py --iters 200 --max-len 512 --seed 7 --report /tmp/fuzz.json
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from collections import Counter
from pathlib import Path
from typing import Any


def _rand_bytes(rng: random.Random, max_len: int) -> bytes:
    n = rng.randint(0, max_len)
    return bytes(rng.getrandbits(8) for _ in range(n))


def _tamper(rng: random.Random, enc: str, symbols: str) -> str:
    # never touch header/trailer: those failures are covered by unit tests
    pos = rng.randint(1, len(enc) - 2)
    ch = rng.choice([s for s in symbols if s != enc[pos]])
    return enc[:pos] + ch + enc[pos + 1 :]


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="fuzz_roundtrip.py", description="bubblebabble soak")
    ap.add_argument("--iters", type=int, default=1000)
    ap.add_argument("--max-len", type=int, default=64)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--report", type=Path, default=None, help="Write JSON report here")
    ns = ap.parse_args(argv)

    from bubblebabble import decode, encode
    from bubblebabble.core.alphabet import CONSONANTS, SENTINEL, SEPARATOR, VOWELS
    from bubblebabble.errors import DecodeError

    rng = random.Random(int(ns.seed))
    symbols = VOWELS + CONSONANTS + SENTINEL + SEPARATOR
    outcomes: Counter[str] = Counter()
    failures: list[dict[str, Any]] = []

    for i in range(int(ns.iters)):
        data = _rand_bytes(rng, int(ns.max_len))
        enc = encode(data)
        if decode(enc) != data:
            failures.append({"iter": i, "kind": "roundtrip", "data": data.hex()})
            break

        bad = _tamper(rng, enc, symbols)
        try:
            got = decode(bad)
        except DecodeError as e:
            outcomes[type(e).__name__] += 1
            continue
        if encode(got) != bad:
            failures.append(
                {"iter": i, "kind": "tamper", "encoded": enc, "tampered": bad, "got": got.hex()}
            )
            break
        outcomes["valid_encoding"] += 1

    report = {
        "schema": "bubblebabble.fuzz_roundtrip.v1",
        "seed": int(ns.seed),
        "iters": int(ns.iters),
        "max_len": int(ns.max_len),
        "tamper_outcomes": dict(sorted(outcomes.items())),
        "failures": failures,
        "ok": not failures,
    }
    text = json.dumps(report, ensure_ascii=False, indent=2)
    if ns.report is not None:
        ns.report.write_text(text + "\n", encoding="utf-8")
    print(text)
    if failures:
        print("[bubblebabble] fuzz failure", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
