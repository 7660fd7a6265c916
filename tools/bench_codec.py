#!/usr/bin/env python3
"""Encode/decode micro-benchmark.

Times encode -> decode -> compare over the golden vectors plus random
payloads of growing size, collecting basic timing and peak RSS.

Usage example:
  python tools/bench_codec.py --iters 3 --reps 200

Notes:
- Uses internal APIs (no subprocess). Run inside repo venv.
- One JSON row per (iter, case), then a JSON summary.
"""

from __future__ import annotations

import argparse
import json
import random
import resource
import time
from typing import Any


def _peak_rss_kb() -> int:
    # Linux: ru_maxrss is KB
    return int(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss)


def _cases(seed: int) -> list[tuple[str, bytes]]:
    rng = random.Random(seed)
    cases: list[tuple[str, bytes]] = [
        ("empty", b""),
        ("vector_1234567890", b"1234567890"),
        ("vector_pineapple", b"Pineapple"),
        ("emoji", "\U0001f48e\U0001f980❤️✨\U0001f4aa".encode("utf-8")),
    ]
    for n in (64, 1024, 64 * 1024):
        cases.append((f"random_{n}", bytes(rng.getrandbits(8) for _ in range(n))))
    return cases


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="bench_codec.py", description="bubblebabble benchmark")
    ap.add_argument("--iters", type=int, default=3)
    ap.add_argument("--reps", type=int, default=100, help="encode/decode calls per case")
    ap.add_argument("--seed", type=int, default=0)
    ns = ap.parse_args(argv)

    from bubblebabble import decode, encode

    rows: list[dict[str, Any]] = []
    t0_all = time.perf_counter()
    cases = _cases(int(ns.seed))
    reps = max(1, int(ns.reps))

    for i in range(int(ns.iters)):
        for name, data in cases:
            rss0 = _peak_rss_kb()
            t0 = time.perf_counter()
            for _ in range(reps):
                enc = encode(data)
            t_encode = time.perf_counter() - t0

            t1 = time.perf_counter()
            for _ in range(reps):
                back = decode(enc)
            t_decode = time.perf_counter() - t1
            rss1 = _peak_rss_kb()

            same = back == data
            row = {
                "iter": i + 1,
                "case": name,
                "size": len(data),
                "encoded_size": len(enc),
                "reps": reps,
                "times_sec": {
                    "encode": t_encode / reps,
                    "decode": t_decode / reps,
                },
                "peak_rss_kb": {"before": rss0, "after": rss1},
                "roundtrip_ok": bool(same),
            }
            rows.append(row)
            print(json.dumps(row, ensure_ascii=False))
            if not same:
                raise SystemExit(f"roundtrip mismatch: {name}")

    total = time.perf_counter() - t0_all
    summary = {
        "schema": "bubblebabble.bench_codec.v1",
        "rows": len(rows),
        "wall_total_sec": total,
        "max_peak_rss_kb": max((r["peak_rss_kb"]["after"] for r in rows), default=0),
    }
    print(json.dumps(summary, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
