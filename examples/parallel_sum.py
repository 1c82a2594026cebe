#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import time
from concurrent.futures import ThreadPoolExecutor

from chunksplitters import RoundRobin, Split, chunks, index_chunks


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Sum a list in parallel chunks")
    p.add_argument("length", nargs="?", type=int, default=1_000_000)
    p.add_argument("--workers", type=int, default=4)
    p.add_argument("--n", type=int, default=None, help="Number of chunks (default: workers)")
    p.add_argument("--size", type=int, default=None, help="Indices per chunk")
    p.add_argument("--minsize", type=int, default=None)
    p.add_argument("--split", default="consecutive", choices=[s.value for s in Split])
    p.add_argument("--debug", action="store_true", help="Show plan resolution logs")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    data = [float(i % 97) for i in range(args.length)]
    n = args.n
    if args.size is None and n is None:
        n = args.workers

    ichunks = index_chunks(data, n=n, size=args.size, split=args.split, minsize=args.minsize)
    print(f"{len(ichunks)} chunk(s) over {len(data)} element(s)")
    for i, r in enumerate(ichunks[:5]):
        print(f"  chunk {i}: {r} ({len(r)} indices)")

    started = time.perf_counter()
    with ThreadPoolExecutor(max_workers=args.workers) as pool:
        partial = list(
            pool.map(
                sum, chunks(data, n=n, size=args.size, split=args.split, minsize=args.minsize)
            )
        )
    elapsed = time.perf_counter() - started

    print(f"partial sums: {partial[:5]}{' ...' if len(partial) > 5 else ''}")
    print(f"total={sum(partial):.1f} expected={sum(data):.1f} in {elapsed * 1000:.1f} ms")

    # Cost grows with the index here, round-robin evens it out.
    heavy = [i * i for i in range(args.length // 100)]
    loads = [sum(c) for c in chunks(heavy, n=args.workers, split=RoundRobin)]
    print(f"round-robin loads: {[f'{x:.3g}' for x in loads]}")


if __name__ == "__main__":
    main()
