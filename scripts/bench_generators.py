#!/usr/bin/env python3
"""Benchmark generator throughput.

Usage (from the repo root):
    python scripts/bench_generators.py                  # both kinds, 3 iterations
    python scripts/bench_generators.py -n 5             # 5 iterations
    python scripts/bench_generators.py -d 200000        # 200k draws per run
    python scripts/bench_generators.py --kind pcg32 --op normal
"""

import argparse
import statistics
import sys
import time
from pathlib import Path

# Add the repo root to path
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from rngkit.codec import string_base62  # noqa: E402
from rngkit.distributions import NormalSampler  # noqa: E402
from rngkit.prng import build_generator  # noqa: E402
from rngkit.types import GENERATOR_KINDS, GeneratorConfig  # noqa: E402
from rngkit.uniform import u64_below  # noqa: E402

OPS = ("u64", "f64", "below", "normal", "base62")


def _make_workload(op, rng, draws):
    if op == "u64":
        return lambda: [rng.next_u64() for _ in range(draws)]
    if op == "f64":
        return lambda: [rng.next_f64() for _ in range(draws)]
    if op == "below":
        return lambda: [u64_below(rng, 1000) for _ in range(draws)]
    if op == "normal":
        sampler = NormalSampler(rng)
        return lambda: [sampler.normal() for _ in range(draws)]
    return lambda: string_base62(rng, draws)


def bench(kind, op, draws, iterations, seed):
    rng = build_generator(GeneratorConfig(kind=kind, seed=seed))
    workload = _make_workload(op, rng, draws)

    print(f"Benchmark: {kind} {op}, {draws} draws, seed={seed}")

    # Warmup
    workload()

    times_ms = []
    for i in range(iterations):
        start = time.perf_counter()
        workload()
        elapsed_ms = (time.perf_counter() - start) * 1000
        times_ms.append(elapsed_ms)
        print(f"  Run {i + 1}: {elapsed_ms:.1f} ms")

    median = statistics.median(times_ms)
    mean = statistics.mean(times_ms)
    print(f"  Median: {median:.1f} ms ({draws / median * 1000:,.0f} draws/s)")
    print(f"  Mean:   {mean:.1f} ms")
    if len(times_ms) > 1:
        stdev = statistics.stdev(times_ms)
        print(f"  Stdev:  {stdev:.1f} ms")
    print()


def main():
    parser = argparse.ArgumentParser(description="Benchmark rngkit generators")
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=3,
        help="Number of iterations (default: 3)",
    )
    parser.add_argument(
        "-d",
        "--draws",
        type=int,
        default=100_000,
        help="Draws per iteration (default: 100000)",
    )
    parser.add_argument(
        "--kind",
        choices=GENERATOR_KINDS,
        help="Only benchmark this generator kind",
    )
    parser.add_argument(
        "--op",
        choices=OPS,
        default="u64",
        help="Operation to time (default: u64)",
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Generator seed (default: 42)"
    )
    args = parser.parse_args()

    kinds = [args.kind] if args.kind else list(GENERATOR_KINDS)
    for kind in kinds:
        bench(kind, args.op, args.draws, args.iterations, args.seed)


if __name__ == "__main__":
    main()
