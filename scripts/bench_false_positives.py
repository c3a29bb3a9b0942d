#!/usr/bin/env python3
"""Measured vs. estimated false-positive rate.

Fills filters of a few sizes with synthetic keys, probes with keys that
were never added, and prints the observed rate next to the bucket-count
estimate. The estimate uses buckets rather than bits, so it should sit
well above the measured column.
"""
import argparse
import json
import os
import sys
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from murmurbloom import BloomFilter, FilterConfig, configure_logging

SIZES = [1024, 8192, 65536]
K_VALUES = [1, 3, 5, 7]
N_PROBES = 10_000


def run(size: int, k: int, n_items: int) -> dict:
    bf = BloomFilter(size, k)
    t0 = time.perf_counter()
    bf.add_all(f"member-{i}" for i in range(n_items))
    add_s = time.perf_counter() - t0

    t0 = time.perf_counter()
    hits = sum(bf.contains(f"probe-{i}") for i in range(N_PROBES))
    probe_s = time.perf_counter() - t0

    return {
        "size": bf.size,
        "k": k,
        "n_items": n_items,
        "fill_ratio": bf.fill_ratio(),
        "measured_fp": hits / N_PROBES,
        "estimated_fp": bf.false_positive_probability(n_items),
        "add_us": add_s / max(1, n_items) * 1e6,
        "probe_us": probe_s / N_PROBES * 1e6,
    }


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--items", type=int, default=500, help="keys inserted per filter")
    parser.add_argument("--json", help="write results to this path")
    args = parser.parse_args()

    configure_logging(FilterConfig().log_level)

    print("=" * 80)
    print(f" FALSE POSITIVES: {args.items} items, {N_PROBES} probes")
    print("=" * 80)
    print(f"  {'buckets':>8} {'k':>3} {'fill':>7} {'measured':>10} {'estimate':>10} {'add us':>8} {'probe us':>9}")

    results = []
    for size in SIZES:
        for k in K_VALUES:
            r = run(size, k, args.items)
            results.append(r)
            print(f"  {r['size']:>8} {r['k']:>3} {r['fill_ratio']:>7.3f} "
                  f"{r['measured_fp']:>10.4f} {r['estimated_fp']:>10.4f} "
                  f"{r['add_us']:>8.2f} {r['probe_us']:>9.2f}")
    print()

    if args.json:
        with open(args.json, "w") as f:
            json.dump(results, f, indent=2)
        print(f"Results saved to: {args.json}")


if __name__ == "__main__":
    main()
