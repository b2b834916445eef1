#!/usr/bin/env python3
"""
Run the clique search on the standard DIMACS benchmark instances.

USAGE:
    python scripts/run_benchmarks.py [OPTIONS]

EXAMPLES:
    # All default instances from data/, report to clique.csv
    python scripts/run_benchmarks.py

    # A few instances from another directory
    python scripts/run_benchmarks.py --data-dir ~/dimacs brock200_1.clq keller4.clq
"""

import argparse
from pathlib import Path

from colorclique import SearchConfig
from colorclique.benchmarks import DEFAULT_INSTANCES, run_benchmarks


# Benchmark configuration
BENCHMARK_CONFIG = {
    'data_dir': 'data',
    'csv_path': 'clique.csv',
    'rounds': 130,
    'top_k': 2,
}


def main():
    parser = argparse.ArgumentParser(description="Benchmark the clique search on DIMACS instances")
    parser.add_argument("instances", nargs="*", help="Instance file names (default: standard list)")
    parser.add_argument("--data-dir", default=BENCHMARK_CONFIG['data_dir'], help="Directory with instances")
    parser.add_argument("--csv", default=BENCHMARK_CONFIG['csv_path'], help="CSV report path")
    parser.add_argument("--rounds", type=int, default=BENCHMARK_CONFIG['rounds'])
    parser.add_argument("--top-k", type=int, default=BENCHMARK_CONFIG['top_k'])
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    data_dir = Path(args.data_dir)
    names = args.instances or DEFAULT_INSTANCES
    missing = [name for name in names if not (data_dir / name).is_file()]
    if missing:
        print(f"Skipping {len(missing)} missing instance(s): {', '.join(missing)}")

    paths = [data_dir / name for name in names if name not in missing]
    config = SearchConfig(rounds=args.rounds, top_k=args.top_k, seed=args.seed)
    run_benchmarks(paths, csv_path=args.csv, config=config)


if __name__ == "__main__":
    main()
