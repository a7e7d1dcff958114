"""
CLI entry point for running throughput benchmarks.

Usage:
    python -m benchmarks.run_benchmark                          # all policies, 1000 jobs
    python -m benchmarks.run_benchmark --policy psjf            # single policy
    python -m benchmarks.run_benchmark --num-jobs 20000         # more jobs
    python -m benchmarks.run_benchmark --policy all --cores 8
"""

import argparse
import json

from benchmarks.throughput import ThroughputBenchmark
from models.enums import SchedulingPolicy


def main():
    parser = argparse.ArgumentParser(description="Scheduler Engine Throughput Benchmark")
    parser.add_argument(
        "--num-jobs", type=int, default=1000,
        help="Number of jobs to simulate (default: 1000)",
    )
    parser.add_argument(
        "--policy", type=str, default="all",
        choices=[p.value for p in SchedulingPolicy] + ["all"],
        help="Which policy to benchmark (default: all)",
    )
    parser.add_argument(
        "--cores", type=int, default=4,
        help="Number of cores (default: 4)",
    )
    parser.add_argument(
        "--quantum", type=int, default=2,
        help="Round Robin time quantum (default: 2)",
    )
    parser.add_argument(
        "--seed", type=int, default=42,
        help="Workload seed (default: 42)",
    )
    args = parser.parse_args()

    print(f"=== Scheduler Engine Throughput Benchmark ===")
    print(f"Jobs: {args.num_jobs} | Cores: {args.cores} | Policy: {args.policy}\n")

    bench = ThroughputBenchmark(
        num_jobs=args.num_jobs, cores=args.cores, time_quantum=args.quantum, seed=args.seed
    )

    if args.policy == "all":
        results = bench.run_all_policies()
    else:
        results = [bench.run(args.policy)]

    print("\n=== RESULTS ===")
    print(json.dumps(results, indent=2))

    # Summary table
    print("\n{:<8} {:>10} {:>16} {:>10}".format("Policy", "Time (s)", "Throughput", "Avg wait"))
    print("-" * 48)
    for r in results:
        print("{:<8} {:>10.3f} {:>12.0f} ev/s {:>10.2f}".format(
            r["policy"], r["wall_clock_sec"], r["throughput_events_per_sec"], r["avg_waiting_time"]
        ))


if __name__ == "__main__":
    main()
