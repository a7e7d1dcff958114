"""
Command-line entry point for running simulations.

Usage:
    python -m simulator.main --workload examples/jobs.txt --policy psjf --cores 2
    python -m simulator.main --generate 50 --seed 7 --policy all
    python -m simulator.main --workload jobs.txt --policy rr --quantum 3 --verbose

--policy all runs every policy on the same workload and prints a
comparison table. --verbose turns on DEBUG logging, which includes the
engine's show_queue listing after every event.
"""

import argparse
import json
import logging
import sys

from config.settings import settings
from models.enums import SchedulingPolicy
from simulator.runner import run_simulation
from simulator.workload import WorkloadError, generate_workload, load_workload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Multi-core CPU scheduling simulator")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--workload", type=str,
        help="Workload file: one 'arrival burst priority' line per job",
    )
    source.add_argument(
        "--generate", type=int, metavar="N",
        help="Generate a random workload of N jobs instead of reading a file",
    )
    parser.add_argument(
        "--seed", type=int, default=42,
        help="Seed for --generate (default: 42)",
    )
    parser.add_argument(
        "--cores", type=int, default=settings.DEFAULT_CORE_COUNT,
        help=f"Number of cores (default: {settings.DEFAULT_CORE_COUNT})",
    )
    parser.add_argument(
        "--policy", type=str, default=settings.DEFAULT_SCHEDULING_POLICY,
        choices=[p.value for p in SchedulingPolicy] + ["all"],
        help=f"Scheduling policy (default: {settings.DEFAULT_SCHEDULING_POLICY})",
    )
    parser.add_argument(
        "--quantum", type=int, default=settings.ROUND_ROBIN_TIME_QUANTUM,
        help=f"Round Robin time quantum (default: {settings.ROUND_ROBIN_TIME_QUANTUM})",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print full reports as JSON instead of a table",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log every scheduling decision",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.workload:
            workload = load_workload(args.workload)
        else:
            workload = generate_workload(num_jobs=args.generate, seed=args.seed)
    except (OSError, WorkloadError) as e:
        logger.error(f"Cannot load workload: {e}")
        return 2

    if args.cores < 1:
        logger.error(f"--cores must be >= 1, got {args.cores}")
        return 2
    if args.quantum < 1:
        logger.error(f"--quantum must be >= 1, got {args.quantum}")
        return 2

    if args.policy == "all":
        policies = list(SchedulingPolicy)
    else:
        policies = [SchedulingPolicy(args.policy)]

    reports = [
        run_simulation(workload, policy, cores=args.cores, time_quantum=args.quantum)
        for policy in policies
    ]

    if args.json:
        print(json.dumps([r.as_dict() for r in reports], indent=2))
        return 0

    print(f"=== {len(workload)} jobs on {args.cores} core(s) ===\n")
    print("{:<8} {:>10} {:>12} {:>10} {:>10}".format(
        "Policy", "Waiting", "Turnaround", "Response", "Makespan"
    ))
    print("-" * 54)
    for r in reports:
        print("{:<8} {:>10.2f} {:>12.2f} {:>10.2f} {:>10d}".format(
            r.policy, r.avg_waiting_time, r.avg_turnaround_time,
            r.avg_response_time, r.makespan,
        ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
