"""
Workloads: the list of jobs a simulation feeds into the engine.

File format, one job per line:

    # arrival_time  burst_time  priority
    0  8  1
    1  4  2
    2, 9, 3

Fields are separated by whitespace or commas. Blank lines and `#` comments
are skipped. Job ids are assigned 0, 1, 2, ... in file order.

The engine requires every job to arrive at a distinct time, so duplicate
arrival times are rejected here, before anything is simulated.
"""

import logging
import random
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"[\s,]+")


class WorkloadError(ValueError):
    """Raised when a workload file or job list is malformed."""
    pass


@dataclass(frozen=True)
class WorkloadJob:
    job_id: int
    arrival_time: int
    burst_time: int
    priority: int


def validate_workload(jobs: Iterable[WorkloadJob]) -> list[WorkloadJob]:
    """Check the engine's preconditions and return the jobs sorted by arrival."""
    ordered = sorted(jobs, key=lambda j: j.arrival_time)
    seen_ids: set[int] = set()
    previous = None
    for job in ordered:
        if job.arrival_time < 0:
            raise WorkloadError(f"job {job.job_id}: arrival_time must be >= 0")
        if job.burst_time < 1:
            raise WorkloadError(f"job {job.job_id}: burst_time must be >= 1")
        if job.job_id in seen_ids:
            raise WorkloadError(f"duplicate job id {job.job_id}")
        if previous is not None and job.arrival_time == previous.arrival_time:
            raise WorkloadError(
                f"jobs {previous.job_id} and {job.job_id} both arrive at t={job.arrival_time}"
            )
        seen_ids.add(job.job_id)
        previous = job
    return ordered


def parse_workload(lines: Iterable[str]) -> list[WorkloadJob]:
    jobs = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        fields = [f for f in _SEPARATOR.split(line) if f]
        if len(fields) != 3:
            raise WorkloadError(
                f"line {line_no}: expected 'arrival burst priority', got {raw.strip()!r}"
            )
        try:
            arrival, burst, priority = (int(f) for f in fields)
        except ValueError:
            raise WorkloadError(f"line {line_no}: non-integer field in {raw.strip()!r}") from None
        jobs.append(WorkloadJob(len(jobs), arrival, burst, priority))
    return validate_workload(jobs)


def load_workload(path: Union[str, Path]) -> list[WorkloadJob]:
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        jobs = parse_workload(f)
    logger.info(f"Loaded {len(jobs)} jobs from {path}")
    return jobs


def format_workload(jobs: Iterable[WorkloadJob]) -> str:
    """Inverse of parse_workload: one 'arrival burst priority' line per job."""
    lines = ["# arrival_time burst_time priority"]
    lines += [f"{j.arrival_time} {j.burst_time} {j.priority}" for j in jobs]
    return "\n".join(lines) + "\n"


def generate_workload(
    num_jobs: int = 20,
    seed: int = 42,
    max_interarrival: int = 4,
    max_burst: int = 10,
    max_priority: int = 5,
) -> list[WorkloadJob]:
    """
    Seeded random workload with strictly increasing arrival times.

    Same seed → same jobs, so every policy can be compared on identical input.
    """
    rng = random.Random(seed)
    jobs = []
    arrival = 0
    for job_id in range(num_jobs):
        jobs.append(WorkloadJob(
            job_id=job_id,
            arrival_time=arrival,
            burst_time=rng.randint(1, max_burst),
            priority=rng.randint(0, max_priority),
        ))
        arrival += rng.randint(1, max_interarrival)
    return jobs
