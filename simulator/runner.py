"""
Discrete-event simulation driver for the scheduler engine.

The engine never decides WHEN anything happens; this driver does. It keeps
its own view of the machine (which job sits on which core since when, how
much work each job has left) and turns it into the three engine events:

    arrival  → engine.new_job(...)        at the job's arrival time
    finish   → engine.job_finished(...)   when the job on a core runs out of work
    quantum  → engine.quantum_expired(...) every time_quantum units under RR

Events live in a heap ordered by (time, kind, counter). At equal times,
finishes are handled before quantum expirations, and both before arrivals,
so a core freed at t can be reused by a job arriving at t.

Preemption and rotation make previously armed finish/quantum events wrong.
Instead of digging them out of the heap, every dispatch bumps the core's
token; events carry the token they were armed with and stale ones are
skipped when popped.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass, field, asdict
from typing import Iterable, Optional, Union

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.engine import SchedulerEngine
from scheduler.registry import resolve_policy
from simulator.workload import WorkloadJob, validate_workload

logger = logging.getLogger(__name__)

# Event kinds double as the same-time processing order
FINISH, QUANTUM, ARRIVAL = 0, 1, 2


@dataclass
class DispatchRecord:
    time: int
    core_id: int
    job_id: int
    reason: str  # arrival | preemption | backfill | rotation


@dataclass
class JobOutcome:
    job_id: int
    arrival_time: int
    burst_time: int
    priority: int
    start_time: Optional[int] = None
    finish_time: Optional[int] = None


@dataclass
class SimulationReport:
    policy: str
    cores: int
    time_quantum: Optional[int]
    avg_waiting_time: float
    avg_turnaround_time: float
    avg_response_time: float
    completed_jobs: int
    makespan: int
    jobs: list[JobOutcome] = field(default_factory=list)
    dispatches: list[DispatchRecord] = field(default_factory=list)

    def as_dict(self) -> dict:
        return asdict(self)


class Simulation:
    """
    One run of a workload under one policy.

    A Simulation owns a fresh SchedulerEngine; run() may only be called once.
    """

    def __init__(
        self,
        workload: Iterable[WorkloadJob],
        policy: Union[SchedulingPolicy, str, None] = None,
        cores: Optional[int] = None,
        time_quantum: Optional[int] = None,
    ):
        self.workload = validate_workload(workload)
        self.policy = resolve_policy(policy or settings.DEFAULT_SCHEDULING_POLICY)
        self.cores = settings.DEFAULT_CORE_COUNT if cores is None else cores
        if self.policy == SchedulingPolicy.RR:
            self.time_quantum = (
                settings.ROUND_ROBIN_TIME_QUANTUM if time_quantum is None else time_quantum
            )
        else:
            self.time_quantum = None

        self.engine = SchedulerEngine()
        self.time = 0
        self.dispatches: list[DispatchRecord] = []
        self._events: list[tuple] = []
        self._counter = itertools.count()  # unique counter to break ties
        self._remaining: dict[int, int] = {}
        self._on_core: dict[int, tuple[int, int]] = {}  # core_id -> (job_id, since)
        self._tokens = [0] * self.cores
        self._outcomes = {
            j.job_id: JobOutcome(j.job_id, j.arrival_time, j.burst_time, j.priority)
            for j in self.workload
        }

    def run(self) -> SimulationReport:
        if self.engine.started:
            raise RuntimeError("Simulation.run() can only be called once")

        policy_kwargs = {"time_quantum": self.time_quantum} if self.time_quantum is not None else {}
        self.engine.start_up(self.cores, self.policy, **policy_kwargs)
        logger.info(
            f"Simulating {len(self.workload)} jobs on {self.cores} core(s) "
            f"with {self.policy.value}"
        )

        try:
            for job in self.workload:
                self._schedule(job.arrival_time, ARRIVAL, job)

            while self._events:
                time, kind, _, payload = heapq.heappop(self._events)
                self.time = time

                if kind == ARRIVAL:
                    self._on_arrival(payload)
                else:
                    core_id, token = payload
                    if token != self._tokens[core_id]:
                        continue  # armed for an earlier occupant
                    if kind == FINISH:
                        self._on_finish(core_id)
                    else:
                        self._on_quantum(core_id)

                logger.debug(f"[t={self.time:4d}] {self.engine.show_queue()}")

            if self.engine.job_count:
                raise RuntimeError(
                    f"{self.engine.job_count} job(s) still outstanding after the last event"
                )
            return self._report()
        finally:
            self.engine.clean_up()

    # ── Event handlers ──────────────────────────────────────────

    def _on_arrival(self, job: WorkloadJob) -> None:
        self._remaining[job.job_id] = job.burst_time
        core_id = self.engine.new_job(job.job_id, self.time, job.burst_time, job.priority)
        if core_id is not None:
            reason = "preemption" if core_id in self._on_core else "arrival"
            self._dispatch(core_id, job.job_id, reason)

    def _on_finish(self, core_id: int) -> None:
        job_id, _ = self._on_core.pop(core_id)
        self._remaining[job_id] = 0
        self._outcomes[job_id].finish_time = self.time

        next_id = self.engine.job_finished(core_id, job_id, self.time)
        if next_id is not None:
            self._dispatch(core_id, next_id, "backfill")
        else:
            self._tokens[core_id] += 1  # core idle: drop any pending quantum

    def _on_quantum(self, core_id: int) -> None:
        next_id = self.engine.quantum_expired(core_id, self.time)
        if next_id is None:
            # Same job keeps the core for another slice
            self._schedule(self.time + self.time_quantum, QUANTUM, (core_id, self._tokens[core_id]))
        else:
            self._dispatch(core_id, next_id, "rotation")

    # ── Helpers ─────────────────────────────────────────────────

    def _schedule(self, time: int, kind: int, payload) -> None:
        heapq.heappush(self._events, (time, kind, next(self._counter), payload))

    def _dispatch(self, core_id: int, job_id: int, reason: str) -> None:
        """Put `job_id` on `core_id` now, charging whoever was there before."""
        previous = self._on_core.get(core_id)
        if previous is not None:
            prev_id, since = previous
            self._remaining[prev_id] -= self.time - since

        self._on_core[core_id] = (job_id, self.time)
        self._tokens[core_id] += 1
        token = self._tokens[core_id]

        outcome = self._outcomes[job_id]
        if outcome.start_time is None:
            outcome.start_time = self.time

        self._schedule(self.time + self._remaining[job_id], FINISH, (core_id, token))
        if self.time_quantum is not None:
            self._schedule(self.time + self.time_quantum, QUANTUM, (core_id, token))

        self.dispatches.append(DispatchRecord(self.time, core_id, job_id, reason))
        logger.debug(f"[t={self.time:4d}] core {core_id} ← job {job_id} ({reason})")

    def _report(self) -> SimulationReport:
        finishes = [o.finish_time for o in self._outcomes.values() if o.finish_time is not None]
        return SimulationReport(
            policy=self.policy.value,
            cores=self.cores,
            time_quantum=self.time_quantum,
            avg_waiting_time=self.engine.average_waiting_time(),
            avg_turnaround_time=self.engine.average_turnaround_time(),
            avg_response_time=self.engine.average_response_time(),
            completed_jobs=self.engine.stats.completed_job_count,
            makespan=max(finishes, default=0),
            jobs=list(self._outcomes.values()),
            dispatches=list(self.dispatches),
        )


def run_simulation(
    workload: Iterable[WorkloadJob],
    policy: Union[SchedulingPolicy, str, None] = None,
    cores: Optional[int] = None,
    time_quantum: Optional[int] = None,
) -> SimulationReport:
    """Convenience wrapper: build a Simulation and run it."""
    return Simulation(workload, policy, cores, time_quantum).run()
