"""
Scheduler Engine: the core of the project.

The engine is a passive state machine. It owns no clock and no threads:
an external simulator calls it once per event, passing the current time,
and the engine answers which job (if any) should now occupy a core.

    start_up(cores, policy)                 once, first
    new_job(job_id, time, burst, priority)  → core id or None
    job_finished(core_id, job_id, time)     → next job id for that core or None
    quantum_expired(core_id, time)          → next job id for that core or None (RR only)
    average_*_time()                        after the last job finished
    clean_up()                              once, last

         new_job                       job_finished / quantum_expired
    ┌─────────────┐  idle core   ┌────────────┐  finished  ┌──────────┐
    │   WAITING   │─────────────>│  RUNNING   │───────────>│ FINISHED │
    │ ready queue │<─────────────│ core table │            │ (stats)  │
    └─────────────┘  preempted / └────────────┘            └──────────┘
                     rotated out

The job table (a dict keyed by job id) is the single owner of Job records.
The ready queue and the core table only hold references into it, and a job
leaves the table the moment its statistics are recorded.
"""

import copy
import logging
import threading
from functools import cmp_to_key
from typing import Optional, Union

from models.enums import JobState, SchedulingPolicy
from models.job import Job
from scheduler.base import AbstractPolicy
from scheduler.cores import CoreTable
from scheduler.errors import (
    DuplicateJobError,
    JobCoreMismatchError,
    JobNotFoundError,
    SchedulerStateError,
    TimeOrderError,
)
from scheduler.ready_queue import ReadyQueue
from scheduler.registry import create_policy, resolve_policy
from scheduler.stats import SchedulerStats

logger = logging.getLogger(__name__)


class SchedulerEngine:
    """
    One simulated run: a policy, a fixed set of cores, a ready queue and
    running statistics.

    Calls are expected from a single driver in time order. The lock only
    serializes callers when the engine is shared (the HTTP API does that);
    it never blocks a well-behaved driver.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._policy: Optional[AbstractPolicy] = None
        self._policy_name: Optional[SchedulingPolicy] = None
        self._cores: Optional[CoreTable] = None
        self._queue: Optional[ReadyQueue[Job]] = None
        self._jobs: dict[int, Job] = {}
        self._retired: set[int] = set()  # ids of finished jobs, never reusable
        self._stats = SchedulerStats()
        self._clock: Optional[int] = None
        self._last_arrival: Optional[int] = None
        self._started = False
        self._closed = False

    # ── Lifecycle ───────────────────────────────────────────────

    def start_up(
        self,
        core_count: int,
        policy: Union[SchedulingPolicy, str],
        **policy_kwargs,
    ) -> None:
        """
        Allocate `core_count` idle cores and select the policy.

        For Round Robin, time_quantum may be passed through policy_kwargs.
        It is stored on the policy for the driver; the engine ignores it.
        """
        with self._lock:
            if self._started:
                raise SchedulerStateError("start_up called twice")
            if core_count < 1:
                raise ValueError(f"core_count must be >= 1, got {core_count}")

            self._policy_name = resolve_policy(policy)
            self._policy = create_policy(self._policy_name, **policy_kwargs)
            self._cores = CoreTable(core_count)
            self._queue = ReadyQueue(self._policy.compare)
            self._started = True

        logger.info(f"Scheduler started: {core_count} core(s), policy={self._policy_name.value}")

    def clean_up(self) -> None:
        """
        Destroy every outstanding job and release the queue and core table.

        Safe to call again: the second call is a no-op. Statistics stay
        readable afterwards.
        """
        with self._lock:
            if not self._started:
                raise SchedulerStateError("clean_up called before start_up")
            if self._closed:
                return

            released = len(self._jobs)
            self._queue.clear()
            self._cores.clear()
            for job in self._jobs.values():
                job.state = JobState.FINISHED
            self._jobs.clear()
            self._closed = True

        logger.info(f"Scheduler cleaned up, released {released} outstanding job(s)")

    # ── Events ──────────────────────────────────────────────────

    def new_job(self, job_id: int, time: int, burst_time: int, priority: int) -> Optional[int]:
        """
        A job arrives at `time`.

        Returns the core it should run on from now on, or None if nothing
        changes. Returning a busy core means its current job was preempted.
        """
        with self._lock:
            self._require_running()
            if job_id in self._jobs or job_id in self._retired:
                raise DuplicateJobError(job_id)
            if burst_time < 1:
                raise ValueError(f"burst_time must be >= 1, got {burst_time}")
            if self._last_arrival is not None and time == self._last_arrival:
                raise TimeOrderError(time, self._last_arrival, "two jobs arrived at the same time")
            self._advance_clock(time)
            self._last_arrival = time

            job = Job(id=job_id, arrival_time=time, burst_time=burst_time, priority=priority)
            self._jobs[job_id] = job

            # 1) Lowest idle core
            core_id = self._cores.first_idle()
            if core_id is not None:
                self._cores.assign(core_id, job, time)
                logger.debug(f"t={time} job {job_id} → core {core_id} (idle)")
                return core_id

            # 2) Preemption, for PSJF and PPRI only
            if self._policy.preemptive:
                core_id = self._select_victim(job, time)
                if core_id is not None:
                    victim = self._suspend(core_id, time)
                    self._cores.assign(core_id, job, time)
                    logger.debug(f"t={time} job {job_id} preempts job {victim.id} on core {core_id}")
                    return core_id

            # 3) Wait
            self._queue.offer(job)
            logger.debug(f"t={time} job {job_id} queued ({len(self._queue)} waiting)")
            return None

    def job_finished(self, core_id: int, job_id: int, time: int) -> Optional[int]:
        """
        The job on `core_id` completed at `time`.

        Records its statistics, frees the core, and backfills it with the
        head of the ready queue. Returns that job's id, or None if the core
        stays idle.
        """
        with self._lock:
            self._require_running()
            core = self._cores.get(core_id)
            if job_id not in self._jobs:
                raise JobNotFoundError(job_id)
            if core.current_job is None or core.current_job.id != job_id:
                running = None if core.current_job is None else core.current_job.id
                raise JobCoreMismatchError(core_id, job_id, running)
            self._advance_clock(time)

            job = self._cores.release(core_id)
            job.remaining_time = 0
            job.finish_time = time
            job.state = JobState.FINISHED
            self._stats.record(job)
            del self._jobs[job_id]
            self._retired.add(job_id)
            logger.debug(f"t={time} job {job_id} finished on core {core_id}")

            next_job = self._queue.poll()
            if next_job is None:
                return None
            self._cores.assign(core_id, next_job, time)
            logger.debug(f"t={time} job {next_job.id} → core {core_id} (backfill)")
            return next_job.id

    def quantum_expired(self, core_id: int, time: int) -> Optional[int]:
        """
        The Round Robin slice on `core_id` ran out at `time`.

        Outside RR this is a no-op. Under RR, the running job goes to the
        tail of the ready queue and the head takes the core; if the core is
        idle or nobody is waiting, the current job simply keeps running.
        """
        with self._lock:
            self._require_running()
            core = self._cores.get(core_id)
            self._advance_clock(time)

            if not self._policy.time_sliced:
                return None
            if core.is_idle or not self._queue:
                return None

            rotated = self._suspend(core_id, time)
            next_job = self._queue.poll()
            self._cores.assign(core_id, next_job, time)
            logger.debug(f"t={time} core {core_id}: job {rotated.id} rotated out, job {next_job.id} in")
            return next_job.id

    # ── Statistics ──────────────────────────────────────────────

    def average_waiting_time(self) -> float:
        with self._lock:
            return self._stats.average_waiting_time()

    def average_turnaround_time(self) -> float:
        with self._lock:
            return self._stats.average_turnaround_time()

    def average_response_time(self) -> float:
        with self._lock:
            return self._stats.average_response_time()

    @property
    def stats(self) -> SchedulerStats:
        return self._stats

    # ── Inspection ──────────────────────────────────────────────

    @property
    def started(self) -> bool:
        return self._started

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def policy(self) -> Optional[AbstractPolicy]:
        return self._policy

    @property
    def policy_name(self) -> Optional[SchedulingPolicy]:
        return self._policy_name

    @property
    def core_count(self) -> int:
        return 0 if self._cores is None else len(self._cores)

    @property
    def job_count(self) -> int:
        """Outstanding (waiting or running) job records."""
        return len(self._jobs)

    def get_job(self, job_id: int) -> Job:
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                raise JobNotFoundError(job_id)
            return job

    def running_jobs(self) -> dict[int, int]:
        """{core_id: job_id} for every busy core."""
        with self._lock:
            if self._cores is None:
                return {}
            return {core_id: job.id for core_id, job in self._cores.busy()}

    def queue_entries(self) -> list[tuple[int, int]]:
        """(job_id, core_id or -1) for every outstanding job, in policy order."""
        with self._lock:
            return self._queue_entries()

    def show_queue(self) -> str:
        """
        Debug listing like "2(-1) 4(0) 1(-1)": job id, then its core or -1.
        Logged at DEBUG and returned; no effect on scheduling.
        """
        with self._lock:
            listing = " ".join(f"{job_id}({core_id})" for job_id, core_id in self._queue_entries())
        logger.debug(f"queue: {listing}")
        return listing

    # ── Internals ───────────────────────────────────────────────

    def _require_running(self) -> None:
        if not self._started:
            raise SchedulerStateError("scheduler used before start_up")
        if self._closed:
            raise SchedulerStateError("scheduler used after clean_up")

    def _advance_clock(self, time: int) -> None:
        if self._clock is not None and time < self._clock:
            raise TimeOrderError(time, self._clock)
        self._clock = time

    def _select_victim(self, job: Job, time: int) -> Optional[int]:
        """
        Core whose job `job` should preempt, or None.

        Every running job is first charged for the CPU it used, so PSJF
        compares up-to-date remaining times. Among the running jobs that
        `job` strictly outranks, the one the policy ranks worst loses its
        core; ties go to the highest core id.
        """
        victim_core, victim = None, None
        for core_id, running in self._cores.busy():
            running.charge(time)
            if not self._policy.precedes(job, running):
                continue
            if victim is None or self._policy.compare(running, victim) >= 0:
                victim_core, victim = core_id, running
        return victim_core

    def _suspend(self, core_id: int, time: int) -> Job:
        """Move the job on `core_id` back to the ready queue."""
        job = self._cores.get(core_id).current_job
        job.charge(time)
        self._cores.release(core_id)
        job.state = JobState.WAITING
        self._queue.offer(job)
        return job

    def _queue_entries(self) -> list[tuple[int, int]]:
        if self._cores is None or self._closed:
            return []
        # Running jobs are ranked on what they have left at the current clock.
        # Snapshots are charged so the live records stay untouched.
        jobs = []
        for _, job in self._cores.busy():
            snapshot = copy.copy(job)
            snapshot.charge(self._clock)
            jobs.append(snapshot)
        jobs += list(self._queue)
        jobs.sort(key=cmp_to_key(self._policy.compare))
        return [
            (job.id, -1 if job.assigned_core is None else job.assigned_core)
            for job in jobs
        ]
