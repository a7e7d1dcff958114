"""
Core table: a fixed-size array of per-core slots.

Each slot is idle or holds exactly one running Job. The table is the only
place that sets or clears Job.assigned_core, so "the core says it runs job X"
and "job X says it runs on this core" can never disagree.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from models.enums import CoreStatus, JobState
from models.job import Job
from scheduler.errors import InvalidCoreError, SchedulerStateError


@dataclass
class Core:
    core_id: int
    current_job: Optional[Job] = None

    @property
    def status(self) -> CoreStatus:
        return CoreStatus.IDLE if self.current_job is None else CoreStatus.BUSY

    @property
    def is_idle(self) -> bool:
        return self.current_job is None


class CoreTable:

    def __init__(self, count: int):
        if count < 1:
            raise ValueError(f"core count must be >= 1, got {count}")
        self._cores = [Core(core_id=i) for i in range(count)]

    def __len__(self) -> int:
        return len(self._cores)

    def get(self, core_id: int) -> Core:
        if not 0 <= core_id < len(self._cores):
            raise InvalidCoreError(core_id, len(self._cores))
        return self._cores[core_id]

    def first_idle(self) -> Optional[int]:
        """Lowest-indexed idle core, or None when every core is busy."""
        for core in self._cores:
            if core.is_idle:
                return core.core_id
        return None

    def idle_count(self) -> int:
        return sum(1 for core in self._cores if core.is_idle)

    def assign(self, core_id: int, job: Job, time: int) -> None:
        """Put `job` on an idle core and mark it RUNNING from `time` on."""
        core = self.get(core_id)
        if not core.is_idle:
            raise SchedulerStateError(
                f"Core {core_id} already runs job {core.current_job.id}"
            )
        core.current_job = job
        job.state = JobState.RUNNING
        job.assigned_core = core_id
        job.last_resumed_at = time
        if job.start_time is None:
            job.start_time = time

    def release(self, core_id: int) -> Job:
        """Detach and return the job running on `core_id`; the core becomes idle."""
        core = self.get(core_id)
        job = core.current_job
        if job is None:
            raise SchedulerStateError(f"Core {core_id} is idle")
        core.current_job = None
        job.assigned_core = None
        job.last_resumed_at = None
        return job

    def busy(self) -> Iterator[tuple[int, Job]]:
        """(core_id, job) for every busy core, lowest core id first."""
        for core in self._cores:
            if core.current_job is not None:
                yield core.core_id, core.current_job

    def clear(self) -> None:
        for core in self._cores:
            if core.current_job is not None:
                core.current_job.assigned_core = None
            core.current_job = None
