"""
Job record: one unit of CPU work tracked by the scheduler engine.

Key design decisions:
- A plain dataclass, no persistence: the engine's job table is the single owner,
  the ready queue and core table only hold references to the same object
- burst_time and priority never change after construction
- remaining_time only moves under preemptive accounting (PSJF, PPRI, RR) and
  drops to zero at completion for everything else
- start_time and finish_time are set exactly once
"""

from dataclasses import dataclass, field
from typing import Optional

from models.enums import JobState


@dataclass(eq=False)
class Job:
    id: int
    arrival_time: int
    burst_time: int
    priority: int
    remaining_time: int = field(init=False)

    # ── Lifecycle ───────────────────────────────────────────────
    state: JobState = JobState.WAITING
    start_time: Optional[int] = None       # first time the job occupied a core
    finish_time: Optional[int] = None
    assigned_core: Optional[int] = None    # set iff state == RUNNING
    last_resumed_at: Optional[int] = None  # start of the current run interval

    def __post_init__(self) -> None:
        self.remaining_time = self.burst_time

    @property
    def is_waiting(self) -> bool:
        return self.state == JobState.WAITING

    @property
    def is_running(self) -> bool:
        return self.state == JobState.RUNNING

    def charge(self, time: int) -> int:
        """
        Deduct the CPU time consumed since the job last resumed.

        Returns the amount charged. The job keeps running; the next interval
        starts at `time`.
        """
        if self.last_resumed_at is None:
            return 0
        used = max(0, time - self.last_resumed_at)
        self.remaining_time = max(0, self.remaining_time - used)
        self.last_resumed_at = time
        return used

    def __repr__(self) -> str:
        core = -1 if self.assigned_core is None else self.assigned_core
        return f"<Job {self.id} [{self.state.value}] core={core} remaining={self.remaining_time}>"
