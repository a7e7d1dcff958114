"""
Round Robin policy.

Each job gets a fixed time quantum. If the job finishes within the quantum,
great. If not, it gets moved to the back of the queue and the next job runs.

There is no ordering key at all: compare() always reports a tie, so the
ReadyQueue degrades to a strict FIFO (ties keep insertion order). Rotation
happens in SchedulerEngine.quantum_expired, which the driver calls whenever
it decides a slice has elapsed.

time_quantum is carried here for the driver's benefit. The engine never
reads it: when a quantum expires is the simulator's business.

Tradeoff: more context switching, better responsiveness. The quantum size
controls this:
- Small quantum: very fair, lots of switching
- Large quantum: less fair, approaches FCFS behavior
"""

from models.job import Job
from scheduler.base import AbstractPolicy


class RoundRobinPolicy(AbstractPolicy):

    time_sliced = True

    def __init__(self, time_quantum: int = 2):
        if time_quantum < 1:
            raise ValueError(f"time_quantum must be >= 1, got {time_quantum}")
        self.time_quantum = time_quantum

    def compare(self, a: Job, b: Job) -> int:
        return 0

    @property
    def policy_name(self) -> str:
        return "rr"
