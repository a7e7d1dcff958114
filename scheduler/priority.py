"""
Priority-based policies.

Jobs with the lowest priority NUMBER run first (0 or 1 = most urgent).
Ties are broken by arrival time.

PRI is non-preemptive: once a job holds a core it keeps it until it finishes.
PPRI uses the same ordering but lets a more urgent arrival take over the core
of the least urgent running job.

Downside: low-priority jobs might wait forever if urgent jobs keep arriving.
Priorities are static here; there is no aging.
"""

from models.job import Job
from scheduler.base import AbstractPolicy, by_arrival, three_way


class PriorityPolicy(AbstractPolicy):

    def compare(self, a: Job, b: Job) -> int:
        return three_way(a.priority, b.priority) or by_arrival(a, b)

    @property
    def policy_name(self) -> str:
        return "pri"


class PreemptivePriorityPolicy(PriorityPolicy):

    preemptive = True

    @property
    def policy_name(self) -> str:
        return "ppri"
