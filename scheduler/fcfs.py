"""
First Come First Served (FCFS) policy.

The simplest scheduling policy: jobs run in the order they arrive.
Arrival times are unique per job, so the ordering is total without any
further tie-break.

When to use: when fairness matters more than efficiency.
Every job gets served in arrival order, no job gets starved.

Downside: a long-running job blocks everything behind it
(the "convoy effect").
"""

from models.job import Job
from scheduler.base import AbstractPolicy, by_arrival


class FCFSPolicy(AbstractPolicy):

    def compare(self, a: Job, b: Job) -> int:
        return by_arrival(a, b)

    @property
    def policy_name(self) -> str:
        return "fcfs"
