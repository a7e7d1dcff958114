"""
Shortest Job First policies.

SJF (non-preemptive): jobs with the smallest total burst_time go first.
This minimizes average waiting time among jobs that are all present at once.

PSJF (preemptive, a.k.a. shortest remaining time first): ordered by
remaining_time instead. A newly arrived job whose remaining time is strictly
smaller than a running job's may take over that job's core. The engine keeps
remaining_time current by charging running jobs for the CPU they used
before every comparison that involves them.

Ties on the primary key are broken by arrival time, earlier first.

Downside of both: starvation. A long job may never run if short jobs keep
arriving.
"""

from models.job import Job
from scheduler.base import AbstractPolicy, by_arrival, three_way


class SJFPolicy(AbstractPolicy):

    def compare(self, a: Job, b: Job) -> int:
        return three_way(a.burst_time, b.burst_time) or by_arrival(a, b)

    @property
    def policy_name(self) -> str:
        return "sjf"


class PSJFPolicy(AbstractPolicy):

    preemptive = True

    def compare(self, a: Job, b: Job) -> int:
        return three_way(a.remaining_time, b.remaining_time) or by_arrival(a, b)

    @property
    def policy_name(self) -> str:
        return "psjf"
