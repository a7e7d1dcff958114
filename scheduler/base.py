"""
Abstract base class for all scheduling policies (Strategy pattern).

The Strategy pattern lets you swap algorithms without changing the code that
uses them. The SchedulerEngine only knows about AbstractPolicy: it hands
policy.compare to the ReadyQueue and asks policy.preemptive / time_sliced
when deciding whether a new arrival or a quantum tick may displace a
running job.

To add a new scheduling policy:
1. Create a new class that inherits AbstractPolicy
2. Implement compare() and policy_name
3. Register it in scheduler/registry.py

compare() is a classic three-way comparator over Job records:
negative = a runs before b, zero = tie, positive = a runs after b.
Ties are resolved by the ReadyQueue in insertion order.
"""

from abc import ABC, abstractmethod

from models.job import Job


def three_way(x, y) -> int:
    """Return -1, 0 or 1 depending on how x orders against y."""
    return (x > y) - (x < y)


def by_arrival(a: Job, b: Job) -> int:
    """Earlier arrival first. Shared tie-break for every keyed policy."""
    return three_way(a.arrival_time, b.arrival_time)


class AbstractPolicy(ABC):
    """
    Interface that all scheduling policies implement.

    - compare: total ordering over jobs for this policy
    - preemptive: may a new arrival displace a running job?
    - time_sliced: does quantum expiry rotate the running job? (Round Robin only)
    """

    preemptive: bool = False
    time_sliced: bool = False

    @abstractmethod
    def compare(self, a: Job, b: Job) -> int:
        """Three-way comparison: negative if `a` should run before `b`."""
        ...

    def precedes(self, a: Job, b: Job) -> bool:
        """True if `a` strictly outranks `b` under this policy."""
        return self.compare(a, b) < 0

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'fcfs', 'psjf')."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.policy_name}>"
