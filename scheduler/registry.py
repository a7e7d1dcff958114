"""
Policy factory: maps policy names to policy classes.

This is the Factory pattern: instead of writing if/elif chains everywhere,
there is ONE place that knows how to create policies. The engine calls it
exactly once, from start_up.
"""

from typing import Union

from models.enums import SchedulingPolicy
from scheduler.base import AbstractPolicy
from scheduler.fcfs import FCFSPolicy
from scheduler.sjf import SJFPolicy, PSJFPolicy
from scheduler.priority import PriorityPolicy, PreemptivePriorityPolicy
from scheduler.round_robin import RoundRobinPolicy


_REGISTRY: dict[SchedulingPolicy, type[AbstractPolicy]] = {
    SchedulingPolicy.FCFS: FCFSPolicy,
    SchedulingPolicy.SJF: SJFPolicy,
    SchedulingPolicy.PSJF: PSJFPolicy,
    SchedulingPolicy.PRI: PriorityPolicy,
    SchedulingPolicy.PPRI: PreemptivePriorityPolicy,
    SchedulingPolicy.RR: RoundRobinPolicy,
}


def resolve_policy(policy: Union[SchedulingPolicy, str]) -> SchedulingPolicy:
    """Accept either the enum or its string value ("fcfs", "rr", ...)."""
    try:
        return SchedulingPolicy(policy)
    except ValueError:
        raise ValueError(
            f"Unknown scheduling policy: {policy!r}. "
            f"Available: {[p.value for p in SchedulingPolicy]}"
        ) from None


def create_policy(policy: Union[SchedulingPolicy, str], **kwargs) -> AbstractPolicy:
    """
    Create a policy instance.

    For Round Robin, you can pass time_quantum as a kwarg:
        create_policy(SchedulingPolicy.RR, time_quantum=4)

    For all others, kwargs are ignored.
    """
    policy = resolve_policy(policy)
    cls = _REGISTRY[policy]

    if policy == SchedulingPolicy.RR:
        return cls(**kwargs)
    return cls()
