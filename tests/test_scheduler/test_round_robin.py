"""
Tests for Round Robin.

The policy itself is trivial: every comparison is a tie, so the ready queue
is FIFO. The interesting behavior lives in quantum_expired, which rotates
the running job to the tail of the queue.
"""

import pytest

from models.job import Job
from scheduler.ready_queue import ReadyQueue
from scheduler.round_robin import RoundRobinPolicy


def _make_job(job_id: int, arrival: int, burst: int = 5, priority: int = 0) -> Job:
    return Job(id=job_id, arrival_time=arrival, burst_time=burst, priority=priority)


def test_fifo_order_regardless_of_attributes():
    queue = ReadyQueue(RoundRobinPolicy().compare)
    queue.offer(_make_job(3, 9, burst=1, priority=0))
    queue.offer(_make_job(1, 0, burst=20, priority=9))
    queue.offer(_make_job(2, 4))

    assert [queue.poll().id for _ in range(3)] == [3, 1, 2]


def test_default_and_custom_quantum():
    assert RoundRobinPolicy().time_quantum == 2
    assert RoundRobinPolicy(time_quantum=5).time_quantum == 5


@pytest.mark.parametrize("quantum", [0, -3])
def test_quantum_must_be_positive(quantum):
    with pytest.raises(ValueError):
        RoundRobinPolicy(time_quantum=quantum)


def test_flags_and_name():
    policy = RoundRobinPolicy()
    assert policy.time_sliced is True
    assert policy.preemptive is False
    assert policy.policy_name == "rr"


def test_engine_keeps_quantum_on_policy(make_engine):
    engine = make_engine("rr", cores=1, time_quantum=3)
    assert engine.policy.time_quantum == 3


def test_two_jobs_take_turns(make_engine):
    engine = make_engine("rr", cores=1)
    engine.new_job(1, 0, 4, 0)
    assert engine.new_job(2, 1, 4, 0) is None

    assert engine.quantum_expired(0, 2) == 2
    assert engine.get_job(1).remaining_time == 2
    assert engine.quantum_expired(0, 4) == 1
    assert engine.get_job(2).remaining_time == 2

    assert engine.job_finished(0, 1, 6) == 2
    assert engine.job_finished(0, 2, 8) is None

    # job 1: turnaround 6, wait 2, response 0 / job 2: turnaround 7, wait 3, response 1
    assert engine.average_waiting_time() == 2.5
    assert engine.average_turnaround_time() == 6.5
    assert engine.average_response_time() == 0.5


def test_rotated_job_goes_to_the_tail(make_engine):
    engine = make_engine("rr", cores=1)
    engine.new_job(1, 0, 9, 0)
    engine.new_job(2, 1, 9, 0)
    engine.new_job(3, 2, 9, 0)

    assert engine.quantum_expired(0, 3) == 2
    assert engine.show_queue() == "2(0) 3(-1) 1(-1)"


def test_quantum_with_empty_queue_keeps_job_running(make_engine):
    engine = make_engine("rr", cores=2)
    engine.new_job(1, 0, 9, 0)

    assert engine.quantum_expired(0, 2) is None
    assert engine.running_jobs() == {0: 1}


def test_quantum_on_idle_core_is_a_no_op(make_engine):
    engine = make_engine("rr", cores=2)
    engine.new_job(1, 0, 9, 0)
    assert engine.quantum_expired(1, 2) is None


def test_arrival_never_preempts_under_rr(make_engine):
    engine = make_engine("rr", cores=1)
    engine.new_job(1, 0, 9, 0)
    assert engine.new_job(2, 1, 1, 0) is None
