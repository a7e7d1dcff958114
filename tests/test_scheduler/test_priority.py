"""
Tests for the PRI and PPRI policies.

Both dequeue jobs with the LOWEST priority number first (0 = most urgent).
Ties are broken by arrival time. PPRI additionally lets a more urgent
arrival take a core from the least urgent running job.
"""

from models.job import Job
from scheduler.priority import PreemptivePriorityPolicy, PriorityPolicy
from scheduler.ready_queue import ReadyQueue


def _make_job(job_id: int, arrival: int, priority: int) -> Job:
    return Job(id=job_id, arrival_time=arrival, burst_time=5, priority=priority)


def test_dequeues_highest_priority_first():
    """Core guarantee: lowest priority NUMBER = highest urgency = dequeued first."""
    queue = ReadyQueue(PriorityPolicy().compare)
    queue.offer(_make_job(1, 0, 10))
    queue.offer(_make_job(2, 1, 1))
    queue.offer(_make_job(3, 2, 5))

    assert queue.poll().id == 2
    assert queue.poll().id == 3
    assert queue.poll().id == 1


def test_same_priority_earlier_arrival_first():
    queue = ReadyQueue(PriorityPolicy().compare)
    queue.offer(_make_job(2, 7, 3))
    queue.offer(_make_job(1, 4, 3))

    assert [queue.poll().id for _ in range(2)] == [1, 2]


def test_ppri_shares_the_ordering():
    a, b = _make_job(1, 0, 4), _make_job(2, 1, 2)
    assert PriorityPolicy().compare(a, b) == PreemptivePriorityPolicy().compare(a, b) > 0


def test_flags_and_names():
    assert PriorityPolicy().preemptive is False
    assert PreemptivePriorityPolicy().preemptive is True
    assert PriorityPolicy().policy_name == "pri"
    assert PreemptivePriorityPolicy().policy_name == "ppri"


def test_pri_show_queue_lists_running_and_waiting_jobs(make_engine):
    engine = make_engine("pri", cores=1)

    assert engine.new_job(4, 0, 10, 3) == 0
    assert engine.new_job(2, 1, 5, 1) is None  # more urgent, but PRI never preempts
    assert engine.new_job(1, 2, 5, 7) is None

    assert engine.show_queue() == "2(-1) 4(0) 1(-1)"
    assert engine.job_finished(0, 4, 10) == 2


def test_ppri_more_urgent_arrival_preempts(make_engine):
    engine = make_engine("ppri", cores=1)

    assert engine.new_job(1, 0, 5, 3) == 0
    assert engine.new_job(2, 1, 2, 2) == 0
    assert engine.get_job(1).remaining_time == 4
    assert engine.new_job(3, 2, 2, 1) == 0

    assert engine.job_finished(0, 3, 4) == 2
    assert engine.job_finished(0, 2, 5) == 1
    assert engine.job_finished(0, 1, 9) is None

    # job 1: wait 4, job 2: wait 2, job 3: wait 0; all started on arrival
    assert engine.average_waiting_time() == 2.0
    assert engine.average_turnaround_time() == 5.0
    assert engine.average_response_time() == 0.0


def test_ppri_less_urgent_arrival_waits(make_engine):
    engine = make_engine("ppri", cores=1)
    engine.new_job(1, 0, 5, 2)
    assert engine.new_job(2, 1, 5, 2) is None  # tie on priority, later arrival loses
    assert engine.new_job(3, 2, 5, 6) is None
    assert engine.running_jobs() == {0: 1}
