import pytest

from models.enums import CoreStatus, JobState
from models.job import Job
from scheduler.cores import CoreTable
from scheduler.errors import InvalidCoreError, SchedulerStateError


def _make_job(job_id: int = 1) -> Job:
    return Job(id=job_id, arrival_time=0, burst_time=5, priority=0)


def test_all_cores_start_idle():
    table = CoreTable(3)
    assert len(table) == 3
    assert table.idle_count() == 3
    assert table.first_idle() == 0
    assert table.get(2).status == CoreStatus.IDLE


@pytest.mark.parametrize("count", [0, -1])
def test_needs_at_least_one_core(count):
    with pytest.raises(ValueError):
        CoreTable(count)


def test_get_rejects_unknown_core():
    table = CoreTable(2)
    with pytest.raises(InvalidCoreError):
        table.get(2)
    with pytest.raises(InvalidCoreError):
        table.get(-1)


def test_assign_marks_job_running():
    table = CoreTable(2)
    job = _make_job()
    table.assign(0, job, time=3)

    assert job.state == JobState.RUNNING
    assert job.assigned_core == 0
    assert job.start_time == 3
    assert job.last_resumed_at == 3
    assert table.first_idle() == 1
    assert table.get(0).status == CoreStatus.BUSY


def test_reassign_keeps_first_start_time():
    table = CoreTable(1)
    job = _make_job()
    table.assign(0, job, time=1)
    table.release(0)
    table.assign(0, job, time=6)
    assert job.start_time == 1
    assert job.last_resumed_at == 6


def test_assign_to_busy_core_raises():
    table = CoreTable(1)
    table.assign(0, _make_job(1), time=0)
    with pytest.raises(SchedulerStateError):
        table.assign(0, _make_job(2), time=1)


def test_release():
    table = CoreTable(1)
    job = _make_job()
    table.assign(0, job, time=0)

    assert table.release(0) is job
    assert job.assigned_core is None
    assert table.first_idle() == 0
    with pytest.raises(SchedulerStateError):
        table.release(0)


def test_busy_and_clear():
    table = CoreTable(3)
    a, b = _make_job(1), _make_job(2)
    table.assign(0, a, time=0)
    table.assign(2, b, time=0)

    assert [(core_id, job.id) for core_id, job in table.busy()] == [(0, 1), (2, 2)]
    table.clear()
    assert table.idle_count() == 3
    assert a.assigned_core is None
