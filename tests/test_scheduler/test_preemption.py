"""
Victim selection on multi-core machines.

When every core is busy, a preemptive arrival displaces the running job the
policy ranks worst, provided the newcomer strictly outranks it.
"""

from models.enums import JobState


def test_ppri_evicts_least_urgent_running_job(make_engine):
    engine = make_engine("ppri", cores=2)
    engine.new_job(1, 0, 10, 3)
    engine.new_job(2, 1, 10, 5)

    assert engine.new_job(3, 2, 10, 1) == 1
    assert engine.running_jobs() == {0: 1, 1: 3}
    assert engine.get_job(2).state == JobState.WAITING
    assert engine.get_job(2).remaining_time == 9


def test_ppri_only_beats_jobs_it_outranks(make_engine):
    engine = make_engine("ppri", cores=2)
    engine.new_job(1, 0, 10, 1)
    engine.new_job(2, 1, 10, 5)

    # priority 3 beats job 2 (5) but not job 1 (1)
    assert engine.new_job(3, 2, 10, 3) == 1
    # priority 4 now beats nobody running
    assert engine.new_job(4, 3, 10, 4) is None


def test_psjf_compares_up_to_date_remaining_times(make_engine):
    engine = make_engine("psjf", cores=2)
    engine.new_job(1, 0, 10, 0)
    engine.new_job(2, 1, 2, 0)

    # at t=2: job 1 has 8 left, job 2 has 1 left
    assert engine.new_job(3, 2, 5, 0) == 0
    assert engine.get_job(1).remaining_time == 8
    assert engine.get_job(2).remaining_time == 1


def test_preempted_job_resumes_with_its_original_start_time(make_engine):
    engine = make_engine("psjf", cores=1)
    engine.new_job(1, 0, 6, 0)
    engine.new_job(2, 2, 1, 0)

    assert engine.job_finished(0, 2, 3) == 1
    job = engine.get_job(1)
    assert job.start_time == 0
    assert job.remaining_time == 4
    assert engine.job_finished(0, 1, 7) is None

    # job 1: turnaround 7, wait 1 / job 2: turnaround 1, wait 0
    assert engine.average_waiting_time() == 0.5
    assert engine.average_response_time() == 0.0


def test_non_preemptive_policies_never_evict(make_engine):
    for policy in ("fcfs", "sjf", "pri", "rr"):
        engine = make_engine(policy, cores=1)
        engine.new_job(1, 0, 50, 9)
        assert engine.new_job(2, 1, 1, 0) is None, policy
        assert engine.running_jobs() == {0: 1}
