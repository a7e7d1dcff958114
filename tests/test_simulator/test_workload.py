import pytest

from simulator.workload import (
    WorkloadError,
    WorkloadJob,
    format_workload,
    generate_workload,
    load_workload,
    parse_workload,
    validate_workload,
)


def test_parse_whitespace_and_commas():
    jobs = parse_workload([
        "# arrival burst priority",
        "0  8  1",
        "",
        "2, 9, 3   # trailing comment",
        "1\t4\t2",
    ])

    # ids follow file order, the result is sorted by arrival
    assert jobs == [
        WorkloadJob(0, 0, 8, 1),
        WorkloadJob(2, 1, 4, 2),
        WorkloadJob(1, 2, 9, 3),
    ]


@pytest.mark.parametrize("line", ["0 8", "0 8 1 4", "0 x 1"])
def test_parse_rejects_malformed_lines(line):
    with pytest.raises(WorkloadError, match="line 1"):
        parse_workload([line])


def test_duplicate_arrival_times_are_rejected():
    with pytest.raises(WorkloadError, match="both arrive at t=3"):
        parse_workload(["3 1 0", "3 2 0"])


def test_validate_rejects_bad_jobs():
    with pytest.raises(WorkloadError):
        validate_workload([WorkloadJob(0, -1, 5, 0)])
    with pytest.raises(WorkloadError):
        validate_workload([WorkloadJob(0, 0, 0, 0)])
    with pytest.raises(WorkloadError, match="duplicate job id"):
        validate_workload([WorkloadJob(7, 0, 1, 0), WorkloadJob(7, 1, 1, 0)])


def test_workload_error_is_a_value_error():
    assert issubclass(WorkloadError, ValueError)


def test_load_workload_from_file(tmp_path):
    path = tmp_path / "jobs.txt"
    path.write_text("0 3 1\n4 2 0\n")

    jobs = load_workload(path)
    assert [(j.arrival_time, j.burst_time, j.priority) for j in jobs] == [(0, 3, 1), (4, 2, 0)]


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_workload(tmp_path / "nope.txt")


def test_format_can_be_read_back():
    jobs = generate_workload(num_jobs=5, seed=3)
    assert parse_workload(format_workload(jobs).splitlines()) == jobs


def test_generate_is_deterministic():
    assert generate_workload(num_jobs=30, seed=11) == generate_workload(num_jobs=30, seed=11)
    assert generate_workload(num_jobs=30, seed=11) != generate_workload(num_jobs=30, seed=12)


def test_generated_jobs_satisfy_engine_preconditions():
    jobs = generate_workload(num_jobs=200, seed=5, max_burst=6, max_priority=3)

    arrivals = [j.arrival_time for j in jobs]
    assert arrivals == sorted(set(arrivals))
    assert arrivals[0] == 0
    assert all(1 <= j.burst_time <= 6 for j in jobs)
    assert all(0 <= j.priority <= 3 for j in jobs)
    assert validate_workload(jobs) == jobs
