import json

from simulator.main import main


def test_generated_workload_all_policies(capsys):
    assert main(["--generate", "12", "--seed", "3", "--policy", "all", "--cores", "2"]) == 0

    out = capsys.readouterr().out
    assert "=== 12 jobs on 2 core(s) ===" in out
    for policy in ("fcfs", "sjf", "psjf", "pri", "ppri", "rr"):
        assert f"\n{policy} " in out


def test_workload_file_json_output(tmp_path, capsys):
    path = tmp_path / "jobs.txt"
    path.write_text("# a b p\n0 4 0\n1 4 0\n")

    assert main(["--workload", str(path), "--policy", "rr", "--quantum", "2", "--json"]) == 0

    reports = json.loads(capsys.readouterr().out)
    assert len(reports) == 1
    assert reports[0]["policy"] == "rr"
    assert reports[0]["time_quantum"] == 2
    assert reports[0]["avg_waiting_time"] == 2.5
    assert reports[0]["makespan"] == 8


def test_missing_workload_file(tmp_path):
    assert main(["--workload", str(tmp_path / "missing.txt")]) == 2


def test_malformed_workload_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("0 4\n")
    assert main(["--workload", str(path)]) == 2


def test_cores_must_be_positive():
    assert main(["--generate", "3", "--cores", "0"]) == 2


def test_quantum_must_be_positive():
    assert main(["--generate", "5", "--policy", "rr", "--quantum", "-1"]) == 2
    assert main(["--generate", "5", "--policy", "rr", "--quantum", "0"]) == 2
