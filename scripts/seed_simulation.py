"""
Seed script: drives a scheduler session over HTTP and runs a simulation.

Usage:
    python -m scripts.seed_simulation

This:
- Opens a 2-core PSJF session and feeds it a few events by hand,
  printing what the engine answered for each
- Posts a generated workload to /simulations under every policy and
  prints the averages side by side

Run this after `uvicorn api.main:app` to see the API end to end.
"""

import httpx

from config.settings import settings
from models.enums import SchedulingPolicy
from simulator.workload import generate_workload

BASE_URL = f"http://localhost:{settings.API_PORT}"


def drive_session(client: httpx.Client) -> None:
    resp = client.post("/sessions", json={"cores": 2, "policy": "psjf"})
    resp.raise_for_status()
    session_id = resp.json()["session_id"]
    print(f"Session {session_id[:8]}... (2 cores, psjf)\n")

    arrivals = [
        {"job_id": 1, "time": 0, "burst_time": 10, "priority": 0},
        {"job_id": 2, "time": 1, "burst_time": 8, "priority": 0},
        {"job_id": 3, "time": 2, "burst_time": 2, "priority": 0},  # preempts job 1
    ]
    for arrival in arrivals:
        resp = client.post(f"/sessions/{session_id}/jobs", json=arrival)
        resp.raise_for_status()
        print(f"  t={arrival['time']:<3} job {arrival['job_id']} → core {resp.json()['core_id']}")

    resp = client.post(f"/sessions/{session_id}/cores/0/finish", json={"job_id": 3, "time": 4})
    resp.raise_for_status()
    print(f"  t=4   job 3 finished on core 0 → next job {resp.json()['job_id']}")

    print(f"  queue: {client.get(f'/sessions/{session_id}/queue').json()['listing']}")
    client.delete(f"/sessions/{session_id}").raise_for_status()


def compare_policies(client: httpx.Client) -> None:
    jobs = [
        {"arrival_time": j.arrival_time, "burst_time": j.burst_time, "priority": j.priority}
        for j in generate_workload(num_jobs=25, seed=7)
    ]
    print(f"\nSimulating {len(jobs)} jobs on 2 cores:\n")
    print("{:<8} {:>10} {:>12} {:>10}".format("Policy", "Waiting", "Turnaround", "Response"))
    for policy in SchedulingPolicy:
        resp = client.post("/simulations", json={"cores": 2, "policy": policy.value, "jobs": jobs})
        resp.raise_for_status()
        data = resp.json()
        print("{:<8} {:>10.2f} {:>12.2f} {:>10.2f}".format(
            policy.value, data["avg_waiting_time"], data["avg_turnaround_time"], data["avg_response_time"]
        ))


def seed():
    client = httpx.Client(base_url=BASE_URL, timeout=10.0)
    drive_session(client)
    compare_policies(client)
    print(f"\nDone! Try:  curl {BASE_URL}/health")


if __name__ == "__main__":
    seed()
