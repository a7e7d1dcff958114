"""
One-shot simulation endpoint.

POST /simulations → run a whole workload through a fresh engine and return
the report (averages, per-job start/finish, every dispatch decision).

Handy for comparing policies without driving a session event by event:
post the same jobs with policy=fcfs, then policy=psjf, and diff the results.
"""

from fastapi import APIRouter, HTTPException

from api.schemas.simulation import SimulationRequest, SimulationResponse
from simulator.runner import run_simulation
from simulator.workload import WorkloadError, WorkloadJob

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.post("", response_model=SimulationResponse)
async def simulate(body: SimulationRequest) -> SimulationResponse:
    workload = [
        WorkloadJob(job_id=i, arrival_time=j.arrival_time, burst_time=j.burst_time, priority=j.priority)
        for i, j in enumerate(body.jobs)
    ]
    try:
        report = run_simulation(workload, body.policy, cores=body.cores, time_quantum=body.time_quantum)
    except WorkloadError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return SimulationResponse(**report.as_dict())
