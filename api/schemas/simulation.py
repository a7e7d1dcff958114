"""
Pydantic schemas for POST /simulations.

SimulationRequest: a workload plus run parameters.
SimulationResponse: the SimulationReport produced by the driver.
"""

from typing import Optional

from pydantic import BaseModel, Field

from config.settings import settings
from models.enums import SchedulingPolicy


class SimulationJob(BaseModel):
    arrival_time: int = Field(..., ge=0)
    burst_time: int = Field(..., ge=1)
    priority: int = 0


class SimulationRequest(BaseModel):
    cores: int = Field(default=settings.DEFAULT_CORE_COUNT, ge=1, le=1024)
    policy: SchedulingPolicy = SchedulingPolicy(settings.DEFAULT_SCHEDULING_POLICY)
    time_quantum: Optional[int] = Field(default=None, ge=1)
    jobs: list[SimulationJob] = Field(..., min_length=1)


class Dispatch(BaseModel):
    time: int
    core_id: int
    job_id: int
    reason: str


class JobResult(BaseModel):
    job_id: int
    arrival_time: int
    burst_time: int
    priority: int
    start_time: Optional[int] = None
    finish_time: Optional[int] = None


class SimulationResponse(BaseModel):
    policy: SchedulingPolicy
    cores: int
    time_quantum: Optional[int] = None
    avg_waiting_time: float
    avg_turnaround_time: float
    avg_response_time: float
    completed_jobs: int
    makespan: int
    jobs: list[JobResult]
    dispatches: list[Dispatch]
