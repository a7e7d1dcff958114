"""
Pydantic schemas for the /sessions endpoints.

These define the HTTP contract around the engine's call surface:
- SessionCreate: start_up arguments
- JobArrival / JobCompletion / QuantumTick: one event each
- CoreAssignment / NextJob: what the engine answered (None = no change)
- QueueListing / SessionStats: inspection and statistics

FastAPI validates incoming data against these automatically.
If someone sends cores=0, FastAPI returns a 422 error before the engine sees it.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from config.settings import settings
from models.enums import SchedulingPolicy


class SessionCreate(BaseModel):
    """Request body for POST /sessions."""

    cores: int = Field(default=settings.DEFAULT_CORE_COUNT, ge=1, le=1024)
    policy: SchedulingPolicy = Field(
        default=SchedulingPolicy(settings.DEFAULT_SCHEDULING_POLICY),
        description="fcfs, sjf, psjf, pri, ppri or rr",
    )
    time_quantum: Optional[int] = Field(
        default=None,
        ge=1,
        description="Round Robin slice length; informational, the caller times quantum events",
    )


class SessionResponse(BaseModel):
    session_id: UUID
    cores: int
    policy: SchedulingPolicy
    time_quantum: Optional[int] = None
    outstanding_jobs: int


class JobArrival(BaseModel):
    """Request body for POST /sessions/{id}/jobs."""

    job_id: int = Field(..., ge=0)
    time: int = Field(..., ge=0)
    burst_time: int = Field(..., ge=1)
    priority: int = Field(default=0, description="Lower value = more urgent")


class JobCompletion(BaseModel):
    """Request body for POST /sessions/{id}/cores/{core_id}/finish."""

    job_id: int = Field(..., ge=0)
    time: int = Field(..., ge=0)


class QuantumTick(BaseModel):
    """Request body for POST /sessions/{id}/cores/{core_id}/quantum."""

    time: int = Field(..., ge=0)


class CoreAssignment(BaseModel):
    core_id: Optional[int] = None  # core the new job now runs on, None = queued


class NextJob(BaseModel):
    job_id: Optional[int] = None  # job that now runs on the core, None = idle / unchanged


class QueueEntry(BaseModel):
    job_id: int
    core_id: int  # -1 while waiting


class QueueListing(BaseModel):
    listing: str
    entries: list[QueueEntry]
    running: dict[int, int]  # core_id -> job_id


class SessionStats(BaseModel):
    completed_jobs: int
    avg_waiting_time: float
    avg_turnaround_time: float
    avg_response_time: float
