"""
Scheduler session endpoints.

POST   /sessions                              → start_up a new engine
GET    /sessions/{id}                         → session summary
POST   /sessions/{id}/jobs                    → new_job
POST   /sessions/{id}/cores/{core_id}/finish  → job_finished
POST   /sessions/{id}/cores/{core_id}/quantum → quantum_expired
GET    /sessions/{id}/queue                   → show_queue
GET    /sessions/{id}/stats                   → average waiting/turnaround/response
DELETE /sessions/{id}                         → clean_up

The API layer is intentionally thin: validate input, call the engine,
return what it answered. Contract violations raised by the engine
(unknown job, wrong core, time going backwards) are turned into 404/409
responses by the exception handlers registered in api/main.py.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_engine, get_session_store
from api.schemas.session import (
    CoreAssignment,
    JobArrival,
    JobCompletion,
    NextJob,
    QuantumTick,
    QueueEntry,
    QueueListing,
    SessionCreate,
    SessionResponse,
    SessionStats,
)
from api.session_store import SessionLimitError, SessionNotFoundError, SessionStore
from scheduler.engine import SchedulerEngine

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _summary(session_id: UUID, engine: SchedulerEngine) -> SessionResponse:
    return SessionResponse(
        session_id=session_id,
        cores=engine.core_count,
        policy=engine.policy_name,
        time_quantum=getattr(engine.policy, "time_quantum", None),
        outstanding_jobs=engine.job_count,
    )


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(
    body: SessionCreate,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    """Create an engine and call start_up(cores, policy) on it."""
    try:
        session_id, engine = store.create(body.cores, body.policy, body.time_quantum)
    except SessionLimitError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _summary(session_id, engine)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: UUID,
    engine: SchedulerEngine = Depends(get_engine),
) -> SessionResponse:
    return _summary(session_id, engine)


@router.post("/{session_id}/jobs", response_model=CoreAssignment)
async def submit_job(
    body: JobArrival,
    engine: SchedulerEngine = Depends(get_engine),
) -> CoreAssignment:
    """A job arrives. core_id is null when nothing changes on any core."""
    core_id = engine.new_job(body.job_id, body.time, body.burst_time, body.priority)
    return CoreAssignment(core_id=core_id)


@router.post("/{session_id}/cores/{core_id}/finish", response_model=NextJob)
async def finish_job(
    core_id: int,
    body: JobCompletion,
    engine: SchedulerEngine = Depends(get_engine),
) -> NextJob:
    """The job on core_id completed. job_id is the job that takes the core next, if any."""
    return NextJob(job_id=engine.job_finished(core_id, body.job_id, body.time))


@router.post("/{session_id}/cores/{core_id}/quantum", response_model=NextJob)
async def expire_quantum(
    core_id: int,
    body: QuantumTick,
    engine: SchedulerEngine = Depends(get_engine),
) -> NextJob:
    """The quantum on core_id ran out. Only Round Robin sessions ever rotate."""
    return NextJob(job_id=engine.quantum_expired(core_id, body.time))


@router.get("/{session_id}/queue", response_model=QueueListing)
async def show_queue(
    engine: SchedulerEngine = Depends(get_engine),
) -> QueueListing:
    entries = engine.queue_entries()
    return QueueListing(
        listing=engine.show_queue(),
        entries=[QueueEntry(job_id=job_id, core_id=core_id) for job_id, core_id in entries],
        running=engine.running_jobs(),
    )


@router.get("/{session_id}/stats", response_model=SessionStats)
async def get_stats(
    engine: SchedulerEngine = Depends(get_engine),
) -> SessionStats:
    return SessionStats(
        completed_jobs=engine.stats.completed_job_count,
        avg_waiting_time=engine.average_waiting_time(),
        avg_turnaround_time=engine.average_turnaround_time(),
        avg_response_time=engine.average_response_time(),
    )


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: UUID,
    store: SessionStore = Depends(get_session_store),
) -> None:
    """clean_up the engine and drop the session. Read /stats first if you need them."""
    try:
        store.close(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
