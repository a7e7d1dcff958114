"""
FastAPI dependency injection.

How this works:
- An endpoint declares `engine: SchedulerEngine = Depends(get_engine)`
- FastAPI resolves the session id from the path, looks the engine up and
  hands it to the endpoint
- Unknown sessions turn into a 404 before the endpoint body runs

This avoids repeating the lookup-or-404 dance in every endpoint.
"""

from uuid import UUID

from fastapi import Depends, HTTPException, Request

from api.session_store import SessionNotFoundError, SessionStore
from scheduler.engine import SchedulerEngine


def get_session_store(request: Request) -> SessionStore:
    """Returns the session store created on the app during startup."""
    return request.app.state.sessions


def get_engine(
    session_id: UUID,
    store: SessionStore = Depends(get_session_store),
) -> SchedulerEngine:
    try:
        return store.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
