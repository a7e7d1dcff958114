"""
Health check endpoint.

This is the first thing you hit to verify the service is running.
There is no database or broker behind the API, so "healthy" just means the
app is up; the live session count is reported alongside.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_session_store
from api.session_store import SessionStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    store: SessionStore = Depends(get_session_store),
) -> dict:
    return {"status": "healthy", "sessions": len(store)}
