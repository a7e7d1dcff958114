"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Runs startup logic (create the in-memory session store)
3. Registers all routers (sessions, simulations, health)
4. Maps scheduler contract violations to HTTP errors
5. Runs shutdown logic (clean_up every live session)

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from api.routers import health, sessions, simulations
from api.session_store import SessionStore
from scheduler.errors import InvalidCoreError, JobNotFoundError, SchedulerError

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── Startup ─────────────────────────────────────────────────
    app.state.sessions = SessionStore(max_sessions=settings.MAX_SESSIONS)
    logger.info(f"API ready, default policy: {settings.DEFAULT_SCHEDULING_POLICY}")

    yield  # app is running and serving requests between startup and shutdown

    # ── Shutdown ────────────────────────────────────────────────
    app.state.sessions.close_all()
    logger.info("API shut down")


async def scheduler_error_handler(request: Request, exc: SchedulerError) -> JSONResponse:
    """
    The engine raises on contract violations instead of guessing.
    Unknown jobs/cores are 404, everything else (wrong order, wrong core
    for the job, time going backwards) is a 409 conflict with engine state.
    """
    status = 404 if isinstance(exc, (JobNotFoundError, InvalidCoreError)) else 409
    logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=status, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Multi-core Scheduler",
        description="CPU scheduling engine sessions and simulations (FCFS, SJF, PSJF, PRI, PPRI, RR)",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(SchedulerError, scheduler_error_handler)

    # Register routers; each one adds its endpoints to the app
    app.include_router(health.router)
    app.include_router(sessions.router)
    app.include_router(simulations.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
