"""
In-memory registry of live scheduler sessions.

Each session is one SchedulerEngine: one simulated run with its own cores,
policy, ready queue and statistics. Clients drive it over HTTP exactly the
way a simulator drives the engine in-process.

Thread safety:
- The store's own dict is guarded by a lock (FastAPI may run handlers
  concurrently)
- Each engine serializes its operations with its own lock, so two clients
  hitting the same session cannot interleave inside an engine call
"""

import logging
import threading
import uuid
from typing import Optional

from models.enums import SchedulingPolicy
from scheduler.engine import SchedulerEngine

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    def __init__(self, session_id: uuid.UUID):
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class SessionLimitError(RuntimeError):
    pass


class SessionStore:

    def __init__(self, max_sessions: int):
        self._max_sessions = max_sessions
        self._sessions: dict[uuid.UUID, SchedulerEngine] = {}
        self._lock = threading.Lock()

    def create(
        self,
        cores: int,
        policy: SchedulingPolicy,
        time_quantum: Optional[int] = None,
    ) -> tuple[uuid.UUID, SchedulerEngine]:
        """start_up a fresh engine and register it under a new id."""
        policy_kwargs = {}
        if policy == SchedulingPolicy.RR and time_quantum is not None:
            policy_kwargs["time_quantum"] = time_quantum

        with self._lock:
            if len(self._sessions) >= self._max_sessions:
                raise SessionLimitError(
                    f"Session limit reached ({self._max_sessions}); delete a session first"
                )
            engine = SchedulerEngine()
            engine.start_up(cores, policy, **policy_kwargs)
            session_id = uuid.uuid4()
            self._sessions[session_id] = engine

        logger.info(f"Session {session_id} created ({cores} cores, {policy.value})")
        return session_id, engine

    def get(self, session_id: uuid.UUID) -> SchedulerEngine:
        with self._lock:
            engine = self._sessions.get(session_id)
        if engine is None:
            raise SessionNotFoundError(session_id)
        return engine

    def close(self, session_id: uuid.UUID) -> None:
        """clean_up the engine and forget the session."""
        with self._lock:
            engine = self._sessions.pop(session_id, None)
        if engine is None:
            raise SessionNotFoundError(session_id)
        engine.clean_up()
        logger.info(f"Session {session_id} closed")

    def close_all(self) -> None:
        with self._lock:
            engines = list(self._sessions.values())
            self._sessions.clear()
        for engine in engines:
            engine.clean_up()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
