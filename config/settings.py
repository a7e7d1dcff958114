"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., LOG_LEVEL env var → Settings.LOG_LEVEL)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
The scheduler engine itself takes everything as arguments; only the
simulator, the API and the benchmark read defaults from here.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_SCHEDULING_POLICY: str = "fcfs"
    DEFAULT_CORE_COUNT: int = 1
    # Time units per Round Robin slice. Only the simulation driver uses it to
    # decide when to fire quantum_expired; the engine never looks at it.
    ROUND_ROBIN_TIME_QUANTUM: int = 2

    # ── API ─────────────────────────────────────────────────────
    MAX_SESSIONS: int = 64             # live engine sessions held in memory
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # ── App ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton: import this everywhere
settings = Settings()
