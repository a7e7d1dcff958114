"""
Scheduler-specific exceptions.

Every one of these is a contract violation by the caller driving the engine
(wrong ids, calls out of order, time running backwards). The engine raises
instead of guessing, so a broken driver fails loudly rather than corrupting
the core table or the statistics.

Expected "nothing to do" outcomes (no idle core, empty ready queue, a quantum
tick outside Round Robin) are NOT errors: operations return None for those.
"""


class SchedulerError(Exception):
    """Base exception for all scheduler errors."""
    pass


class SchedulerStateError(SchedulerError):
    """
    Raised when an operation is not legal in the engine's current state.

    Examples:
    - new_job before start_up, or after clean_up
    - start_up called a second time
    - recording statistics for the same job twice
    - assigning a job to a core that is already busy
    """
    pass


class JobNotFoundError(SchedulerError):
    """Raised when a job id is not in the engine's job table."""

    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(f"Job not found: {job_id}")


class DuplicateJobError(SchedulerError):
    """Raised when new_job reuses an id that is outstanding or already finished."""

    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(f"Job id already in use: {job_id}")


class InvalidCoreError(SchedulerError):
    """Raised when a core id is outside 0..core_count-1."""

    def __init__(self, core_id: int, core_count: int):
        self.core_id = core_id
        self.core_count = core_count
        super().__init__(f"Core {core_id} does not exist (cores: 0..{core_count - 1})")


class JobCoreMismatchError(SchedulerError):
    """Raised when job_finished names a job that the core is not running."""

    def __init__(self, core_id: int, job_id: int, running_job_id=None):
        self.core_id = core_id
        self.job_id = job_id
        self.running_job_id = running_job_id
        running = "idle" if running_job_id is None else f"running job {running_job_id}"
        super().__init__(f"Core {core_id} is {running}, not job {job_id}")


class TimeOrderError(SchedulerError):
    """Raised when event time goes backwards or two jobs arrive at the same time."""

    def __init__(self, time: int, last_time: int, reason: str = "time went backwards"):
        self.time = time
        self.last_time = last_time
        super().__init__(f"{reason}: t={time} after t={last_time}")
