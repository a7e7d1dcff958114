"""
Scheduling statistics, accumulated as jobs finish.

Per job, at completion:
    turnaround = finish_time - arrival_time
    waiting    = turnaround - burst_time
    response   = start_time - arrival_time

Averages divide by the number of completed jobs and fall back to 0.0 when
nothing ever completed.
"""

import logging

from models.job import Job
from scheduler.errors import SchedulerStateError

logger = logging.getLogger(__name__)


class SchedulerStats:

    def __init__(self):
        self.total_waiting_time = 0
        self.total_turnaround_time = 0
        self.total_response_time = 0
        self.completed_job_count = 0
        self._recorded: set[int] = set()

    def record(self, job: Job) -> None:
        """Fold a finished job into the running totals. Each job counts once."""
        if job.id in self._recorded:
            raise SchedulerStateError(f"Statistics for job {job.id} already recorded")
        if job.finish_time is None or job.start_time is None:
            raise SchedulerStateError(f"Job {job.id} has not run to completion")

        turnaround = job.finish_time - job.arrival_time
        waiting = turnaround - job.burst_time
        response = job.start_time - job.arrival_time

        self.total_turnaround_time += turnaround
        self.total_waiting_time += waiting
        self.total_response_time += response
        self.completed_job_count += 1
        self._recorded.add(job.id)

        logger.debug(
            f"Job {job.id} stats: waiting={waiting} turnaround={turnaround} response={response}"
        )

    def _average(self, total: int) -> float:
        if self.completed_job_count == 0:
            return 0.0
        return total / self.completed_job_count

    def average_waiting_time(self) -> float:
        return self._average(self.total_waiting_time)

    def average_turnaround_time(self) -> float:
        return self._average(self.total_turnaround_time)

    def average_response_time(self) -> float:
        return self._average(self.total_response_time)

    def as_dict(self) -> dict:
        return {
            "completed_jobs": self.completed_job_count,
            "avg_waiting_time": self.average_waiting_time(),
            "avg_turnaround_time": self.average_turnaround_time(),
            "avg_response_time": self.average_response_time(),
        }
