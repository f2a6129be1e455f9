from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .errors import JobNotFoundError
from .models import Job


class JobRateTable:
    """Wage and benefit rates keyed by job name, built once per run."""

    def __init__(self, jobs: Dict[str, Job]):
        self._jobs = dict(jobs)

    @classmethod
    def from_jobs(cls, jobs: Iterable[Job]) -> "JobRateTable":
        return cls({job.name: job for job in jobs})

    def rates_for(self, job_name: str) -> Tuple[float, float]:
        job = self._jobs.get(job_name)
        # A legitimate rate is always positive; zero, negative and NaN rates are misses.
        if job is None or not (job.wage_rate > 0 and job.benefit_rate > 0):
            raise JobNotFoundError(job_name)
        return job.wage_rate, job.benefit_rate

    def names(self) -> List[str]:
        return sorted(self._jobs)

    def jobs(self) -> List[Job]:
        return [self._jobs[name] for name in self.names()]

    def __contains__(self, job_name: object) -> bool:
        return job_name in self._jobs

    def __len__(self) -> int:
        return len(self._jobs)
