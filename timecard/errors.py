"""Typed errors raised while computing timecards.

Every error carries a machine-readable ``code`` plus the offending value, so
callers can branch on type and report without parsing messages::

    TimecardError
    +-- JobNotFoundError
    +-- InvalidTimestampError
    +-- EmptyTimepunchListError
    +-- DatasetError
"""

from __future__ import annotations

from typing import Any


class TimecardError(Exception):
    code: str = "TIMECARD_ERROR"


class JobNotFoundError(TimecardError):
    code = "JOB_NOT_FOUND"

    def __init__(self, job_name: str):
        self.job_name = job_name
        super().__init__(f'Could not find the job "{job_name}" in the list of jobs available.')


class InvalidTimestampError(TimecardError):
    code = "INVALID_TIMESTAMP"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid timepunch timestamp: {value!r}")


class EmptyTimepunchListError(TimecardError):
    code = "EMPTY_TIMEPUNCH_LIST"

    def __init__(self, employee: str):
        self.employee = employee
        super().__init__(f"Employee {employee} has no timepunches to calculate")


class DatasetError(TimecardError):
    code = "INVALID_DATASET"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid timecard dataset: {detail}")
