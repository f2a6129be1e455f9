from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .errors import DatasetError
from .jobs import JobRateTable
from .models import Employee, Job, Timepunch


@dataclass
class Dataset:
    jobs: List[Job] = field(default_factory=list)
    employees: List[Employee] = field(default_factory=list)

    def rate_table(self) -> JobRateTable:
        return JobRateTable.from_jobs(self.jobs)

    def find_employee(self, name: str) -> Employee | None:
        for employee in self.employees:
            if employee.name == name:
                return employee
        return None


def load_dataset(path: Path) -> Dataset:
    """Read jobs and employee timepunches from a JSON file.

    The file holds ``jobMeta`` (``job``, ``rate``, ``benefitsRate``) and
    ``employeeData`` (``employee`` plus a ``timePunch`` list of ``job``,
    ``start`` and ``end``).
    """
    if not path.exists():
        raise FileNotFoundError(f"Timecard dataset not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            content = json.load(handle)
        except json.JSONDecodeError as exc:
            raise DatasetError(f"{path} is not valid JSON ({exc.msg})") from exc
        except UnicodeDecodeError as exc:
            raise DatasetError(f"{path} is not UTF-8 encoded ({exc.reason})") from exc
    return parse_dataset(content)


def parse_dataset(content: Dict[str, Any]) -> Dataset:
    if not isinstance(content, dict):
        raise DatasetError("top level must be an object")
    return Dataset(
        jobs=[_deserialize_job(j) for j in _records(content, "jobMeta")],
        employees=[_deserialize_employee(e) for e in _records(content, "employeeData")],
    )


def _records(content: Dict[str, Any], key: str) -> List[Any]:
    records = content.get(key)
    if records is None:
        return []
    if not isinstance(records, list):
        raise DatasetError(f"{key} must be a list, got {type(records).__name__}")
    return records


def _deserialize_job(data: Dict[str, Any]) -> Job:
    try:
        return Job(name=data["job"], wage_rate=float(data["rate"]), benefit_rate=float(data["benefitsRate"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise DatasetError(f"job record {data!r} is malformed") from exc


def _deserialize_employee(data: Dict[str, Any]) -> Employee:
    try:
        name = data["employee"]
        punches = data.get("timePunch", [])
        return Employee(name=name, timepunches=[_deserialize_timepunch(p) for p in punches])
    except (KeyError, TypeError, AttributeError) as exc:
        raise DatasetError(f"employee record {data!r} is malformed") from exc


def _deserialize_timepunch(data: Dict[str, Any]) -> Timepunch:
    return Timepunch(job=data["job"], start=data["start"], end=data["end"])
