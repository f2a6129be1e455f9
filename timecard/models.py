from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Union

Timestamp = Union[str, datetime]

FOUR_PLACES = Decimal("0.0001")


def format_fixed(value: float) -> str:
    """Format to exactly four decimals, rounding the exact float value half-up.

    Matches ``Number.prototype.toFixed(4)``, which earlier consumers of these
    timecards compare against.
    """

    return str(Decimal(value).quantize(FOUR_PLACES, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Job:
    name: str
    wage_rate: float
    benefit_rate: float


@dataclass
class Timepunch:
    job: str
    start: Timestamp
    end: Timestamp


@dataclass
class Employee:
    name: str
    timepunches: List[Timepunch] = field(default_factory=list)


@dataclass(frozen=True)
class PayTimeSplit:
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    doubletime_hours: float = 0.0

    @property
    def total_hours(self) -> float:
        return self.regular_hours + self.overtime_hours + self.doubletime_hours


@dataclass(frozen=True)
class TierState:
    cum_regular: float = 0.0
    cum_overtime: float = 0.0
    cum_doubletime: float = 0.0


@dataclass(frozen=True)
class TimepunchPay:
    timepunch: Timepunch
    hours: float
    split: PayTimeSplit
    wage: float
    benefit: float


@dataclass(frozen=True)
class EmployeeTimecard:
    employee: str
    regular: float
    overtime: float
    doubletime: float
    wage_total: float
    benefit_total: float
    lines: List[TimepunchPay] = field(default_factory=list, compare=False, repr=False)

    @property
    def total_hours(self) -> float:
        return self.regular + self.overtime + self.doubletime

    def to_dict(self) -> Dict[str, str]:
        return {
            "employee": self.employee,
            "regular": format_fixed(self.regular),
            "overtime": format_fixed(self.overtime),
            "doubletime": format_fixed(self.doubletime),
            "wageTotal": format_fixed(self.wage_total),
            "benefitTotal": format_fixed(self.benefit_total),
        }

    def to_keyed_dict(self) -> Dict[str, Dict[str, str]]:
        """Record keyed by employee name, the shape older exports used."""

        return {self.employee: self.to_dict()}
