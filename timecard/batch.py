from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .calculator import TimecardCalculator
from .errors import TimecardError
from .logging import get_logger
from .models import Employee, EmployeeTimecard, format_fixed

logger = get_logger(__name__)


@dataclass
class BatchSummary:
    timecards: List[EmployeeTimecard] = field(default_factory=list)
    # in input order; employee names are not unique
    failures: List[Tuple[Employee, TimecardError]] = field(default_factory=list)
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    doubletime_hours: float = 0.0
    wage_total: float = 0.0
    benefit_total: float = 0.0

    @property
    def succeeded(self) -> bool:
        return not self.failures

    def totals(self) -> Dict[str, str]:
        return {
            "regular": format_fixed(self.regular_hours),
            "overtime": format_fixed(self.overtime_hours),
            "doubletime": format_fixed(self.doubletime_hours),
            "wageTotal": format_fixed(self.wage_total),
            "benefitTotal": format_fixed(self.benefit_total),
        }


class TimecardBatch:
    """Runs the calculator over a roster and totals the results.

    By default the first failing employee aborts the run. With
    ``isolate_failures`` each failure is recorded alongside its employee
    and the remaining employees are still calculated.
    """

    def __init__(self, calculator: TimecardCalculator, isolate_failures: bool = False):
        self.calculator = calculator
        self.isolate_failures = isolate_failures

    def run(self, employees: Iterable[Employee]) -> BatchSummary:
        summary = BatchSummary()

        for employee in employees:
            try:
                timecard = self.calculator.calculate_employee_timecard(employee)
            except TimecardError as exc:
                if not self.isolate_failures:
                    raise
                logger.warning("timecard_failed", employee=employee.name, code=exc.code, error=str(exc))
                summary.failures.append((employee, exc))
                continue
            summary.timecards.append(timecard)
            summary.regular_hours += timecard.regular
            summary.overtime_hours += timecard.overtime
            summary.doubletime_hours += timecard.doubletime
            summary.wage_total += timecard.wage_total
            summary.benefit_total += timecard.benefit_total

        return summary
