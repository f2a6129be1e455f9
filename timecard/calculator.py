from __future__ import annotations

from typing import Iterable, List

from .errors import EmptyTimepunchListError
from .hours import calculate_timepunch_hours
from .jobs import JobRateTable
from .logging import get_logger
from .models import Employee, EmployeeTimecard, Job, PayTimeSplit, TierState, TimepunchPay
from .overtime import allocate_timepunch

OVERTIME_RATE_MULTIPLIER = 1.5
DOUBLETIME_RATE_MULTIPLIER = 2.0

logger = get_logger(__name__)


def calculate_timepunch_wage(split: PayTimeSplit, wage_rate: float) -> float:
    return (
        split.regular_hours * wage_rate
        + split.overtime_hours * wage_rate * OVERTIME_RATE_MULTIPLIER
        + split.doubletime_hours * wage_rate * DOUBLETIME_RATE_MULTIPLIER
    )


def calculate_timepunch_benefit(split: PayTimeSplit, benefit_rate: float) -> float:
    # Benefits accrue at the same rate for every tier.
    return split.total_hours * benefit_rate


class TimecardCalculator:
    def __init__(self, job_rates: JobRateTable):
        self.job_rates = job_rates

    def calculate_employee_timecard(self, employee: Employee) -> EmployeeTimecard:
        if not employee.timepunches:
            raise EmptyTimepunchListError(employee.name)

        state = TierState()
        lines: List[TimepunchPay] = []
        for timepunch in employee.timepunches:
            hours = calculate_timepunch_hours(timepunch)
            state, split = allocate_timepunch(state, hours)
            wage_rate, benefit_rate = self.job_rates.rates_for(timepunch.job)
            line = TimepunchPay(
                timepunch=timepunch,
                hours=hours,
                split=split,
                wage=calculate_timepunch_wage(split, wage_rate),
                benefit=calculate_timepunch_benefit(split, benefit_rate),
            )
            logger.debug(
                "timepunch_allocated",
                employee=employee.name,
                job=timepunch.job,
                hours=hours,
                regular=split.regular_hours,
                overtime=split.overtime_hours,
                doubletime=split.doubletime_hours,
            )
            lines.append(line)

        timecard = EmployeeTimecard(
            employee=employee.name,
            regular=state.cum_regular,
            overtime=state.cum_overtime,
            doubletime=state.cum_doubletime,
            wage_total=sum(line.wage for line in lines),
            benefit_total=sum(line.benefit for line in lines),
            lines=lines,
        )
        logger.info(
            "timecard_calculated",
            employee=employee.name,
            timepunches=len(lines),
            wage_total=timecard.wage_total,
        )
        return timecard

    def calculate_employee_timecards(self, employees: Iterable[Employee]) -> List[EmployeeTimecard]:
        return [self.calculate_employee_timecard(employee) for employee in employees]


def calculate_employee_timecard(employee: Employee, jobs: Iterable[Job] | JobRateTable) -> EmployeeTimecard:
    return TimecardCalculator(_rate_table(jobs)).calculate_employee_timecard(employee)


def calculate_employee_timecards(employees: Iterable[Employee], jobs: Iterable[Job] | JobRateTable) -> List[EmployeeTimecard]:
    return TimecardCalculator(_rate_table(jobs)).calculate_employee_timecards(employees)


def _rate_table(jobs: Iterable[Job] | JobRateTable) -> JobRateTable:
    if isinstance(jobs, JobRateTable):
        return jobs
    return JobRateTable.from_jobs(jobs)
