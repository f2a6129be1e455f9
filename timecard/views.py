from __future__ import annotations
import json
from typing import Iterable

from .models import EmployeeTimecard, format_fixed


def format_timecards(timecards: Iterable[EmployeeTimecard]) -> str:
    rows = [
        "Timecards",
        f"{'Employee':<16}  {'Regular':>10}  {'Overtime':>10}  {'Doubletime':>10}  {'Wages':>12}  {'Benefits':>12}",
    ]
    regular = overtime = doubletime = wages = benefits = 0.0
    for card in timecards:
        record = card.to_dict()
        rows.append(
            f"{card.employee:<16}  {record['regular']:>10}  {record['overtime']:>10}  {record['doubletime']:>10}"
            f"  {record['wageTotal']:>12}  {record['benefitTotal']:>12}"
        )
        regular += card.regular
        overtime += card.overtime
        doubletime += card.doubletime
        wages += card.wage_total
        benefits += card.benefit_total
    rows.append(
        f"{'Total':<16}  {format_fixed(regular):>10}  {format_fixed(overtime):>10}  {format_fixed(doubletime):>10}"
        f"  {format_fixed(wages):>12}  {format_fixed(benefits):>12}"
    )
    return "\n".join(rows)


def timecards_to_json(timecards: Iterable[EmployeeTimecard], keyed: bool = False) -> str:
    records = [card.to_keyed_dict() if keyed else card.to_dict() for card in timecards]
    return json.dumps(records, indent=2)
