from __future__ import annotations
from typing import Iterable, List, Tuple

from .models import PayTimeSplit, TierState

MAX_REGULAR_HOURS = 40.0
MAX_OVERTIME_HOURS = 8.0


def allocate_timepunch(state: TierState, hours: float) -> Tuple[TierState, PayTimeSplit]:
    """Split one punch's hours into tiers given the week's running totals.

    Hours land in regular first. Whatever pushes the running regular total
    past 40 moves to overtime, and whatever pushes the running overtime total
    past 8 moves on to doubletime. Zero or negative hours contribute nothing.
    """
    hours = max(hours, 0.0)

    cum_regular = state.cum_regular + hours
    cum_overtime = state.cum_overtime
    cum_doubletime = state.cum_doubletime
    regular = hours
    overtime = 0.0
    doubletime = 0.0

    if cum_regular > MAX_REGULAR_HOURS:
        overtime = cum_regular - MAX_REGULAR_HOURS
        regular -= overtime
        cum_overtime += overtime
        cum_regular = MAX_REGULAR_HOURS

    # Checked against the running total, so earlier punches' overtime counts.
    if cum_overtime > MAX_OVERTIME_HOURS:
        doubletime = cum_overtime - MAX_OVERTIME_HOURS
        overtime -= doubletime
        cum_doubletime += doubletime
        cum_overtime = MAX_OVERTIME_HOURS

    return (
        TierState(cum_regular=cum_regular, cum_overtime=cum_overtime, cum_doubletime=cum_doubletime),
        PayTimeSplit(regular_hours=regular, overtime_hours=overtime, doubletime_hours=doubletime),
    )


def allocate_timepunches(hours: Iterable[float], state: TierState | None = None) -> Tuple[TierState, List[PayTimeSplit]]:
    state = state or TierState()
    splits: List[PayTimeSplit] = []
    for punch_hours in hours:
        state, split = allocate_timepunch(state, punch_hours)
        splits.append(split)
    return state, splits
