from datetime import datetime, timezone

import pytest

from timecard.errors import InvalidTimestampError
from timecard.hours import calculate_timepunch_hours, parse_timestamp
from timecard.models import Timepunch


def test_hours_between_timestamps():
    punch = Timepunch(job="anything", start="2022-02-19 07:03:41", end="2022-02-19 10:00:45")

    assert calculate_timepunch_hours(punch) == pytest.approx(2.9511, abs=1e-4)


def test_hours_do_not_depend_on_order():
    forward = Timepunch(job="anything", start="2022-02-19 07:03:41", end="2022-02-19 10:00:45")
    backward = Timepunch(job="anything", start="2022-02-19 10:00:45", end="2022-02-19 07:03:41")

    assert calculate_timepunch_hours(forward) == calculate_timepunch_hours(backward)


def test_hours_accept_datetimes_and_iso_t_separator():
    punch = Timepunch(job="anything", start=datetime(2022, 2, 19, 22, 0), end="2022-02-20T06:30:00")

    assert calculate_timepunch_hours(punch) == 8.5


def test_hours_are_not_rounded():
    punch = Timepunch(job="anything", start="2022-02-19 08:00:00", end="2022-02-19 08:00:01")

    assert calculate_timepunch_hours(punch) == 1 / 3600


@pytest.mark.parametrize("value", ["", "not a date", "2022-13-40 99:00:00", None, 12])
def test_malformed_timestamp_raises(value):
    with pytest.raises(InvalidTimestampError) as excinfo:
        parse_timestamp(value)

    assert excinfo.value.value == value
    assert excinfo.value.code == "INVALID_TIMESTAMP"


def test_mixed_timezone_awareness_raises():
    punch = Timepunch(
        job="anything",
        start=datetime(2022, 2, 19, 8, 0, tzinfo=timezone.utc),
        end="2022-02-19 10:00:00",
    )

    with pytest.raises(InvalidTimestampError):
        calculate_timepunch_hours(punch)
