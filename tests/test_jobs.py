import pytest

from timecard.errors import JobNotFoundError
from timecard.jobs import JobRateTable
from timecard.models import Job


def build_table() -> JobRateTable:
    return JobRateTable.from_jobs(
        [
            Job("Shop - Laborer", wage_rate=20.0, benefit_rate=1.0),
            Job("Hospital - Painter", wage_rate=30.0, benefit_rate=2.0),
            Job("Volunteer", wage_rate=0.0, benefit_rate=1.0),
        ]
    )


def test_rates_for_known_job():
    table = build_table()

    assert table.rates_for("Hospital - Painter") == (30.0, 2.0)


def test_rates_for_unknown_job_raises():
    table = build_table()

    with pytest.raises(JobNotFoundError) as excinfo:
        table.rates_for("Hospital - Electrician")

    assert excinfo.value.job_name == "Hospital - Electrician"
    assert "Hospital - Electrician" in str(excinfo.value)


def test_zero_rate_is_treated_as_missing():
    table = build_table()

    with pytest.raises(JobNotFoundError):
        table.rates_for("Volunteer")


def test_names_are_sorted_and_membership_works():
    table = build_table()

    assert table.names() == ["Hospital - Painter", "Shop - Laborer", "Volunteer"]
    assert "Shop - Laborer" in table
    assert "Shop" not in table
    assert len(table) == 3


@pytest.mark.parametrize("wage_rate, benefit_rate", [(-20.0, 1.0), (20.0, -1.0), (float("nan"), 1.0), (20.0, float("nan"))])
def test_non_positive_or_nan_rates_are_treated_as_missing(wage_rate, benefit_rate):
    table = JobRateTable.from_jobs([Job("Shop - Laborer", wage_rate=wage_rate, benefit_rate=benefit_rate)])

    with pytest.raises(JobNotFoundError):
        table.rates_for("Shop - Laborer")
