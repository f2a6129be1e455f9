from __future__ import annotations
import argparse
import sys
from pathlib import Path

from .batch import TimecardBatch
from .calculator import TimecardCalculator
from .config import get_settings
from .errors import TimecardError
from .hours import calculate_timepunch_hours
from .logging import configure_logging, get_logger
from .models import Timepunch, format_fixed
from .storage import Dataset, load_dataset
from .views import format_timecards, timecards_to_json

logger = get_logger(__name__)


def dataset_from_args(args: argparse.Namespace) -> Dataset:
    path = Path(args.path) if args.path else get_settings().data_path
    return load_dataset(path)


def cmd_calculate(args: argparse.Namespace) -> int:
    dataset = dataset_from_args(args)
    employees = dataset.employees
    if args.employee:
        employee = dataset.find_employee(args.employee)
        if employee is None:
            print(f"Unknown employee {args.employee}", file=sys.stderr)
            return 1
        employees = [employee]

    isolate = args.isolate_failures or get_settings().isolate_failures
    batch = TimecardBatch(TimecardCalculator(dataset.rate_table()), isolate_failures=isolate)
    summary = batch.run(employees)

    if args.json:
        print(timecards_to_json(summary.timecards, keyed=args.keyed))
    else:
        print(format_timecards(summary.timecards))
    for employee, error in summary.failures:
        print(f"{employee.name}: {error}", file=sys.stderr)
    return 0 if summary.succeeded else 1


def cmd_hours(args: argparse.Namespace) -> int:
    hours = calculate_timepunch_hours(Timepunch(job="", start=args.start, end=args.end))
    print(format_fixed(hours))
    return 0


def cmd_jobs(args: argparse.Namespace) -> int:
    rates = dataset_from_args(args).rate_table()
    for job in rates.jobs():
        print(f"{job.name}  rate: {job.wage_rate:.2f}  benefits: {job.benefit_rate:.2f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weekly timecard calculator")
    sub = parser.add_subparsers(dest="command", required=True)

    calculate = sub.add_parser("calculate", help="Calculate weekly timecards for every employee")
    calculate.add_argument("path", nargs="?", help="Dataset JSON file")
    calculate.add_argument("--employee", help="Only calculate this employee")
    calculate.add_argument("--json", action="store_true", help="Print timecards as JSON")
    calculate.add_argument("--keyed", action="store_true", help="Key each JSON record by employee name")
    calculate.add_argument(
        "--isolate-failures",
        action="store_true",
        help="Report failing employees and keep calculating the rest",
    )
    calculate.set_defaults(func=cmd_calculate)

    hours = sub.add_parser("hours", help="Hours between two timestamps")
    hours.add_argument("start")
    hours.add_argument("end")
    hours.set_defaults(func=cmd_hours)

    jobs = sub.add_parser("jobs", help="List job wage and benefit rates")
    jobs.add_argument("path", nargs="?", help="Dataset JSON file")
    jobs.set_defaults(func=cmd_jobs)

    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    configure_logging(settings.log_level, json=settings.log_json)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (TimecardError, FileNotFoundError) as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
