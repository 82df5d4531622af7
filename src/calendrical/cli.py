from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

from .core.errors import CalendricalError


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_ymd(p: argparse.ArgumentParser, prefix: str = "") -> None:
    p.add_argument(f"{prefix}year", type=int)
    p.add_argument(f"{prefix}month", type=int)
    p.add_argument(f"{prefix}day", type=int)


def cmd_list(argv: list[str]) -> int:
    import calendrical

    p = argparse.ArgumentParser(prog="calendrical list", description="List the registered schemas")
    p.parse_args(argv)
    for name in calendrical.list_schemas():
        print(name)
    return 0


def cmd_info(argv: list[str]) -> int:
    import calendrical

    p = argparse.ArgumentParser(prog="calendrical info", description="Print the metadata of a schema")
    p.add_argument("schema")
    args = p.parse_args(argv)

    for key, value in calendrical.schema_info(args.schema).items():
        print(f"{key:<20}: {value}")
    return 0


def cmd_days(argv: list[str]) -> int:
    import calendrical

    p = argparse.ArgumentParser(prog="calendrical days", description="Date parts -> days since the epoch")
    p.add_argument("schema")
    _add_ymd(p)
    args = p.parse_args(argv)

    sch = calendrical.get_schema(args.schema)
    segment = calendrical.make_segment(args.schema)
    segment.years_validator.validate(args.year)
    calendrical.make_validator(args.schema).validate_month_day(args.year, args.month, args.day)

    days = sch.count_days_since_epoch(args.year, args.month, args.day)
    print(f"days_since_epoch = {days}")
    print(f"day_of_year      = {sch.get_day_of_year(args.year, args.month, args.day)}")
    epoch = calendrical.schema_info(args.schema)["epoch"]
    if epoch is not None:
        print(f"day_number       = {days + epoch}")
    return 0


def cmd_parts(argv: list[str]) -> int:
    import calendrical

    p = argparse.ArgumentParser(prog="calendrical parts", description="Days since the epoch -> date parts")
    p.add_argument("schema")
    p.add_argument("days", type=int)
    p.add_argument("--day-number", action="store_true", help="DAYS is a day number, not a count since the epoch")
    args = p.parse_args(argv)

    sch = calendrical.get_schema(args.schema)
    days = args.days
    if args.day_number:
        epoch = calendrical.schema_info(args.schema)["epoch"]
        if epoch is None:
            raise SystemExit(f"Schema '{args.schema}' has no conventional epoch")
        days -= epoch
    calendrical.make_segment(args.schema).days_validator.validate(days, "days")

    print(f"date_parts    = {sch.get_date_parts(days)}")
    print(f"ordinal_parts = {sch.get_ordinal_parts(days)}")
    return 0


def cmd_add(argv: list[str]) -> int:
    import calendrical

    p = argparse.ArgumentParser(prog="calendrical add", description="Add years, months then days to a date")
    p.add_argument("schema")
    _add_ymd(p)
    p.add_argument("--years", type=int, default=0)
    p.add_argument("--months", type=int, default=0)
    p.add_argument("--days", type=int, default=0)
    p.add_argument("--rule", choices=[r.value for r in calendrical.AdditionRule], default="truncate")
    args = p.parse_args(argv)

    math = calendrical.make_date_math(args.schema, calendrical.AdditionRule(args.rule))
    math.arithmetic.years_validator.validate(args.year)
    calendrical.make_validator(args.schema).validate_month_day(args.year, args.month, args.day)

    date = calendrical.DateParts(args.year, args.month, args.day)
    if args.years:
        date = math.add_years(date, args.years)
    if args.months:
        date = math.add_months(date, args.months)
    if args.days:
        date = math.add_days(date, args.days)
    print(date)
    return 0


def cmd_diff(argv: list[str]) -> int:
    import calendrical

    p = argparse.ArgumentParser(prog="calendrical diff", description="Difference between two dates")
    p.add_argument("schema")
    _add_ymd(p, "start_")
    _add_ymd(p, "end_")
    p.add_argument("--rule", choices=[r.value for r in calendrical.AdditionRule], default="truncate")
    args = p.parse_args(argv)

    math = calendrical.make_date_math(args.schema, calendrical.AdditionRule(args.rule))
    validator = calendrical.make_validator(args.schema)
    start = calendrical.DateParts(args.start_year, args.start_month, args.start_day)
    end = calendrical.DateParts(args.end_year, args.end_month, args.end_day)
    for d in (start, end):
        math.arithmetic.years_validator.validate(d.year)
        validator.validate_month_day(*d.deconstruct())

    diff = math.subtract(start, end)
    print(f"{diff.years} years, {diff.months} months, {diff.days} days")
    return 0


def cmd_today(argv: list[str]) -> int:
    import calendrical

    p = argparse.ArgumentParser(prog="calendrical today", description="Today in a calendar")
    p.add_argument("schema", nargs="?", default="gregorian")
    args = p.parse_args(argv)

    epoch = calendrical.schema_info(args.schema)["epoch"]
    if epoch is None:
        raise SystemExit(f"Schema '{args.schema}' has no conventional epoch")
    print(calendrical.get_schema(args.schema).get_date_parts(calendrical.today() - epoch))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calendrical", description="Calendrical computation toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List the registered schemas")
    sub.add_parser("info", help="Print the metadata of a schema")
    sub.add_parser("days", help="Date parts -> days since the epoch")
    sub.add_parser("parts", help="Days since the epoch -> date parts")
    sub.add_parser("add", help="Add years, months and days to a date")
    sub.add_parser("diff", help="Difference between two dates")
    sub.add_parser("today", help="Today in a calendar")

    # design tools
    sub.add_parser("derive", help="Fit a quasi-affine form to a cycle of lengths.")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    commands = {
        "list": cmd_list,
        "info": cmd_info,
        "days": cmd_days,
        "parts": cmd_parts,
        "add": cmd_add,
        "diff": cmd_diff,
        "today": cmd_today,
    }

    try:
        if args.cmd == "derive":
            return _run_module_main("calendrical.design.form_constants", rest)
        return commands[args.cmd](rest)
    except CalendricalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
