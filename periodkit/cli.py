"""
Command line access to period ranges and relative times.

Usage:
    periodkit range THIS_WEEK --timezone Europe/Paris
    periodkit past 7 --exclude-today --format YYYY_MM_DD
    periodkit offset Asia/Tokyo
    periodkit ago 2024-05-17T10:00:00Z --locale fr
"""

import argparse
import logging
from typing import List, Optional, Union

from babel.core import UnknownLocaleError

from periodkit.core.config import config
from periodkit.core.exceptions import PeriodKitError
from periodkit.modules.period.service import Period
from periodkit.modules.period.types import DateFormat, PresetDateRange
from periodkit.modules.period.utils import get_utc_offset
from periodkit.modules.relative_time.service import time_ago

logger = logging.getLogger(__name__)


def _parse_date_argument(value: str) -> Union[int, str]:
    """Integer values are epoch milliseconds, anything else an ISO string."""
    stripped = value.strip()
    if stripped.lstrip("-").isdigit():
        return int(stripped)
    return stripped


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="periodkit",
        description="Compute calendar date ranges and relative time phrases",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    period_options = argparse.ArgumentParser(add_help=False)
    period_options.add_argument(
        "--timezone",
        default=config.default_timezone,
        help="IANA timezone such as Europe/Paris (default: %(default)s)",
    )
    period_options.add_argument(
        "--format",
        dest="date_format",
        default=config.default_format,
        choices=[f.name for f in DateFormat],
        help="Boundary format (default: %(default)s)",
    )

    range_parser = subparsers.add_parser(
        "range", parents=[period_options], help="Compute a named calendar period"
    )
    range_parser.add_argument("preset", choices=[p.value for p in PresetDateRange])

    past_parser = subparsers.add_parser(
        "past", parents=[period_options], help="Compute a range of past days"
    )
    past_parser.add_argument("days", type=int, help="Number of days to look back")
    past_parser.add_argument(
        "--exclude-today",
        action="store_true",
        help="End the range one day ago instead of now",
    )

    offset_parser = subparsers.add_parser(
        "offset", help="Print a timezone's UTC offset in minutes"
    )
    offset_parser.add_argument("timezone")

    ago_parser = subparsers.add_parser("ago", help="Format a date relative to now")
    ago_parser.add_argument(
        "date", help="ISO-8601 timestamp or epoch milliseconds"
    )
    ago_parser.add_argument(
        "--locale",
        default=config.default_locale,
        help="Locale identifier (default: %(default)s)",
    )

    return parser


def run(args: argparse.Namespace) -> str:
    if args.command == "range":
        period = Period(args.date_format, args.timezone)
        return period.create_defined_range(args.preset).model_dump_json()

    if args.command == "past":
        period = Period(args.date_format, args.timezone)
        result = period.create_past_date_range(args.days, not args.exclude_today)
        return result.model_dump_json()

    if args.command == "offset":
        return str(get_utc_offset(args.timezone))

    if args.command == "ago":
        return time_ago(_parse_date_argument(args.date), args.locale)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        output = run(args)
    except PeriodKitError as e:
        logger.error(f"Application error: {e.message}")
        return 1
    except UnknownLocaleError as e:
        logger.error(f"Unknown locale: {e.identifier}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
