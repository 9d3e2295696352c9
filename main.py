#!/usr/bin/env python3
"""
Luach - Hebrew calendar preview.

Usage:
    python main.py                        # Summarise today
    python main.py --date 2023-12-26      # Summarise a civil date
    python main.py --hebrew 5784-7-10     # Summarise a Hebrew date (year-month-day)
    python main.py --year 5784 --israel   # List the year's holidays in Israel
"""

import argparse
import logging
import sys
from datetime import datetime
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

from luach.config import Config
from luach.formatter import format_day_summary, format_year_holidays
from luach.hebrew_date import HebrewDate
from luach.observance import ObservanceContext

logger = logging.getLogger(__name__)

ISRAEL_TZ = ZoneInfo("Asia/Jerusalem")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Hebrew calendar preview",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py                        Summarise today (Israel time)
    python main.py --date 2024-04-23      Summarise a civil date
    python main.py --hebrew 5784-1-15     Summarise 15 Nissan 5784
    python main.py --year 5785            List the holidays of 5785
        """,
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--date",
        type=str,
        help="Civil date to summarise (YYYY-MM-DD format)",
    )
    target.add_argument(
        "--hebrew",
        type=str,
        help="Hebrew date to summarise (YEAR-MONTH-DAY, months numbered from Nissan = 1)",
    )
    target.add_argument(
        "--year",
        type=int,
        help="List every holiday of a Hebrew year",
    )
    parser.add_argument(
        "--israel",
        action="store_true",
        help="Use the Israeli holiday and parsha schedule",
    )
    return parser.parse_args(argv)


def resolve_date(args: argparse.Namespace) -> HebrewDate:
    """Work out which Hebrew date the arguments ask for."""
    if args.hebrew:
        try:
            year, month, day = (int(part) for part in args.hebrew.split("-"))
        except ValueError:
            raise ValueError(
                f"Hebrew date must be YEAR-MONTH-DAY, got {args.hebrew!r}"
            ) from None
        return HebrewDate.of(year, month, day)
    if args.date:
        return HebrewDate.from_date(datetime.strptime(args.date, "%Y-%m-%d").date())
    return HebrewDate.from_date(datetime.now(ISRAEL_TZ).date())


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()

    args = parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    config.setup_logging()
    in_israel = args.israel or config.in_israel

    try:
        if args.year is not None:
            logger.info(f"Listing holidays for {args.year}")
            print(format_year_holidays(args.year, in_israel))
            return 0

        target = resolve_date(args)
        logger.info(f"Summarising {target}")
        print(format_day_summary(ObservanceContext(target, in_israel)))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
