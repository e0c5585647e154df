"""
Command-line earnings report.

Prints the dashboard earnings report for a member, either from a
saved user-data JSON file or fetched from the backend.

Usage:
    mlm-earnings --file user_data.json
    mlm-earnings --user-id user123 --now 2024-07-22
"""

import argparse
import asyncio
import json
import sys
from datetime import datetime

from loguru import logger

from app.config.settings import settings
from app.initialization import setup_logging
from app.services.dashboard_service import DashboardService, DashboardSummary
from app.services.user_data_client import (
    InMemoryUserDataSource,
    UserDataClient,
    UserDataFetchError,
)
from app.utils.datetime_utils import utc_now
from earnings import (
    EarningsCalculator,
    InvalidSnapshot,
    format_earnings_report,
)
from earnings.core.models import to_aware_datetime


def _parse_now(value: str) -> datetime:
    parsed = to_aware_datetime(value)
    if not isinstance(parsed, datetime):
        raise argparse.ArgumentTypeError(f"not an ISO date or datetime: {value}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mlm-earnings",
        description="Show plan earnings, remaining term and rank for a member",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="Path to a saved /user_data/{id} JSON body")
    source.add_argument("--user-id", help="Member id to fetch from the backend")
    parser.add_argument(
        "--now",
        type=_parse_now,
        default=None,
        help="Evaluation time as ISO date/datetime (default: current UTC time)",
    )
    parser.add_argument(
        "--no-freeze",
        action="store_true",
        help="Keep accruing earnings after the plan term ends",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser


async def summarize_file(
    path: str,
    calculator: EarningsCalculator,
    now: datetime,
) -> DashboardSummary:
    """Build a dashboard summary from a saved user-data JSON file."""
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    if not isinstance(payload, dict):
        raise InvalidSnapshot(f"User data must be an object, got {type(payload).__name__}")

    user_id = str(payload.get("id") or path)
    source = InMemoryUserDataSource({user_id: payload}, clock=lambda: now)
    service = DashboardService(source, calculator=calculator, clock=lambda: now)
    return await service.get_summary(user_id)


async def summarize_remote(
    user_id: str,
    calculator: EarningsCalculator,
    now: datetime,
) -> DashboardSummary:
    """Fetch a member from the backend and build the dashboard summary."""
    async with UserDataClient(clock=lambda: now) as client:
        service = DashboardService(client, calculator=calculator, clock=lambda: now)
        return await service.get_summary(user_id)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    now = args.now or utc_now()
    freeze = settings.earnings_freeze_at_term and not args.no_freeze
    calculator = EarningsCalculator(freeze_at_term=freeze)

    try:
        if args.file:
            summary = asyncio.run(summarize_file(args.file, calculator, now))
        else:
            summary = asyncio.run(summarize_remote(args.user_id, calculator, now))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read user data file: {e}")
        return 1
    except InvalidSnapshot as e:
        logger.error(f"Invalid user data: {e}")
        return 1
    except UserDataFetchError as e:
        logger.error(str(e))
        return 1

    print(f"Member: {summary.user_id}")
    print(format_earnings_report(summary.earnings, plan_amount=summary.snapshot.plan_amount))
    return 0


if __name__ == "__main__":
    sys.exit(main())
