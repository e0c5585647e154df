"""
Parsing of raw user-data payloads.

Converts the JSON body of GET /user_data/{id} into validated
AccountSnapshot and DownlineTree models. Missing fields fall back
to defaults; unusable values raise InvalidSnapshot with no partial
result.
"""

from collections.abc import Mapping
from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from loguru import logger
from pydantic import ValidationError

from earnings.constants import DEFAULT_PLAN_AMOUNT, DOWNLINE_DEPTH
from earnings.core.models import (
    AccountSnapshot,
    DownlineMember,
    DownlineTree,
    to_aware_datetime,
)
from earnings.exceptions import InvalidSnapshot


def parse_plan_amount(value: Any) -> Decimal:
    """
    Parse plan amount from a payload value.

    Args:
        value: Raw value (number, numeric string, or None)

    Returns:
        Plan amount; DEFAULT_PLAN_AMOUNT when value is None

    Raises:
        InvalidSnapshot: If value is not a finite, non-negative number

    Example:
        >>> parse_plan_amount("25000")
        Decimal('25000')
        >>> parse_plan_amount(None)
        Decimal('50000')
    """
    if value is None:
        return DEFAULT_PLAN_AMOUNT

    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise InvalidSnapshot(f"Plan amount must be numeric, got {value!r}")

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise InvalidSnapshot(f"Plan amount must be numeric, got {value!r}") from exc

    if amount.is_nan() or amount.is_infinite():
        raise InvalidSnapshot(f"Plan amount must be finite, got {value!r}")
    if amount < 0:
        raise InvalidSnapshot(f"Plan amount cannot be negative, got {value!r}")

    return amount


def parse_joined_date(value: Any, now: datetime) -> datetime:
    """
    Parse join date from a payload value.

    Accepts ISO dates, ISO datetimes (naive ones are UTC) and epoch
    milliseconds. A missing or empty value means "now", which yields
    zero elapsed days.

    Raises:
        InvalidSnapshot: If value cannot be read as a date
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return to_aware_datetime(now)

    if isinstance(value, bool):
        raise InvalidSnapshot(f"Join date is not a date: {value!r}")

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidSnapshot(f"Join timestamp out of range: {value!r}") from exc

    if isinstance(value, (str, date)):
        parsed = to_aware_datetime(value)
        if isinstance(parsed, datetime):
            return parsed

    raise InvalidSnapshot(f"Join date is not a date: {value!r}")


def parse_account_snapshot(payload: Mapping[str, Any], now: datetime) -> AccountSnapshot:
    """
    Build an AccountSnapshot from a user-data payload.

    Args:
        payload: Decoded JSON object
        now: Evaluation time, used when the join date is missing

    Returns:
        Validated AccountSnapshot

    Raises:
        InvalidSnapshot: If the payload is not an object or holds bad values
    """
    if not isinstance(payload, Mapping):
        raise InvalidSnapshot(f"User data must be an object, got {type(payload).__name__}")

    if payload.get("planAmount") is None:
        logger.debug(f"Plan amount missing for user {payload.get('id')}, using default")
    if payload.get("joinedDate") in (None, ""):
        logger.debug(f"Join date missing for user {payload.get('id')}, using now")

    plan_amount = parse_plan_amount(payload.get("planAmount"))
    joined_date = parse_joined_date(payload.get("joinedDate"), now)
    payment_status = payload.get("paymentStatus")

    try:
        return AccountSnapshot(
            plan_amount=plan_amount,
            joined_date=joined_date,
            payment_status=False if payment_status is None else payment_status,
        )
    except ValidationError as exc:
        raise InvalidSnapshot(str(exc)) from exc


def _parse_member(raw: Any) -> DownlineMember:
    if not isinstance(raw, Mapping):
        raise InvalidSnapshot(f"Downline member must be an object, got {raw!r}")
    try:
        return DownlineMember(
            id=raw.get("id"),
            name=raw.get("name") or "",
            earnings=raw.get("earnings"),
            joined_date=raw.get("joinedDate"),
        )
    except ValidationError as exc:
        raise InvalidSnapshot(str(exc)) from exc


def parse_downline(payload: Mapping[str, Any]) -> DownlineTree:
    """
    Build a DownlineTree from a user-data payload.

    Levels missing from the payload are empty.

    Raises:
        InvalidSnapshot: If the downline or one of its levels is malformed
    """
    if not isinstance(payload, Mapping):
        raise InvalidSnapshot(f"User data must be an object, got {type(payload).__name__}")

    downline = payload.get("downline") or {}
    if not isinstance(downline, Mapping):
        raise InvalidSnapshot("Downline must be an object keyed level1..level7")

    levels: dict[str, tuple[DownlineMember, ...]] = {}
    for number in range(1, DOWNLINE_DEPTH + 1):
        key = f"level{number}"
        members = downline.get(key) or []
        if not isinstance(members, list):
            raise InvalidSnapshot(f"Downline {key} must be a list")
        levels[key] = tuple(_parse_member(member) for member in members)

    return DownlineTree(**levels)
