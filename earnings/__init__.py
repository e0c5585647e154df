"""
MLM dashboard earnings core.

Standalone package for plan earnings accrual and rank evaluation.

Example:
    >>> from datetime import UTC, datetime
    >>> from decimal import Decimal
    >>> from earnings import AccountSnapshot, EarningsCalculator
    >>>
    >>> snapshot = AccountSnapshot(
    ...     plan_amount=Decimal("50000"),
    ...     joined_date="2024-01-15",
    ...     payment_status=True,
    ... )
    >>> result = EarningsCalculator().compute(
    ...     snapshot, datetime(2024, 4, 24, tzinfo=UTC)
    ... )
    >>> result.total_earnings
    Decimal('20000')
"""

from earnings.constants import (
    DEFAULT_PLAN_AMOUNT,
    PLAN_TERM_DAYS,
    RANK_THRESHOLDS,
    get_rank_threshold,
)
from earnings.core.calculator import EarningsCalculator
from earnings.core.models import (
    AccountSnapshot,
    DerivedEarnings,
    DownlineMember,
    DownlineTree,
)
from earnings.core.rank import RankEvaluator
from earnings.exceptions import InvalidSnapshot
from earnings.parsers import parse_account_snapshot, parse_downline
from earnings.types import RankLabel
from earnings.utils import format_currency, format_days, format_earnings_report


__version__ = "1.0.0"
__all__ = [
    # Core
    "EarningsCalculator",
    "RankEvaluator",
    # Models
    "AccountSnapshot",
    "DownlineMember",
    "DownlineTree",
    "DerivedEarnings",
    "RankLabel",
    # Errors
    "InvalidSnapshot",
    # Parsing
    "parse_account_snapshot",
    "parse_downline",
    # Constants
    "DEFAULT_PLAN_AMOUNT",
    "PLAN_TERM_DAYS",
    "RANK_THRESHOLDS",
    "get_rank_threshold",
    # Formatters
    "format_currency",
    "format_days",
    "format_earnings_report",
]
