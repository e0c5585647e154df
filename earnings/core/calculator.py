"""
Pure business logic for dashboard earnings.

This module contains standalone calculation logic without any
dependencies on the backend client, settings, or presentation code.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from earnings.constants import (
    PLAN_TERM_DAYS,
    RATE_PER_UNIT,
    RATE_UNIT,
    WITHDRAWABLE_SHARE,
)
from earnings.core.models import (
    AccountSnapshot,
    DerivedEarnings,
    DownlineTree,
    to_aware_datetime,
)
from earnings.core.rank import RankEvaluator
from earnings.exceptions import InvalidSnapshot


ONE_DAY = timedelta(days=1)


class EarningsCalculator:
    """
    Accrual of plan earnings over the fixed plan term.

    Earnings accrue at RATE_PER_UNIT per RATE_UNIT of plan amount per day.
    With freeze_at_term enabled (the default) accrual stops at the end of
    the term; disabled, earnings keep accruing past it.
    """

    def __init__(
        self,
        freeze_at_term: bool = True,
        rank_evaluator: RankEvaluator | None = None,
    ) -> None:
        self.freeze_at_term = freeze_at_term
        self.rank_evaluator = rank_evaluator or RankEvaluator()

    def calculate_elapsed_days(self, joined_date: datetime, now: datetime) -> int:
        """
        Calculate whole days since the join date.

        Args:
            joined_date: When the plan became active
            now: Evaluation time

        Returns:
            Floor of elapsed days, never negative

        Example:
            >>> from datetime import UTC, datetime
            >>> calc = EarningsCalculator()
            >>> calc.calculate_elapsed_days(
            ...     datetime(2024, 1, 1, tzinfo=UTC),
            ...     datetime(2024, 1, 11, 12, tzinfo=UTC),
            ... )
            10
        """
        elapsed = (now - joined_date) // ONE_DAY
        return max(elapsed, 0)

    def calculate_remaining_days(self, elapsed_days: int) -> int:
        """Days left in the plan term (minimum 0)."""
        return max(0, PLAN_TERM_DAYS - elapsed_days)

    def calculate_accrual(self, plan_amount: Decimal, days: int) -> Decimal:
        """
        Calculate earnings accrued over a number of days.

        Formula: (plan_amount / 10000) * days * 40

        Args:
            plan_amount: Plan amount
            days: Number of accrual days

        Returns:
            Accrued amount

        Example:
            >>> calc = EarningsCalculator()
            >>> calc.calculate_accrual(Decimal("50000"), 100)
            Decimal('20000')
        """
        if plan_amount <= 0 or days <= 0:
            return Decimal("0")

        return (plan_amount / RATE_UNIT) * days * RATE_PER_UNIT

    def calculate_available_balance(self, total_earnings: Decimal) -> Decimal:
        """Withdrawable part of accrued earnings."""
        return total_earnings * WITHDRAWABLE_SHARE

    def compute(
        self,
        snapshot: AccountSnapshot,
        now: datetime,
        downline: DownlineTree | None = None,
    ) -> DerivedEarnings:
        """
        Derive dashboard earnings for a snapshot.

        Args:
            snapshot: Member's plan state
            now: Evaluation time (naive values are taken as UTC)
            downline: Optional downline used for team size and rank

        Returns:
            DerivedEarnings; all day and money fields are zero when
            the plan payment is not completed

        Raises:
            InvalidSnapshot: If the snapshot carries unusable values
        """
        self._validate(snapshot)
        now = to_aware_datetime(now)

        team_size = downline.total_team_size() if downline is not None else 0
        rank = self.rank_evaluator.rank(team_size)

        if not snapshot.payment_status:
            zero = Decimal("0")
            return DerivedEarnings(
                elapsed_days=0,
                remaining_days=0,
                total_earnings=zero,
                remaining_amount=zero,
                available_balance=zero,
                total_team_size=team_size,
                rank=rank,
            )

        elapsed_days = self.calculate_elapsed_days(snapshot.joined_date, now)
        remaining_days = self.calculate_remaining_days(elapsed_days)

        accrual_days = elapsed_days
        if self.freeze_at_term:
            accrual_days = min(elapsed_days, PLAN_TERM_DAYS)

        total_earnings = self.calculate_accrual(snapshot.plan_amount, accrual_days)
        remaining_amount = self.calculate_accrual(snapshot.plan_amount, remaining_days)

        return DerivedEarnings(
            elapsed_days=elapsed_days,
            remaining_days=remaining_days,
            total_earnings=total_earnings,
            remaining_amount=remaining_amount,
            available_balance=self.calculate_available_balance(total_earnings),
            total_team_size=team_size,
            rank=rank,
        )

    def _validate(self, snapshot: AccountSnapshot) -> None:
        # model_construct() skips validation, so recheck what arithmetic relies on
        amount = snapshot.plan_amount
        if not isinstance(amount, Decimal) or amount.is_nan() or amount.is_infinite():
            raise InvalidSnapshot(f"Plan amount is not a finite number: {amount!r}")
        if amount < 0:
            raise InvalidSnapshot(f"Plan amount cannot be negative: {amount}")
        if not isinstance(snapshot.joined_date, datetime):
            raise InvalidSnapshot(f"Join date is not a datetime: {snapshot.joined_date!r}")
