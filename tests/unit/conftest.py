"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- EarningsCalculator instances
- Snapshot factory
- Downline trees of chosen sizes
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from earnings import AccountSnapshot, DownlineMember, DownlineTree, EarningsCalculator


@pytest.fixture
def calculator() -> EarningsCalculator:
    """Calculator with earnings frozen at the end of the term."""
    return EarningsCalculator()


@pytest.fixture
def legacy_calculator() -> EarningsCalculator:
    """Calculator that keeps accruing past the plan term."""
    return EarningsCalculator(freeze_at_term=False)


@pytest.fixture
def make_snapshot(now: datetime):
    """
    Factory for paid snapshots joined a number of days before now.

    Returns:
        Callable(days_ago, plan_amount="50000", payment_status=True)
    """
    def _make(
        days_ago: float,
        plan_amount: str = "50000",
        payment_status: bool = True,
    ) -> AccountSnapshot:
        return AccountSnapshot(
            plan_amount=Decimal(plan_amount),
            joined_date=now - timedelta(days=days_ago),
            payment_status=payment_status,
        )

    return _make


@pytest.fixture
def make_downline():
    """
    Factory for downline trees with given member counts per level.

    Returns:
        Callable(*sizes) where sizes[0] is the level 1 count
    """
    def _make(*sizes: int) -> DownlineTree:
        levels = {}
        next_id = 1
        for number, size in enumerate(sizes, start=1):
            members = []
            for _ in range(size):
                members.append(DownlineMember(id=str(next_id), name=f"Member {next_id}"))
                next_id += 1
            levels[f"level{number}"] = tuple(members)
        return DownlineTree(**levels)

    return _make
