"""
Dashboard service.

Combines member data from an injected source with the earnings
calculator into a view-state summary for the member dashboard.
"""

import asyncio
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from app.config.settings import settings
from app.utils.datetime_utils import utc_now
from earnings import (
    AccountSnapshot,
    DerivedEarnings,
    DownlineTree,
    EarningsCalculator,
    InvalidSnapshot,
)


class UserDataSource(Protocol):
    """
    Anything that can supply plan state and downline for a member.

    Sources may also offer `fetch_member(user_id)` returning both halves
    from a single backend read; DashboardService prefers it when present.
    """

    async def fetch_account_snapshot(self, user_id: str) -> AccountSnapshot:
        ...

    async def fetch_downline(self, user_id: str) -> DownlineTree:
        ...


class DashboardSummary(BaseModel):
    """Serializable view state of one dashboard load."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    snapshot: AccountSnapshot
    downline: DownlineTree
    earnings: DerivedEarnings
    level_sizes: list[int] = Field(..., description="Member count per level, level 1 first")
    generated_at: datetime


class DashboardService:
    """
    Service building dashboard summaries.

    Each call fetches a fresh snapshot and recomputes; nothing is cached.
    """

    def __init__(
        self,
        source: UserDataSource,
        calculator: EarningsCalculator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.source = source
        self.calculator = calculator or EarningsCalculator(
            freeze_at_term=settings.earnings_freeze_at_term
        )
        self._clock = clock

    def summarize(
        self,
        user_id: str,
        snapshot: AccountSnapshot,
        downline: DownlineTree,
        now: datetime,
    ) -> DashboardSummary:
        """
        Build a summary from data already in memory.

        Args:
            user_id: Member id
            snapshot: Member's plan state
            downline: Member's downline
            now: Evaluation time

        Returns:
            DashboardSummary
        """
        earnings = self.calculator.compute(snapshot, now, downline=downline)
        return DashboardSummary(
            user_id=user_id,
            snapshot=snapshot,
            downline=downline,
            earnings=earnings,
            level_sizes=[len(level) for level in downline.levels()],
            generated_at=now,
        )

    async def _fetch(self, user_id: str) -> tuple[AccountSnapshot, DownlineTree]:
        # One request when the source can serve both halves together
        fetch_member = getattr(self.source, "fetch_member", None)
        if fetch_member is not None:
            return await fetch_member(user_id)

        snapshot_task = asyncio.ensure_future(self.source.fetch_account_snapshot(user_id))
        downline_task = asyncio.ensure_future(self.source.fetch_downline(user_id))
        try:
            snapshot, downline = await asyncio.gather(snapshot_task, downline_task)
        except BaseException:
            for task in (snapshot_task, downline_task):
                task.cancel()
            await asyncio.gather(snapshot_task, downline_task, return_exceptions=True)
            raise
        return snapshot, downline

    async def get_summary(self, user_id: str) -> DashboardSummary:
        """
        Fetch member data and build the dashboard summary.

        If one fetch fails the other is cancelled before the error
        is raised.

        Raises:
            InvalidSnapshot: If the member data is unusable
            Whatever the source raises for fetch failures
        """
        snapshot, downline = await self._fetch(user_id)

        try:
            summary = self.summarize(user_id, snapshot, downline, self._clock())
        except InvalidSnapshot as e:
            logger.error(f"Invalid snapshot for user {user_id}: {e}")
            raise

        logger.info(
            f"Dashboard for {user_id}: earnings={summary.earnings.total_earnings}, "
            f"team={summary.earnings.total_team_size}, rank={summary.earnings.rank.value}"
        )
        return summary
