"""Pydantic models for the earnings core."""

from datetime import UTC, date, datetime, time
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from earnings.types import RankLabel


def to_aware_datetime(value: Any) -> Any:
    """
    Coerce calendar dates and naive datetimes to UTC-aware datetimes.

    A bare date is taken as midnight UTC. Values of other types are
    returned unchanged so pydantic can report them.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=UTC)
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return value
        return to_aware_datetime(parsed)
    return value


class AccountSnapshot(BaseModel):
    """
    Model for the member's plan state at the time of a dashboard load.

    Building it directly validates with pydantic and raises ValidationError.
    InvalidSnapshot is raised at the boundaries: parse_account_snapshot()
    for raw payloads and EarningsCalculator.compute() for unvalidated models.
    """

    model_config = ConfigDict(frozen=True)

    plan_amount: Decimal = Field(..., ge=0, description="Initial plan amount")
    joined_date: datetime = Field(..., description="When the plan became active")
    payment_status: bool = Field(
        default=False, description="Whether the plan payment has been completed"
    )

    @field_validator("joined_date", mode="before")
    @classmethod
    def normalize_joined_date(cls, v: Any) -> Any:
        """Accept dates and naive datetimes as UTC."""
        return to_aware_datetime(v)


class DownlineMember(BaseModel):
    """A referred member on one level of the downline."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    earnings: Decimal | None = Field(default=None, ge=0)
    joined_date: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        """Backends send numeric ids as well as strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("joined_date", mode="before")
    @classmethod
    def normalize_joined_date(cls, v: Any) -> Any:
        """Accept dates and naive datetimes as UTC."""
        return to_aware_datetime(v)


class DownlineTree(BaseModel):
    """
    Seven ordered levels of referred members.

    Level 1 holds direct referrals. Levels are assumed disjoint;
    the upstream data source guarantees it.
    """

    model_config = ConfigDict(frozen=True)

    level1: tuple[DownlineMember, ...] = ()
    level2: tuple[DownlineMember, ...] = ()
    level3: tuple[DownlineMember, ...] = ()
    level4: tuple[DownlineMember, ...] = ()
    level5: tuple[DownlineMember, ...] = ()
    level6: tuple[DownlineMember, ...] = ()
    level7: tuple[DownlineMember, ...] = ()

    def levels(self) -> list[tuple[DownlineMember, ...]]:
        """Return levels in order, level 1 first."""
        return [
            self.level1,
            self.level2,
            self.level3,
            self.level4,
            self.level5,
            self.level6,
            self.level7,
        ]

    def level(self, number: int) -> tuple[DownlineMember, ...]:
        """
        Get members of a single level.

        Args:
            number: Level number (1-7)

        Returns:
            Members on that level

        Raises:
            ValueError: If number is outside 1-7
        """
        if not 1 <= number <= 7:
            raise ValueError(f"Downline level must be 1-7, got {number}")
        return self.levels()[number - 1]

    def total_team_size(self) -> int:
        """Count members across all seven levels."""
        return sum(len(members) for members in self.levels())


class DerivedEarnings(BaseModel):
    """Earnings figures derived from a snapshot; never persisted."""

    model_config = ConfigDict(frozen=True)

    elapsed_days: int = Field(..., ge=0, description="Days since the join date")
    remaining_days: int = Field(..., ge=0, description="Days left in the plan term")
    total_earnings: Decimal = Field(..., ge=0, description="Accrued earnings")
    remaining_amount: Decimal = Field(..., ge=0, description="Earnings still to accrue")
    available_balance: Decimal = Field(..., ge=0, description="Withdrawable earnings")
    total_team_size: int = Field(default=0, ge=0, description="Members across 7 levels")
    rank: RankLabel = Field(default=RankLabel.BRONZE, description="Rank for team size")
