"""
Admin service.

Operations behind the admin console: member search, KYC review,
manual earnings adjustment and platform totals. Member records are
immutable; every update returns a new list.
"""

from datetime import date
from decimal import Decimal
from enum import Enum

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field


class KycStatus(str, Enum):
    """KYC review state of a member."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class MemberNotFound(LookupError):
    """Raised when an admin operation targets an unknown member id."""

    def __init__(self, member_id: str) -> None:
        self.member_id = member_id
        super().__init__(f"Member not found: {member_id}")


class MemberRecord(BaseModel):
    """Member row as shown in the admin console."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    mobile: str = ""
    email: str = ""
    kyc_status: KycStatus = KycStatus.PENDING
    total_earnings: Decimal = Field(default=Decimal("0"), ge=0)
    available_balance: Decimal = Field(default=Decimal("0"), ge=0)
    joined_date: date
    last_active: date | None = None


class PlatformStats(BaseModel):
    """Totals shown at the top of the admin console."""

    model_config = ConfigDict(frozen=True)

    total_users: int = Field(..., ge=0)
    total_earnings: Decimal = Field(..., ge=0)
    pending_kyc: int = Field(..., ge=0)
    approved_users: int = Field(..., ge=0)


def search_members(records: list[MemberRecord], term: str) -> list[MemberRecord]:
    """
    Filter members by name, mobile or email.

    Name and email match case-insensitively; mobile matches as a
    plain substring. An empty term returns every record.
    """
    term = term.strip()
    if not term:
        return list(records)

    needle = term.lower()
    return [
        record for record in records
        if needle in record.name.lower()
        or term in record.mobile
        or needle in record.email.lower()
    ]


def _index_of(records: list[MemberRecord], member_id: str) -> int:
    for index, record in enumerate(records):
        if record.id == member_id:
            return index
    raise MemberNotFound(member_id)


def update_kyc_status(
    records: list[MemberRecord],
    member_id: str,
    status: KycStatus,
) -> list[MemberRecord]:
    """
    Set the KYC status of one member.

    Args:
        records: Current member records
        member_id: Member to update
        status: New KYC status

    Returns:
        New list with the member's record replaced

    Raises:
        MemberNotFound: If no record has member_id
    """
    index = _index_of(records, member_id)
    updated = list(records)
    updated[index] = records[index].model_copy(update={"kyc_status": KycStatus(status)})

    logger.info(f"KYC status for member {member_id} set to {KycStatus(status).value}")
    return updated


def adjust_earnings(
    records: list[MemberRecord],
    member_id: str,
    amount: Decimal,
) -> list[MemberRecord]:
    """
    Manually add to (or subtract from) a member's earnings.

    The amount is applied to both total earnings and available balance.

    Args:
        records: Current member records
        member_id: Member to adjust
        amount: Signed adjustment amount

    Returns:
        New list with the member's record replaced

    Raises:
        MemberNotFound: If no record has member_id
        ValueError: If amount is zero or not finite, or the adjustment
            would make either figure negative
    """
    amount = Decimal(amount)
    if not amount.is_finite() or amount == 0:
        raise ValueError(f"Adjustment amount must be a non-zero number, got {amount}")

    index = _index_of(records, member_id)
    record = records[index]

    total_earnings = record.total_earnings + amount
    available_balance = record.available_balance + amount
    if total_earnings < 0 or available_balance < 0:
        raise ValueError(
            f"Adjustment {amount} would make earnings negative for member {member_id}"
        )

    updated = list(records)
    updated[index] = record.model_copy(update={
        "total_earnings": total_earnings,
        "available_balance": available_balance,
    })

    logger.info(f"Earnings for member {member_id} adjusted by {amount}")
    return updated


def platform_stats(records: list[MemberRecord]) -> PlatformStats:
    """Compute platform-wide totals over member records."""
    return PlatformStats(
        total_users=len(records),
        total_earnings=sum((record.total_earnings for record in records), Decimal("0")),
        pending_kyc=sum(1 for record in records if record.kyc_status == KycStatus.PENDING),
        approved_users=sum(1 for record in records if record.kyc_status == KycStatus.APPROVED),
    )
