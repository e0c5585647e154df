"""Tests for admin console operations."""

from datetime import date
from decimal import Decimal

import pytest

from app.services.admin_service import (
    KycStatus,
    MemberNotFound,
    MemberRecord,
    adjust_earnings,
    platform_stats,
    search_members,
    update_kyc_status,
)


@pytest.fixture
def members() -> list[MemberRecord]:
    """Three members in each KYC state."""
    return [
        MemberRecord(
            id="1",
            name="John Doe",
            mobile="+91 9876543210",
            email="john@example.com",
            kyc_status=KycStatus.APPROVED,
            total_earnings=Decimal("25650.50"),
            available_balance=Decimal("15420.75"),
            joined_date=date(2024, 1, 15),
            last_active=date(2024, 7, 22),
        ),
        MemberRecord(
            id="2",
            name="Alice Smith",
            mobile="+91 9876543211",
            email="alice@example.com",
            kyc_status=KycStatus.PENDING,
            total_earnings=Decimal("5200.00"),
            available_balance=Decimal("3100.00"),
            joined_date=date(2024, 2, 1),
        ),
        MemberRecord(
            id="3",
            name="Bob Johnson",
            mobile="+91 9876543212",
            email="bob@example.com",
            kyc_status=KycStatus.REJECTED,
            joined_date=date(2024, 2, 15),
        ),
    ]


class TestSearchMembers:
    """Tests for search_members."""

    def test_empty_term_returns_all(self, members) -> None:
        """Blank search shows everyone."""
        assert search_members(members, "  ") == members

    def test_name_case_insensitive(self, members) -> None:
        """Names match regardless of case."""
        result = search_members(members, "ALICE")

        assert [m.id for m in result] == ["2"]

    def test_email(self, members) -> None:
        """Emails match."""
        result = search_members(members, "bob@")

        assert [m.id for m in result] == ["3"]

    def test_mobile_substring(self, members) -> None:
        """Mobile numbers match as substrings."""
        result = search_members(members, "987654321")

        assert [m.id for m in result] == ["1", "2", "3"]

    def test_no_match(self, members) -> None:
        """Unknown terms give an empty list."""
        assert search_members(members, "zzz") == []


class TestUpdateKycStatus:
    """Tests for update_kyc_status."""

    def test_approve_pending(self, members) -> None:
        """Pending member becomes approved."""
        updated = update_kyc_status(members, "2", KycStatus.APPROVED)

        assert updated[1].kyc_status == KycStatus.APPROVED
        assert updated[0] == members[0]

    def test_input_untouched(self, members) -> None:
        """Input records are not mutated."""
        update_kyc_status(members, "2", KycStatus.REJECTED)

        assert members[1].kyc_status == KycStatus.PENDING

    def test_accepts_string_status(self, members) -> None:
        """Plain status strings are accepted."""
        updated = update_kyc_status(members, "3", "approved")

        assert updated[2].kyc_status == KycStatus.APPROVED

    def test_unknown_member(self, members) -> None:
        """Unknown id raises MemberNotFound."""
        with pytest.raises(MemberNotFound):
            update_kyc_status(members, "99", KycStatus.APPROVED)


class TestAdjustEarnings:
    """Tests for adjust_earnings."""

    def test_add_earnings(self, members) -> None:
        """Adjustment applies to total and available."""
        updated = adjust_earnings(members, "1", Decimal("1000"))

        assert updated[0].total_earnings == Decimal("26650.50")
        assert updated[0].available_balance == Decimal("16420.75")
        assert members[0].total_earnings == Decimal("25650.50")

    def test_subtract_earnings(self, members) -> None:
        """Negative adjustments are allowed while figures stay non-negative."""
        updated = adjust_earnings(members, "2", Decimal("-3100"))

        assert updated[1].total_earnings == Decimal("2100.00")
        assert updated[1].available_balance == Decimal("0.00")

    def test_cannot_go_negative(self, members) -> None:
        """Adjustments cannot overdraw."""
        with pytest.raises(ValueError):
            adjust_earnings(members, "3", Decimal("-1"))

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("NaN")])
    def test_rejects_empty_amount(self, members, amount) -> None:
        """Zero and NaN adjustments are rejected."""
        with pytest.raises(ValueError):
            adjust_earnings(members, "1", amount)

    def test_unknown_member(self, members) -> None:
        """Unknown id raises MemberNotFound."""
        with pytest.raises(MemberNotFound):
            adjust_earnings(members, "99", Decimal("10"))


class TestPlatformStats:
    """Tests for platform_stats."""

    def test_totals(self, members) -> None:
        """Totals cover all members."""
        stats = platform_stats(members)

        assert stats.total_users == 3
        assert stats.total_earnings == Decimal("30850.50")
        assert stats.pending_kyc == 1
        assert stats.approved_users == 1

    def test_empty(self) -> None:
        """No members, all zero."""
        stats = platform_stats([])

        assert stats.total_users == 0
        assert stats.total_earnings == Decimal("0")
