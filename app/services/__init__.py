"""
Services.

Business logic layer.
"""

from app.services.admin_service import (
    KycStatus,
    MemberNotFound,
    MemberRecord,
    PlatformStats,
    adjust_earnings,
    platform_stats,
    search_members,
    update_kyc_status,
)
from app.services.dashboard_service import (
    DashboardService,
    DashboardSummary,
    UserDataSource,
)
from app.services.user_data_client import (
    InMemoryUserDataSource,
    UserDataClient,
    UserDataFetchError,
)


__all__ = [
    # Dashboard
    "DashboardService",
    "DashboardSummary",
    "UserDataSource",
    # Backend access
    "UserDataClient",
    "InMemoryUserDataSource",
    "UserDataFetchError",
    # Admin
    "KycStatus",
    "MemberNotFound",
    "MemberRecord",
    "PlatformStats",
    "adjust_earnings",
    "platform_stats",
    "search_members",
    "update_kyc_status",
]
