"""
Datetime utilities.

Timezone-aware clock used as the evaluation time for earnings.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time in UTC with timezone info."""
    return datetime.now(UTC)
