"""
Type definitions for the earnings package.

Rank labels and the shape of the raw user-data payload returned
by the backend.
"""

from enum import Enum
from typing import TypedDict


class RankLabel(str, Enum):
    """Member rank derived from total team size."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


class DownlineMemberDict(TypedDict, total=False):
    """
    One referred member as sent by the backend.

    Attributes:
        id: Member id
        name: Display name
        earnings: Member's own total earnings
        joinedDate: ISO date the member joined
    """
    id: str
    name: str
    earnings: float
    joinedDate: str


class DownlineDict(TypedDict, total=False):
    """Downline levels keyed level1..level7."""
    level1: list[DownlineMemberDict]
    level2: list[DownlineMemberDict]
    level3: list[DownlineMemberDict]
    level4: list[DownlineMemberDict]
    level5: list[DownlineMemberDict]
    level6: list[DownlineMemberDict]
    level7: list[DownlineMemberDict]


class UserDataDict(TypedDict, total=False):
    """
    Response body of GET /user_data/{id}.

    Attributes:
        id: Member id
        planAmount: Plan amount (defaults to 50000 when absent)
        joinedDate: Join date or timestamp (defaults to now when absent)
        paymentStatus: Whether the plan payment has completed
        downline: Seven-level downline
    """
    id: str
    planAmount: float | str
    joinedDate: str | int
    paymentStatus: bool
    downline: DownlineDict
