"""
Default constants for the earnings calculator.

Plan term, accrual rate and rank thresholds used by the member dashboard.
"""

from decimal import Decimal

from earnings.types import RankLabel


# Fixed plan term measured from the join date
PLAN_TERM_DAYS = 730

# Daily accrual: RATE_PER_UNIT for every RATE_UNIT of plan amount
RATE_UNIT = Decimal("10000")
RATE_PER_UNIT = Decimal("40")

# Share of accrued earnings eligible for withdrawal (the rest is held back)
WITHDRAWABLE_SHARE = Decimal("0.8")

# Used when the backend omits the plan amount
DEFAULT_PLAN_AMOUNT = Decimal("50000")

DOWNLINE_DEPTH = 7

# Descending: the first threshold the team size reaches wins
RANK_THRESHOLDS: list[tuple[int, RankLabel]] = [
    (100, RankLabel.PLATINUM),
    (50, RankLabel.GOLD),
    (20, RankLabel.SILVER),
    (0, RankLabel.BRONZE),
]


def get_rank_threshold(rank: RankLabel) -> int:
    """
    Get minimum team size for a rank.

    Args:
        rank: Rank label

    Returns:
        Minimum total team size required for the rank

    Example:
        >>> get_rank_threshold(RankLabel.GOLD)
        50
    """
    for threshold, label in RANK_THRESHOLDS:
        if label == rank:
            return threshold
    raise ValueError(f"Unknown rank: {rank}")
