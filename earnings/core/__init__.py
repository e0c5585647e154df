"""
Core earnings functionality.

Calculator, rank evaluator and data models.
"""

from earnings.core.calculator import EarningsCalculator
from earnings.core.models import (
    AccountSnapshot,
    DerivedEarnings,
    DownlineMember,
    DownlineTree,
)
from earnings.core.rank import RankEvaluator

__all__ = [
    "EarningsCalculator",
    "RankEvaluator",
    "AccountSnapshot",
    "DerivedEarnings",
    "DownlineMember",
    "DownlineTree",
]
