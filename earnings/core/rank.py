"""Rank evaluation from downline size."""

from earnings.constants import RANK_THRESHOLDS
from earnings.core.models import DownlineTree
from earnings.types import RankLabel


class RankEvaluator:
    """
    Map total team size to a rank label.

    Thresholds are checked in descending order, so every tier
    including Platinum is reachable.
    """

    def __init__(self, thresholds: list[tuple[int, RankLabel]] | None = None) -> None:
        table = thresholds if thresholds is not None else RANK_THRESHOLDS
        self.thresholds = sorted(table, key=lambda item: item[0], reverse=True)

    def rank(self, total_team_size: int) -> RankLabel:
        """
        Get rank for a team size.

        Args:
            total_team_size: Members across all downline levels

        Returns:
            Highest rank whose threshold the size reaches

        Raises:
            ValueError: If team size is negative

        Example:
            >>> RankEvaluator().rank(100)
            <RankLabel.PLATINUM: 'Platinum'>
        """
        if total_team_size < 0:
            raise ValueError(f"Team size cannot be negative: {total_team_size}")

        for threshold, label in self.thresholds:
            if total_team_size >= threshold:
                return label
        return RankLabel.BRONZE

    def rank_for_downline(self, downline: DownlineTree) -> RankLabel:
        """Get rank for the total size of a downline tree."""
        return self.rank(downline.total_team_size())
