"""Tests for rank evaluation and downline team size."""

import pytest

from earnings import (
    RANK_THRESHOLDS,
    DownlineTree,
    RankEvaluator,
    RankLabel,
    get_rank_threshold,
)


class TestRankEvaluator:
    """Tests for RankEvaluator class."""

    @pytest.fixture
    def evaluator(self) -> RankEvaluator:
        """Create evaluator with default thresholds."""
        return RankEvaluator()

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, RankLabel.BRONZE),
            (19, RankLabel.BRONZE),
            (20, RankLabel.SILVER),
            (49, RankLabel.SILVER),
            (50, RankLabel.GOLD),
            (99, RankLabel.GOLD),
            (100, RankLabel.PLATINUM),
            (5000, RankLabel.PLATINUM),
        ],
    )
    def test_rank_thresholds(self, evaluator, size, expected) -> None:
        """Each tier starts at its threshold."""
        assert evaluator.rank(size) == expected

    def test_platinum_is_reachable(self, evaluator) -> None:
        """Gold threshold does not shadow Platinum."""
        assert evaluator.rank(100) == RankLabel.PLATINUM
        assert evaluator.rank(100) != RankLabel.GOLD

    def test_negative_size_rejected(self, evaluator) -> None:
        """Negative team size is an error."""
        with pytest.raises(ValueError):
            evaluator.rank(-1)

    def test_custom_thresholds_are_sorted(self) -> None:
        """Thresholds given in ascending order still check highest first."""
        evaluator = RankEvaluator([
            (0, RankLabel.BRONZE),
            (5, RankLabel.SILVER),
            (10, RankLabel.GOLD),
        ])

        assert evaluator.rank(4) == RankLabel.BRONZE
        assert evaluator.rank(7) == RankLabel.SILVER
        assert evaluator.rank(10) == RankLabel.GOLD

    def test_rank_for_downline(self, evaluator, make_downline) -> None:
        """Downline rank uses the sum over all levels."""
        downline = make_downline(10, 10, 10, 10, 5, 3, 2)

        assert evaluator.rank_for_downline(downline) == RankLabel.GOLD

    def test_rank_labels(self) -> None:
        """Labels render as shown on the dashboard badge."""
        assert [label.value for label in RankLabel] == ["Bronze", "Silver", "Gold", "Platinum"]


class TestRankConstants:
    """Tests for rank threshold constants."""

    def test_thresholds_descending(self) -> None:
        """Default table is ordered highest threshold first."""
        values = [threshold for threshold, _ in RANK_THRESHOLDS]
        assert values == sorted(values, reverse=True)

    def test_get_rank_threshold(self) -> None:
        """Threshold lookup by label."""
        assert get_rank_threshold(RankLabel.PLATINUM) == 100
        assert get_rank_threshold(RankLabel.GOLD) == 50
        assert get_rank_threshold(RankLabel.SILVER) == 20
        assert get_rank_threshold(RankLabel.BRONZE) == 0


class TestDownlineTree:
    """Tests for DownlineTree team size."""

    def test_empty_tree(self) -> None:
        """Tree with no members has size zero."""
        tree = DownlineTree()

        assert tree.total_team_size() == 0
        assert len(tree.levels()) == 7

    @pytest.mark.parametrize(
        "sizes",
        [
            (3, 4, 1),
            (0, 0, 0, 0, 0, 0, 9),
            (1, 1, 1, 1, 1, 1, 1),
            (12,),
        ],
    )
    def test_size_is_sum_of_levels(self, make_downline, sizes) -> None:
        """Team size equals the sum of level lengths."""
        tree = make_downline(*sizes)

        assert tree.total_team_size() == sum(sizes)

    def test_level_lookup(self, make_downline) -> None:
        """Levels are numbered from 1."""
        tree = make_downline(2, 5)

        assert len(tree.level(1)) == 2
        assert len(tree.level(2)) == 5
        assert tree.level(7) == ()

    @pytest.mark.parametrize("number", [0, 8])
    def test_level_out_of_range(self, make_downline, number) -> None:
        """Only levels 1-7 exist."""
        with pytest.raises(ValueError):
            make_downline(1).level(number)
