"""Tests for indicator tier calculation."""

import pytest

from dotpager.indicator.calculator import compute_tiers, is_overflow, window_bounds
from dotpager.indicator.tiers import ScaleTier

GONE = ScaleTier.GONE
SMALLEST = ScaleTier.SMALLEST
SMALL = ScaleTier.SMALL
NORMAL = ScaleTier.NORMAL
SELECTED = ScaleTier.SELECTED


def _visible(tiers):
    return [tier for tier in tiers if tier is not GONE]


class TestScaleTier:
    """Test tier scale factors."""

    def test_scale_factors(self):
        assert [tier.scale for tier in ScaleTier] == [0.0, 0.2, 0.4, 0.6, 1.0]

    def test_only_gone_is_hidden(self):
        assert not GONE.visible
        assert all(tier.visible for tier in ScaleTier if tier is not GONE)

    @pytest.mark.parametrize(
        "scale,expected",
        [(0.0, GONE), (0.05, GONE), (0.25, SMALLEST), (0.45, SMALL), (0.7, NORMAL), (0.95, SELECTED)],
    )
    def test_from_scale_picks_nearest(self, scale, expected):
        assert ScaleTier.from_scale(scale) is expected


class TestGuards:
    """Invalid selections are ignored rather than raising."""

    def test_zero_pages(self):
        assert compute_tiers(0, 0, 9) is None

    def test_negative_selection(self):
        assert compute_tiers(-1, 20, 9) is None
        assert compute_tiers(-1, 3, 9) is None

    def test_selection_past_end(self):
        assert compute_tiers(21, 20, 9) is None
        assert compute_tiers(4, 3, 9) is None

    def test_selection_equal_to_count_is_accepted(self):
        """The guard only rejects positions greater than the count."""
        tiers = compute_tiers(20, 20, 9)

        assert tiers is not None
        assert len(tiers) == 20
        assert SELECTED not in tiers

    def test_selection_equal_to_count_in_simple_mode(self):
        assert compute_tiers(3, 3, 9) == [NORMAL, NORMAL, NORMAL]


class TestSimpleMode:
    """Up to max_visible pages every dot is shown."""

    def test_scenario_three_pages(self):
        assert compute_tiers(1, 3, 9) == [NORMAL, SELECTED, NORMAL]

    def test_exactly_max_visible_is_simple(self):
        assert not is_overflow(9, 9)
        tiers = compute_tiers(8, 9, 9)
        assert tiers == [NORMAL] * 8 + [SELECTED]

    @pytest.mark.parametrize("total", [1, 2, 5, 9])
    def test_one_selected_rest_normal(self, total):
        for position in range(total):
            tiers = compute_tiers(position, total, 9)
            assert tiers.count(SELECTED) == 1
            assert tiers[position] is SELECTED
            assert tiers.count(NORMAL) == total - 1


class TestOverflowScenarios:
    """Known layouts for 20 pages with 9 visible dots."""

    def test_first_page(self):
        tiers = compute_tiers(0, 20, 9)

        assert tiers == [SELECTED] + [NORMAL] * 6 + [SMALL, SMALLEST] + [GONE] * 11

    def test_last_page_pins_window_to_tail(self):
        tiers = compute_tiers(19, 20, 9)

        assert window_bounds(19, 20, 9) == (11, True)
        assert tiers[:11] == [GONE] * 11
        assert tiers[11:] == [SMALLEST, SMALL] + [NORMAL] * 6 + [SELECTED]

    def test_sixth_page_tapers_leading_edge(self):
        tiers = compute_tiers(6, 20, 9)

        assert window_bounds(6, 20, 9) == (1, False)
        assert tiers[:10] == [
            GONE,
            SMALLEST,
            SMALL,
            NORMAL,
            NORMAL,
            NORMAL,
            SELECTED,
            NORMAL,
            SMALL,
            SMALLEST,
        ]
        assert tiers[10:] == [GONE] * 10

    def test_fifth_page_tapers_only_first_dot(self):
        tiers = compute_tiers(5, 20, 9)

        assert tiers[:9] == [SMALL, NORMAL, NORMAL, NORMAL, NORMAL, SELECTED, NORMAL, SMALL, SMALLEST]
        assert tiers[9:] == [GONE] * 11

    def test_window_slides_with_selection(self):
        tiers = compute_tiers(10, 20, 9)

        # start = 10 - 9 + 4
        assert window_bounds(10, 20, 9) == (5, False)
        assert tiers[5] is SMALLEST
        assert tiers[6] is SMALL
        assert tiers[10] is SELECTED
        assert tiers[12] is SMALL
        assert tiers[13] is SMALLEST
        assert tiers[:5] == [GONE] * 5
        assert tiers[14:] == [GONE] * 6

    def test_leading_taper_uses_absolute_position(self):
        """Page 6 tapers the first dot even when the window starts at page 0."""
        tiers = compute_tiers(6, 30, 12)

        assert window_bounds(6, 30, 12) == (0, False)
        assert tiers[0] is SMALLEST
        assert tiers[1] is SMALL

    def test_selection_equal_to_count_keeps_tail_window(self):
        tiers = compute_tiers(20, 20, 9)

        assert tiers[11:] == [SMALLEST, SMALL] + [NORMAL] * 7


class TestOverflowProperties:
    """Properties that hold for every valid overflow selection."""

    CASES = [(6, 5), (12, 5), (10, 7), (20, 9), (40, 9), (25, 12)]

    @pytest.mark.parametrize("total,max_visible", CASES)
    def test_single_selected_at_position(self, total, max_visible):
        for position in range(total):
            tiers = compute_tiers(position, total, max_visible)
            assert len(tiers) == total
            assert tiers.count(SELECTED) == 1
            assert tiers.index(SELECTED) == position

    @pytest.mark.parametrize("total,max_visible", CASES)
    def test_window_never_exceeds_budget(self, total, max_visible):
        for position in range(total + 1):
            tiers = compute_tiers(position, total, max_visible)
            assert len(_visible(tiers)) <= max_visible

    @pytest.mark.parametrize("total,max_visible", CASES)
    def test_pinned_tail_dots_stay_full_size(self, total, max_visible):
        for position in range(total + 1):
            _, pinned = window_bounds(position, total, max_visible)
            if not pinned:
                continue
            tiers = compute_tiers(position, total, max_visible)
            for index in (total - 1, total - 2):
                assert tiers[index] not in (GONE, SMALL, SMALLEST)

    @pytest.mark.parametrize("total,max_visible", CASES)
    def test_visible_dots_are_contiguous(self, total, max_visible):
        for position in range(total):
            tiers = compute_tiers(position, total, max_visible)
            shown = [i for i, tier in enumerate(tiers) if tier is not GONE]
            assert shown == list(range(shown[0], shown[-1] + 1))

    def test_same_input_same_output(self):
        assert compute_tiers(13, 40, 9) == compute_tiers(13, 40, 9)
