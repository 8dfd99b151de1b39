"""Tests for bracket search and chart interpolation."""

import itertools

import numpy as np
import pytest

from ottoperf.performance import PA28_161_CHART
from ottoperf.performance.interpolation import (
    Bracket,
    find_bracket,
    interpolate_base_distance,
    interpolate_speeds,
    lerp,
)

WEIGHTS = [1600, 1800, 2000, 2200, 2325]


class TestFindBracket:
    """Test bracket search on a single axis."""

    def test_below_minimum_clamps_low(self) -> None:
        """Test values below the axis clamp to the first breakpoint."""
        assert find_bracket(WEIGHTS, 1000) == Bracket(0, 0, 0.0)

    def test_above_maximum_clamps_high(self) -> None:
        """Test values above the axis clamp to the last breakpoint."""
        assert find_bracket(WEIGHTS, 3000) == Bracket(4, 4, 0.0)

    def test_exact_endpoints(self) -> None:
        """Test the first and last breakpoints need no interpolation."""
        assert find_bracket(WEIGHTS, 1600) == Bracket(0, 0, 0.0)
        assert find_bracket(WEIGHTS, 2325) == Bracket(4, 4, 0.0)

    @pytest.mark.parametrize(("index", "value"), list(enumerate(WEIGHTS)))
    def test_exact_breakpoint_has_zero_fraction(self, index: int, value: float) -> None:
        """Test every breakpoint resolves to itself."""
        bracket = find_bracket(WEIGHTS, value)
        assert bracket.low == index
        assert bracket.fraction == 0.0

    def test_between_breakpoints(self) -> None:
        """Test the fraction is measured from the lower breakpoint."""
        assert find_bracket(WEIGHTS, 2100) == Bracket(2, 3, 0.5)
        assert find_bracket(WEIGHTS, 2262.5) == Bracket(3, 4, 0.5)

    def test_single_breakpoint_axis(self) -> None:
        """Test a one-point axis always clamps."""
        assert find_bracket([15.0], -5.0) == Bracket(0, 0, 0.0)
        assert find_bracket([15.0], 40.0) == Bracket(0, 0, 0.0)

    def test_fraction_in_unit_interval(self) -> None:
        """Test fractions stay within [0, 1) across the axis."""
        for value in np.linspace(1500, 2400, 181):
            bracket = find_bracket(WEIGHTS, float(value))
            assert 0.0 <= bracket.fraction < 1.0
            assert bracket.high - bracket.low in (0, 1)

    def test_nan_rejected(self) -> None:
        """Test NaN cannot be bracketed."""
        with pytest.raises(ValueError):
            find_bracket(WEIGHTS, float("nan"))


class TestLerp:
    """Test the linear blend."""

    def test_zero_fraction_is_exact(self) -> None:
        """Test fraction 0 returns the low value bit-for-bit."""
        assert lerp(0.1 + 0.2, 1234.5, 0.0) == 0.1 + 0.2

    def test_midpoint(self) -> None:
        assert lerp(1000.0, 2000.0, 0.5) == 1500.0


class TestBaseDistance:
    """Test trilinear interpolation of the distance table."""

    def test_grid_points_reproduce_table(self) -> None:
        """Test every grid point returns exactly the stored distance."""
        chart = PA28_161_CHART
        for (a, alt), (t, temp), (w, weight) in itertools.product(
            enumerate(chart.altitudes.values),
            enumerate(chart.temperatures.values),
            enumerate(chart.weights.values),
        ):
            assert interpolate_base_distance(chart, alt, temp, weight) == chart.base_distance(a, t, w)

    def test_midpoint_along_each_axis(self) -> None:
        """Test single-axis midpoints average the neighbors."""
        chart = PA28_161_CHART
        # 500 ft between 0 (1500) and 1000 ft (1600) at 0°C, 2000 lbs
        assert interpolate_base_distance(chart, 500, 0, 2000) == pytest.approx(1550.0)
        # 10°C between 0°C (1500) and 20°C (1650) at sea level, 2000 lbs
        assert interpolate_base_distance(chart, 0, 10, 2000) == pytest.approx(1575.0)
        # 2100 lbs between 2000 (1500) and 2200 lbs (1650) at sea level, 0°C
        assert interpolate_base_distance(chart, 0, 0, 2100) == pytest.approx(1575.0)

    def test_trilinear_point(self) -> None:
        """Test a point interpolated along all three axes."""
        # 1500 ft, 80°F, 2325 lbs: 2050 ft at 1000 ft and 2150 ft at 2000 ft
        distance = interpolate_base_distance(PA28_161_CHART, 1500, (80 - 32) * 5 / 9, 2325)
        assert distance == pytest.approx(2100.0)

    def test_sea_level_standard_day(self) -> None:
        """Test sea level, 15°C, 2000 lbs."""
        assert interpolate_base_distance(PA28_161_CHART, 0, 15, 2000) == pytest.approx(1612.5)

    @pytest.mark.parametrize(
        ("query", "boundary"),
        [
            ((-500, 0, 2000), (0, 0, 2000)),
            ((9000, 0, 2000), (7000, 0, 2000)),
            ((3000, -60, 2000), (3000, -40, 2000)),
            ((3000, 55, 2000), (3000, 40, 2000)),
            ((3000, 0, 1200), (3000, 0, 1600)),
            ((3000, 0, 2600), (3000, 0, 2325)),
            ((-1000, -80, 1000), (0, -40, 1600)),
            ((10000, 80, 3000), (7000, 40, 2325)),
        ],
    )
    def test_clamps_outside_chart(self, query: tuple, boundary: tuple) -> None:
        """Test queries beyond an axis return the boundary value, no extrapolation."""
        assert interpolate_base_distance(PA28_161_CHART, *query) == interpolate_base_distance(
            PA28_161_CHART, *boundary
        )

    @pytest.mark.parametrize("altitude", [0, 1500, 3333, 7000])
    @pytest.mark.parametrize("temperature", [-40, -7.5, 26.7, 40])
    def test_monotonic_in_weight(self, altitude: float, temperature: float) -> None:
        """Test heavier never means shorter."""
        distances = [
            interpolate_base_distance(PA28_161_CHART, altitude, temperature, float(w))
            for w in np.linspace(1600, 2325, 59)
        ]
        assert all(b >= a for a, b in zip(distances, distances[1:]))


class TestSpeeds:
    """Test weight interpolation of liftoff and barrier speeds."""

    def test_breakpoint_speeds(self) -> None:
        assert interpolate_speeds(PA28_161_CHART, 2200) == (48.0, 54.0)
        assert interpolate_speeds(PA28_161_CHART, 2325) == (50.0, 55.0)

    def test_interpolated_speeds(self) -> None:
        """Test speeds between weight breakpoints."""
        liftoff, barrier = interpolate_speeds(PA28_161_CHART, 2262.5)
        assert liftoff == pytest.approx(49.0)
        assert barrier == pytest.approx(54.5)

    def test_speeds_clamp(self) -> None:
        """Test speeds clamp outside the weight axis."""
        assert interpolate_speeds(PA28_161_CHART, 1000) == (42.0, 48.0)
        assert interpolate_speeds(PA28_161_CHART, 5000) == (50.0, 55.0)
