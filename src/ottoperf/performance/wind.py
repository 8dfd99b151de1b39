"""Headwind and tailwind correction of the zero-wind takeoff distance.

The chart's wind grid is approximated linearly: distance drops about 10%
per 15 kts of headwind and grows about 10% per 5 kts of tailwind. The
correction factor is evaluated at the bracketing wind breakpoints and
blended with the bracket fraction, so winds beyond the chart's wind axis
clamp to the last breakpoint.
"""

from collections.abc import Callable

from ottoperf.performance.chart import Axis, ChartStore
from ottoperf.performance.interpolation import find_bracket, lerp

HEADWIND_REFERENCE_KTS = 15.0
TAILWIND_REFERENCE_KTS = 5.0
WIND_CORRECTION_STEP = 0.10


def headwind_factor(headwind_kts: float) -> float:
    """Distance multiplier for a headwind breakpoint."""
    return 1.0 - (headwind_kts / HEADWIND_REFERENCE_KTS) * WIND_CORRECTION_STEP


def tailwind_factor(tailwind_kts: float) -> float:
    """Distance multiplier for a tailwind breakpoint (positive knots)."""
    return 1.0 + (tailwind_kts / TAILWIND_REFERENCE_KTS) * WIND_CORRECTION_STEP


def _interpolated_factor(axis: Axis, magnitude: float, factor: Callable[[float], float]) -> float:
    bracket = find_bracket(axis.values, magnitude)
    return lerp(
        factor(axis.value(bracket.low)),
        factor(axis.value(bracket.high)),
        bracket.fraction,
    )


def apply_wind_correction(chart: ChartStore, base_distance_ft: float, wind_component_kts: float) -> float:
    """Correct a zero-wind distance for the runway wind component.

    Args:
        chart: Chart providing the headwind and tailwind breakpoints.
        base_distance_ft: Zero-wind distance over 50 ft (ft).
        wind_component_kts: Wind along the runway, positive for headwind,
            negative for tailwind.

    Returns:
        Corrected distance in feet. Unchanged when there is no wind.

    Examples:
        >>> from ottoperf.performance.chart import PA28_161_CHART
        >>> apply_wind_correction(PA28_161_CHART, 2000.0, 15.0)
        1800.0
    """
    if wind_component_kts == 0:
        return base_distance_ft

    if wind_component_kts > 0:
        factor = _interpolated_factor(chart.headwinds, wind_component_kts, headwind_factor)
    else:
        factor = _interpolated_factor(chart.tailwinds, -wind_component_kts, tailwind_factor)

    return base_distance_ft * factor
