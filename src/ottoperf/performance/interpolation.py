"""Bracket search and chart interpolation.

A query point is located on each axis independently, then the tabulated
distances are reduced by linear interpolation in a fixed order: weight,
then temperature, then altitude. Queries outside an axis clamp to its
boundary breakpoint; the chart is never extrapolated.
"""

from collections.abc import Sequence
from typing import NamedTuple

from ottoperf.performance.chart import ChartStore


class Bracket(NamedTuple):
    """Breakpoints surrounding a query value on one axis.

    Attributes:
        low: Index of the breakpoint at or below the value.
        high: Index of the breakpoint above the value (equal to ``low`` when
            the value sits on a breakpoint or is clamped).
        fraction: Position between ``low`` and ``high``, in [0, 1).
    """

    low: int
    high: int
    fraction: float


def find_bracket(breakpoints: Sequence[float], value: float) -> Bracket:
    """Locate the breakpoints surrounding ``value``.

    Args:
        breakpoints: Strictly increasing breakpoint values.
        value: Query value.

    Returns:
        Bracket with a zero fraction when the value is clamped or lands on
        a breakpoint exactly.

    Examples:
        >>> find_bracket([0, 1000, 2000], 1500)
        Bracket(low=1, high=2, fraction=0.5)
        >>> find_bracket([0, 1000, 2000], -500)
        Bracket(low=0, high=0, fraction=0.0)
    """
    last = len(breakpoints) - 1
    if value <= breakpoints[0]:
        return Bracket(0, 0, 0.0)
    if value >= breakpoints[last]:
        return Bracket(last, last, 0.0)

    for i in range(last):
        lower, upper = breakpoints[i], breakpoints[i + 1]
        if lower <= value < upper:
            if value == lower:
                return Bracket(i, i, 0.0)
            return Bracket(i, i + 1, (value - lower) / (upper - lower))

    # Only reachable with NaN, which compares false against every breakpoint
    raise ValueError(f"Cannot bracket value {value!r}")


def lerp(low: float, high: float, fraction: float) -> float:
    """Linear blend that returns ``low`` exactly when fraction is 0."""
    return low * (1 - fraction) + high * fraction


def interpolate_base_distance(
    chart: ChartStore, altitude_ft: float, temperature_c: float, weight_lbs: float
) -> float:
    """Interpolate the zero-wind takeoff distance over a 50 ft obstacle.

    Args:
        chart: Chart to read.
        altitude_ft: Pressure altitude (ft).
        temperature_c: Outside air temperature (°C).
        weight_lbs: Takeoff weight (lbs).

    Returns:
        Distance in feet.
    """
    alt = find_bracket(chart.altitudes.values, altitude_ft)
    temp = find_bracket(chart.temperatures.values, temperature_c)
    weight = find_bracket(chart.weights.values, weight_lbs)

    # Weight first: one value per (altitude, temperature) corner
    by_weight = [
        [
            lerp(
                chart.base_distance(alt_index, temp_index, weight.low),
                chart.base_distance(alt_index, temp_index, weight.high),
                weight.fraction,
            )
            for temp_index in (temp.low, temp.high)
        ]
        for alt_index in (alt.low, alt.high)
    ]

    by_temperature = [lerp(row[0], row[1], temp.fraction) for row in by_weight]

    return lerp(by_temperature[0], by_temperature[1], alt.fraction)


def interpolate_speeds(chart: ChartStore, weight_lbs: float) -> tuple[float, float]:
    """Interpolate liftoff and 50 ft barrier speeds for a weight.

    Speeds depend on weight only.

    Returns:
        Tuple of (liftoff speed, barrier speed) in KIAS.
    """
    weight = find_bracket(chart.weights.values, weight_lbs)
    liftoff = lerp(chart.liftoff_speed(weight.low), chart.liftoff_speed(weight.high), weight.fraction)
    barrier = lerp(chart.barrier_speed(weight.low), chart.barrier_speed(weight.high), weight.fraction)
    return liftoff, barrier
