"""Takeoff performance engine.

This package reproduces the PA-28-161 takeoff distance chart:
- Digitized chart data (altitude, temperature, weight, wind breakpoints)
- Bracket search and trilinear interpolation of the distance table
- Weight-dependent liftoff and 50 ft barrier speeds
- Headwind/tailwind correction
- Input validation against the chart's domain
"""

from ottoperf.performance.chart import PA28_161_CHART, Axis, ChartAxis, ChartStore
from ottoperf.performance.errors import (
    AltitudeOutOfRangeError,
    ChartError,
    HeadwindOutOfRangeError,
    IndexOutOfRangeError,
    PerformanceError,
    TailwindOutOfRangeError,
    TakeoffValidationError,
    TemperatureOutOfRangeError,
    WeightOutOfRangeError,
)
from ottoperf.performance.takeoff_calculator import TakeoffCalculator, TakeoffRequest, TakeoffResult

__all__ = [
    "PA28_161_CHART",
    "AltitudeOutOfRangeError",
    "Axis",
    "ChartAxis",
    "ChartError",
    "ChartStore",
    "HeadwindOutOfRangeError",
    "IndexOutOfRangeError",
    "PerformanceError",
    "TailwindOutOfRangeError",
    "TakeoffCalculator",
    "TakeoffRequest",
    "TakeoffResult",
    "TakeoffValidationError",
    "TemperatureOutOfRangeError",
    "WeightOutOfRangeError",
]
