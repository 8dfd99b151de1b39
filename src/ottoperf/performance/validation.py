"""Range checks that keep takeoff requests inside the chart's domain.

Interpolation clamps silently at the chart edges, so anything the chart
does not cover must be rejected here first. Each check raises the
matching ``TakeoffValidationError`` subclass; the first failure wins.
NaN never compares inside a range, so it is rejected explicitly.
"""

import math
from typing import TYPE_CHECKING

from ottoperf.performance.chart import ChartStore
from ottoperf.performance.errors import (
    AltitudeOutOfRangeError,
    HeadwindOutOfRangeError,
    TailwindOutOfRangeError,
    TemperatureOutOfRangeError,
    WeightOutOfRangeError,
)

if TYPE_CHECKING:
    from ottoperf.performance.takeoff_calculator import TakeoffRequest


def effective_altitude(chart: ChartStore, altitude_ft: float) -> float:
    """Altitude used for lookup: anything below the chart floor reads as sea level."""
    return max(altitude_ft, chart.altitudes.minimum)


def validate_request(chart: ChartStore, request: "TakeoffRequest") -> None:
    """Check every request field against the chart bounds.

    Args:
        chart: Chart whose axes define the valid domain.
        request: Takeoff request to check.

    Raises:
        AltitudeOutOfRangeError: Altitude above the highest chart altitude.
        TemperatureOutOfRangeError: Temperature outside the chart range.
        WeightOutOfRangeError: Weight outside the chart range.
        HeadwindOutOfRangeError: Headwind above the highest headwind.
        TailwindOutOfRangeError: Tailwind above the highest tailwind.
    """
    altitudes = chart.altitudes
    if math.isnan(request.pressure_altitude_ft):
        raise AltitudeOutOfRangeError(request.pressure_altitude_ft, altitudes.maximum)
    if effective_altitude(chart, request.pressure_altitude_ft) > altitudes.maximum:
        raise AltitudeOutOfRangeError(request.pressure_altitude_ft, altitudes.maximum)

    temperatures = chart.temperatures
    if math.isnan(request.temperature_c):
        raise TemperatureOutOfRangeError(
            request.temperature_c, temperatures.maximum, temperatures.minimum, temperatures.maximum
        )
    if request.temperature_c < temperatures.minimum:
        raise TemperatureOutOfRangeError(
            request.temperature_c, temperatures.minimum, temperatures.minimum, temperatures.maximum
        )
    if request.temperature_c > temperatures.maximum:
        raise TemperatureOutOfRangeError(
            request.temperature_c, temperatures.maximum, temperatures.minimum, temperatures.maximum
        )

    weights = chart.weights
    if math.isnan(request.weight_lbs):
        raise WeightOutOfRangeError(request.weight_lbs, weights.maximum, weights.minimum, weights.maximum)
    if request.weight_lbs < weights.minimum:
        raise WeightOutOfRangeError(request.weight_lbs, weights.minimum, weights.minimum, weights.maximum)
    if request.weight_lbs > weights.maximum:
        raise WeightOutOfRangeError(request.weight_lbs, weights.maximum, weights.minimum, weights.maximum)

    wind = request.wind_component_kts
    if math.isnan(wind):
        raise HeadwindOutOfRangeError(wind, chart.headwinds.maximum)
    if wind > chart.headwinds.maximum:
        raise HeadwindOutOfRangeError(wind, chart.headwinds.maximum)
    if -wind > chart.tailwinds.maximum:
        raise TailwindOutOfRangeError(-wind, chart.tailwinds.maximum)
