"""PA-28-161 takeoff performance from the digitized POH chart.

This module ties the chart, validator, interpolation and wind correction
together behind a single calculation call.

Typical usage example:
    from ottoperf.performance import TakeoffCalculator, TakeoffRequest

    calc = TakeoffCalculator()
    result = calc.calculate_takeoff(
        TakeoffRequest(pressure_altitude_ft=1500, temperature_c=26.7, weight_lbs=2200)
    )
    print(f"Over 50 ft: {result.takeoff_distance_ft:.0f} ft")
"""

from dataclasses import dataclass

from ottoperf.performance.chart import PA28_161_CHART, ChartStore
from ottoperf.performance.interpolation import interpolate_base_distance, interpolate_speeds
from ottoperf.performance.validation import effective_altitude, validate_request
from ottoperf.performance.wind import apply_wind_correction


@dataclass(frozen=True)
class TakeoffRequest:
    """Conditions for a takeoff performance calculation.

    Attributes:
        pressure_altitude_ft: Pressure altitude (ft)
        temperature_c: Outside air temperature (°C)
        weight_lbs: Takeoff weight (lbs)
        wind_component_kts: Runway wind component (kts), positive for
            headwind, negative for tailwind
    """

    pressure_altitude_ft: float
    temperature_c: float
    weight_lbs: float
    wind_component_kts: float = 0.0


@dataclass(frozen=True)
class TakeoffResult:
    """Takeoff performance results.

    Attributes:
        takeoff_distance_ft: Distance to clear a 50 ft obstacle (ft)
        liftoff_speed_kias: Liftoff speed (KIAS)
        barrier_speed_kias: Speed over the 50 ft barrier (KIAS)
    """

    takeoff_distance_ft: float
    liftoff_speed_kias: float
    barrier_speed_kias: float


class TakeoffCalculator:
    """Calculate takeoff performance by interpolating the POH chart.

    The calculator holds no state besides a reference to an immutable chart,
    so one instance can serve any number of calls.

    Examples:
        >>> calc = TakeoffCalculator()
        >>> result = calc.calculate_takeoff(
        ...     TakeoffRequest(pressure_altitude_ft=0, temperature_c=15, weight_lbs=2000)
        ... )
        >>> round(result.takeoff_distance_ft)
        1612
    """

    def __init__(self, chart: ChartStore = PA28_161_CHART):
        """Initialize the calculator.

        Args:
            chart: Chart to interpolate. Defaults to the PA-28-161 Figure 5-6 chart.
        """
        self.chart = chart

    def base_distance(self, request: TakeoffRequest) -> float:
        """Calculate the zero-wind distance over 50 ft for a request.

        Raises:
            TakeoffValidationError: If the request is outside the chart.
        """
        validate_request(self.chart, request)
        return self._base_distance(request)

    def calculate_takeoff(self, request: TakeoffRequest) -> TakeoffResult:
        """Calculate takeoff distance and speeds.

        Args:
            request: Takeoff conditions.

        Returns:
            TakeoffResult with the wind-corrected distance and speeds.

        Raises:
            TakeoffValidationError: If the request is outside the chart.
        """
        validate_request(self.chart, request)

        distance = apply_wind_correction(
            self.chart, self._base_distance(request), request.wind_component_kts
        )
        liftoff, barrier = interpolate_speeds(self.chart, request.weight_lbs)

        return TakeoffResult(
            takeoff_distance_ft=distance,
            liftoff_speed_kias=liftoff,
            barrier_speed_kias=barrier,
        )

    def _base_distance(self, request: TakeoffRequest) -> float:
        return interpolate_base_distance(
            self.chart,
            effective_altitude(self.chart, request.pressure_altitude_ft),
            request.temperature_c,
            request.weight_lbs,
        )
