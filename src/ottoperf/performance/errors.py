"""Exceptions raised by the takeoff performance engine.

Validation errors are the only failure a caller should ever see from a
correctly built chart. Index errors signal a chart whose tables do not
match its axes.
"""


class PerformanceError(Exception):
    """Base class for all performance engine errors."""


class ChartError(PerformanceError):
    """Raised when chart data is malformed."""


class IndexOutOfRangeError(ChartError, IndexError):
    """Raised when a chart table is accessed outside its bounds.

    Attributes:
        axis: Name of the axis (or table dimension) being indexed.
        index: The offending index.
        size: Number of entries along that axis.
    """

    def __init__(self, axis: str, index: int, size: int) -> None:
        self.axis = axis
        self.index = index
        self.size = size
        super().__init__(f"{axis} index {index} outside [0, {size})")


class TakeoffValidationError(PerformanceError, ValueError):
    """Raised when a takeoff request falls outside the chart's domain.

    Attributes:
        field: Name of the offending request field.
        value: The rejected value.
        bound: The chart bound that was violated.
    """

    field = "input"

    def __init__(self, value: float, bound: float, message: str) -> None:
        self.value = value
        self.bound = bound
        super().__init__(message)


class AltitudeOutOfRangeError(TakeoffValidationError):
    """Pressure altitude above the chart's highest altitude."""

    field = "pressure_altitude_ft"

    def __init__(self, value: float, bound: float) -> None:
        super().__init__(
            value,
            bound,
            f"pressure altitude ({value:.0f} ft) exceeds maximum chart value ({bound:.0f} ft)",
        )


class TemperatureOutOfRangeError(TakeoffValidationError):
    """Temperature outside the chart's temperature range."""

    field = "temperature_c"

    def __init__(self, value: float, bound: float, low: float, high: float) -> None:
        self.low = low
        self.high = high
        super().__init__(
            value,
            bound,
            f"temperature ({value:.1f}°C) outside chart range ({low:.1f}°C to {high:.1f}°C)",
        )


class WeightOutOfRangeError(TakeoffValidationError):
    """Weight outside the chart's weight range."""

    field = "weight_lbs"

    def __init__(self, value: float, bound: float, low: float, high: float) -> None:
        self.low = low
        self.high = high
        super().__init__(
            value,
            bound,
            f"weight ({value:.0f} lbs) outside chart range ({low:.0f} lbs to {high:.0f} lbs)",
        )


class HeadwindOutOfRangeError(TakeoffValidationError):
    """Headwind component above the chart's highest headwind."""

    field = "wind_component_kts"

    def __init__(self, value: float, bound: float) -> None:
        super().__init__(
            value,
            bound,
            f"headwind component ({value:.0f} kts) exceeds maximum chart value ({bound:.0f} kts)",
        )


class TailwindOutOfRangeError(TakeoffValidationError):
    """Tailwind magnitude above the chart's highest tailwind.

    ``value`` is the tailwind magnitude (positive knots).
    """

    field = "wind_component_kts"

    def __init__(self, value: float, bound: float) -> None:
        super().__init__(
            value,
            bound,
            f"tailwind component ({value:.0f} kts) exceeds maximum chart value ({bound:.0f} kts)",
        )
