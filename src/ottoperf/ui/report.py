"""Plain-text takeoff performance report.

Renders a request and its result in one of three unit systems:
- imperial: feet, °F first
- metric: meters first, °C only
- mixed: feet first, °C first
"""

from enum import Enum

from ottoperf.performance.takeoff_calculator import TakeoffRequest, TakeoffResult
from ottoperf.units import celsius_to_fahrenheit, feet_to_meters

TITLE = "PA-28-161 Cherokee Warrior II Takeoff Performance"

SAFETY_NOTE = (
    "NOTE: Always verify these calculations against the POH and ensure\n"
    "      you have adequate runway length with appropriate safety margins."
)


class UnitSystem(Enum):
    """Unit systems for displaying results."""

    IMPERIAL = "imperial"
    METRIC = "metric"
    MIXED = "mixed"

    @classmethod
    def parse(cls, name: str) -> "UnitSystem":
        """Look up a unit system by name, ignoring case.

        Raises:
            ValueError: If the name is not a known unit system.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(unit.value for unit in cls)
            raise ValueError(f"Unknown unit system '{name}' (expected one of: {choices})") from None


def _heading(text: str) -> list[str]:
    return [text, "-" * len(text)]


def format_temperature(temperature_c: float, units: UnitSystem) -> str:
    fahrenheit = celsius_to_fahrenheit(temperature_c)
    if units is UnitSystem.METRIC:
        return f"{temperature_c:.1f}°C"
    if units is UnitSystem.IMPERIAL:
        return f"{fahrenheit:.1f}°F ({temperature_c:.1f}°C)"
    return f"{temperature_c:.1f}°C ({fahrenheit:.1f}°F)"


def format_wind(wind_component_kts: float) -> str:
    if wind_component_kts > 0:
        return f"{wind_component_kts:.0f} knots headwind"
    if wind_component_kts < 0:
        return f"{-wind_component_kts:.0f} knots tailwind"
    return "No wind"


def format_distance(distance_ft: float, units: UnitSystem) -> str:
    meters = feet_to_meters(distance_ft)
    if units is UnitSystem.METRIC:
        return f"{meters:.0f} m ({distance_ft:.0f} ft)"
    if units is UnitSystem.MIXED:
        return f"{distance_ft:.0f} ft ({meters:.0f} m)"
    return f"{distance_ft:.0f} ft"


def format_report(
    request: TakeoffRequest, result: TakeoffResult, units: UnitSystem = UnitSystem.IMPERIAL
) -> str:
    """Render the inputs and results of a takeoff calculation.

    Args:
        request: The validated request.
        result: The calculated result.
        units: Unit system for temperatures and distances.

    Returns:
        Multi-line report text.
    """
    lines = [TITLE, "=" * len(TITLE), ""]

    lines += _heading("Input Parameters:")
    lines += [
        f"Pressure Altitude: {request.pressure_altitude_ft:.0f} ft",
        f"Temperature: {format_temperature(request.temperature_c, units)}",
        f"Weight: {request.weight_lbs:.0f} lbs",
        f"Wind: {format_wind(request.wind_component_kts)}",
        "",
    ]

    lines += _heading("Takeoff Performance:")
    lines += [
        f"Takeoff Distance (over 50 ft obstacle): {format_distance(result.takeoff_distance_ft, units)}",
        f"Lift-off Speed: {result.liftoff_speed_kias:.0f} KIAS",
        f"50 ft Barrier Speed: {result.barrier_speed_kias:.0f} KIAS",
        "",
        SAFETY_NOTE,
    ]

    return "\n".join(lines)
