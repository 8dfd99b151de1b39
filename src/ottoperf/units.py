"""Unit conversions used when presenting takeoff performance.

The engine works in feet, knots and degrees Celsius; these helpers convert
at the display boundary.
"""

FEET_TO_METERS = 0.3048


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert °C to °F."""
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert °F to °C."""
    return (fahrenheit - 32) * 5 / 9


def feet_to_meters(feet: float) -> float:
    return feet * FEET_TO_METERS


def meters_to_feet(meters: float) -> float:
    return meters / FEET_TO_METERS
