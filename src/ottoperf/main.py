"""OttoPerf - PA-28-161 Cherokee Warrior II takeoff performance calculator.

Command line entry point. Parses the takeoff conditions, runs the chart
calculation, and prints the report.

Typical usage:
    ottoperf --altitude 1500 --temp-c 25 --weight 2200 --wind 10
    ottoperf --altitude 1500 --temp-f 80 --units mixed
    python -m ottoperf --config ~/.ottoperf.yaml --altitude 3000
"""

import argparse
import sys
from collections.abc import Sequence

from ottoperf.core.config import ConfigError, ConfigLoader
from ottoperf.core.logging_system import LoggingError, get_logger, initialize_logging, shutdown_logging
from ottoperf.performance import TakeoffCalculator, TakeoffRequest, TakeoffValidationError
from ottoperf.ui.report import UnitSystem, format_report
from ottoperf.units import fahrenheit_to_celsius

EXAMPLE = "Example:\n  ottoperf --altitude 1500 --temp-c 25 --weight 2200 --wind 10"


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    Unset options stay None so configured defaults can fill them in.
    """
    parser = argparse.ArgumentParser(
        prog="ottoperf",
        description="PA-28-161 Cherokee Warrior II Takeoff Performance Calculator",
        epilog=EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--altitude", type=float, help="Pressure altitude in feet (default: 0)")
    parser.add_argument("--temp-c", type=float, help="Temperature in °C (default: 15)")
    parser.add_argument(
        "--temp-f",
        type=float,
        help="Temperature in °F (overrides --temp-c if provided)",
    )
    parser.add_argument("--weight", type=float, help="Aircraft weight in pounds (default: 2325)")
    parser.add_argument(
        "--wind",
        type=float,
        help="Wind component in knots (positive for headwind, negative for tailwind)",
    )
    parser.add_argument(
        "--units",
        type=str.lower,
        choices=[unit.value for unit in UnitSystem],
        help="Unit system for display (default: imperial)",
    )
    parser.add_argument("--config", type=str, help="YAML settings file merged over the defaults")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to the console")

    return parser


def load_settings(config_path: str | None) -> ConfigLoader:
    """Built-in settings, with the user's YAML file merged on top when given.

    Raises:
        ConfigError: If the user file cannot be loaded.
    """
    settings = ConfigLoader.defaults()
    if config_path:
        settings.merge(ConfigLoader.load(config_path))
    return settings


def build_request(args: argparse.Namespace, settings: ConfigLoader) -> TakeoffRequest:
    """Combine command line values with configured defaults."""

    def pick(value: float | None, key: str) -> float:
        return float(value if value is not None else settings.get(f"defaults.{key}"))

    if args.temp_f is not None:
        temperature_c = fahrenheit_to_celsius(args.temp_f)
    else:
        temperature_c = pick(args.temp_c, "temperature_c")

    return TakeoffRequest(
        pressure_altitude_ft=pick(args.altitude, "pressure_altitude_ft"),
        temperature_c=temperature_c,
        weight_lbs=pick(args.weight, "weight_lbs"),
        wind_component_kts=pick(args.wind, "wind_component_kts"),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success).
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
        units = UnitSystem.parse(args.units or settings.get("display.units", "imperial"))
        initialize_logging(
            settings.get("logging.config"),
            use_platform_dir=bool(settings.get("logging.use_platform_dir", True)),
            console_level="DEBUG" if args.verbose else settings.get("logging.console_level"),
        )
    except (ConfigError, LoggingError, ValueError) as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    logger = get_logger(__name__)

    try:
        request = build_request(args, settings)
        logger.debug("Takeoff request: %s", request)

        result = TakeoffCalculator().calculate_takeoff(request)
        logger.info(
            "Takeoff at %.0f lbs: distance=%.0f ft, liftoff=%.1f KIAS, barrier=%.1f KIAS",
            request.weight_lbs,
            result.takeoff_distance_ft,
            result.liftoff_speed_kias,
            result.barrier_speed_kias,
        )

        print(format_report(request, result, units))
        return 0
    except TakeoffValidationError as e:
        logger.error("Rejected %s=%s (chart bound %s): %s", e.field, e.value, e.bound, e)
        print(f"Error calculating takeoff performance: {e}", file=sys.stderr)
        return 1
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Fatal error: %s", e)
        return 1
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
