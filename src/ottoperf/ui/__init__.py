"""Text rendering of takeoff performance results."""

from ottoperf.ui.report import UnitSystem, format_report

__all__ = ["UnitSystem", "format_report"]
