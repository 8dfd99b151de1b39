"""OttoPerf - PA-28-161 takeoff performance calculator."""

__version__ = "0.1.0"
