"""
Core parsing and arithmetic for the duration calculator.

This package hosts pure, side-effect-free logic kept apart from the CLI so it
can be unit tested without argument parsing or output capture.
"""

__all__ = [
    "ErrorKind",
    "ParseError",
    "ParsedTime",
    "parse_time",
    "minutes_of_day",
    "Duration",
    "elapsed_minutes",
    "duration_between",
    "calculate_duration",
]

from .timeparse import ErrorKind, ParseError, ParsedTime, parse_time, minutes_of_day
from .duration import Duration, elapsed_minutes, duration_between, calculate_duration
