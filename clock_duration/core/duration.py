"""Wrap-aware elapsed time between two 12-hour timestamps."""
from __future__ import annotations

from dataclasses import dataclass

from .timeparse import MINUTES_PER_HOUR, ParseError, parse_time

DAY_MINUTES = 24 * MINUTES_PER_HOUR


@dataclass(frozen=True)
class Duration:
    hours: int
    minutes: int

    @classmethod
    def from_minutes(cls, total: int) -> 'Duration':
        return cls(hours=total // MINUTES_PER_HOUR, minutes=total % MINUTES_PER_HOUR)

    @property
    def total_minutes(self) -> int:
        return self.hours * MINUTES_PER_HOUR + self.minutes

    def __str__(self) -> str:
        # Plural words are kept even for 1 ("1 hours 1 minutes")
        return f"{self.hours} hours {self.minutes} minutes"


def elapsed_minutes(start_total: int, end_total: int) -> int:
    """Forward distance from ``start_total`` to ``end_total`` on a 24h clock.

    An end earlier than the start is taken to be on the next day. Equal
    values give 0, never a full day.
    """
    if end_total >= start_total:
        return end_total - start_total
    return DAY_MINUTES - (start_total - end_total)


def duration_between(start_raw: str, end_raw: str) -> Duration | ParseError:
    """Parse both endpoints and return the elapsed ``Duration``.

    The start is parsed first; if it fails its error is returned and the
    end is never looked at.
    """
    start = parse_time(start_raw)
    if isinstance(start, ParseError):
        return start
    end = parse_time(end_raw)
    if isinstance(end, ParseError):
        return end
    return Duration.from_minutes(elapsed_minutes(start.minutes_of_day, end.minutes_of_day))


def calculate_duration(start_raw: str, end_raw: str) -> str | ParseError:
    """Return ``"<h> hours <m> minutes"`` or the first ``ParseError``."""
    result = duration_between(start_raw, end_raw)
    if isinstance(result, ParseError):
        return result
    return str(result)
