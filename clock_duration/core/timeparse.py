"""Pure parser for 12-hour clock timestamps such as ``"8:30 PM"``.

Malformed input is an expected case here, so failures are returned as
``ParseError`` values instead of being raised.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MINUTES_PER_HOUR = 60
HALF_DAY_MINUTES = 12 * MINUTES_PER_HOUR

_PERIODS = {'AM': False, 'PM': True}
_MAX_NUMBER = 2 ** 32 - 1


class ErrorKind(Enum):
    INVALID_FORMAT = 'InvalidFormat'
    INVALID_HOUR = 'InvalidHour'
    INVALID_MINUTE = 'InvalidMinute'
    INVALID_PERIOD = 'InvalidPeriod'


@dataclass(frozen=True)
class ParseError:
    """A rejected timestamp: the kind of failure plus the offending value."""

    kind: ErrorKind
    detail: Optional[str] = None

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.INVALID_FORMAT:
            return 'Invalid time format'
        if self.kind is ErrorKind.INVALID_HOUR:
            return f'Invalid hour {self.detail}'
        if self.kind is ErrorKind.INVALID_MINUTE:
            return f'Invalid minute {self.detail}'
        return 'Invalid AM/PM format'

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ParsedTime:
    hour: int
    minute: int
    is_afternoon: bool

    @property
    def minutes_of_day(self) -> int:
        return minutes_of_day(self)


def _parse_number(text: str) -> Optional[int]:
    """Read an unsigned 32-bit decimal: ASCII digits with an optional ``+``.

    Returns None for anything else, including values past ``2**32 - 1``.
    """
    digits = text.strip()
    if digits.startswith('+'):
        digits = digits[1:]
    if not (digits.isascii() and digits.isdigit()):
        return None
    # Leading zeros do not count against the width
    if len(digits.lstrip('0')) > len(str(_MAX_NUMBER)):
        return None
    value = int(digits.lstrip('0') or '0')
    if value > _MAX_NUMBER:
        return None
    return value


def parse_time(raw: str) -> ParsedTime | ParseError:
    """Parse ``"H:MM AM"``/``"HH:MMPM"`` into a ``ParsedTime``.

    The period marker is case-sensitive and may be preceded by whitespace.
    Returns a ``ParseError`` on the first failed check, in this order:
    suffix, colon split, hour digits, minute digits, hour range, minute range.
    """
    if not (raw.endswith('AM') or raw.endswith('PM')):
        return ParseError(ErrorKind.INVALID_FORMAT)
    body, period = raw[:-2], raw[-2:]

    parts = body.split(':')
    if len(parts) != 2:
        return ParseError(ErrorKind.INVALID_FORMAT)
    hour_text, minute_text = parts

    hour = _parse_number(hour_text)
    if hour is None:
        return ParseError(ErrorKind.INVALID_HOUR, hour_text)
    minute = _parse_number(minute_text)
    if minute is None:
        return ParseError(ErrorKind.INVALID_MINUTE, minute_text)

    if not (1 <= hour <= 12):
        return ParseError(ErrorKind.INVALID_HOUR, str(hour))
    if not (0 <= minute < MINUTES_PER_HOUR):
        return ParseError(ErrorKind.INVALID_MINUTE, str(minute))

    if period not in _PERIODS:
        return ParseError(ErrorKind.INVALID_PERIOD, period)
    return ParsedTime(hour=hour, minute=minute, is_afternoon=_PERIODS[period])


def minutes_of_day(parsed: ParsedTime) -> int:
    """Normalize to minutes since midnight, in ``[0, 1439]``.

    12 is the first hour of its half-day: ``12:00AM`` is 0, ``12:00PM`` is 720.
    """
    if parsed.hour == 12:
        offset = parsed.minute
    else:
        offset = parsed.hour * MINUTES_PER_HOUR + parsed.minute
    if parsed.is_afternoon:
        offset += HALF_DAY_MINUTES
    return offset
