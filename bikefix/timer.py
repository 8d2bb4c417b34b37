"""Software timers, tick arithmetic, real-time clock values and watchdog settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MIN_PERIOD_MS = 5
"""Shortest period a software timer or sleep will honour."""

TICK_US = 31.25
"""Length of one tick of the free-running counter, in microseconds."""

GPT_TICKS_PER_SECOND = 16384
"""Resolution of the hardware general purpose timer."""

GPT_MAX_TICKS = 0xFFFF

WATCHDOG_MAX_MS = 600_000
"""Longest watchdog expiry time (ten minutes)."""

_U32_MASK = 0xFFFFFFFF


class TimerId(enum.IntEnum):
    """One of the sixteen application software timers."""

    TIMER_1 = 0
    TIMER_2 = 1
    TIMER_3 = 2
    TIMER_4 = 3
    TIMER_5 = 4
    TIMER_6 = 5
    TIMER_7 = 6
    TIMER_8 = 7
    TIMER_9 = 8
    TIMER_10 = 9
    TIMER_11 = 10
    TIMER_12 = 11
    TIMER_13 = 12
    TIMER_14 = 13
    TIMER_15 = 14
    TIMER_16 = 15


_RTC_RANGES = {
    "sec": (0, 59),
    "min": (0, 59),
    "hour": (0, 23),
    "day": (1, 31),
    "mon": (1, 12),
    "wday": (1, 7),
    "year": (0, 127),
}


@dataclass(frozen=True)
class Rtc:
    """A real-time clock reading, each field within its hardware range."""

    sec: int
    min: int
    hour: int
    day: int
    mon: int
    wday: int
    year: int

    def __post_init__(self) -> None:
        for field, (low, high) in _RTC_RANGES.items():
            value = getattr(self, field)
            if not low <= value <= high:
                raise ValueError(f"{field} must be in [{low}, {high}], got {value}")


class WatchdogAction(enum.IntEnum):
    """What the module does when the watchdog is not fed in time."""

    REBOOT = 0
    POWER_DOWN = 1
    ASSERT = 2


def effective_period(period: int) -> int:
    """Return the period in milliseconds a timer actually runs for."""
    if not 0 <= period <= _U32_MASK:
        raise ValueError(f"period out of range: {period}")
    return max(period, MIN_PERIOD_MS)


def ticks_to_us(ticks: int) -> float:
    """Convert counter ticks to microseconds."""
    if ticks < 0:
        raise ValueError(f"ticks must not be negative, got {ticks}")
    return ticks * TICK_US


def _elapsed_ticks(previous: int, now: int) -> int:
    for name, value in (("previous", previous), ("now", now)):
        if not 0 <= value <= _U32_MASK:
            raise ValueError(f"{name} is not a 32-bit counter value: {value}")
    return (now - previous) & _U32_MASK


def duration_us(previous: int, now: int) -> int:
    """Microseconds between two counter readings, allowing for wrap-around."""
    return _elapsed_ticks(previous, now) * 125 // 4


def duration_ms(previous: int, now: int) -> int:
    """Milliseconds between two counter readings, allowing for wrap-around."""
    return _elapsed_ticks(previous, now) * 125 // 4000


def gpt_ticks(seconds: float) -> int:
    """Convert a duration in seconds to a hardware timer period."""
    ticks = round(seconds * GPT_TICKS_PER_SECOND)
    if not 0 <= ticks <= GPT_MAX_TICKS:
        raise ValueError(f"{seconds} s does not fit the hardware timer")
    return ticks


def validate_watchdog(exp_time: int, action: WatchdogAction | int) -> tuple[int, WatchdogAction]:
    """Check a watchdog expiry time and action, returning them normalised."""
    if not 0 < exp_time <= WATCHDOG_MAX_MS:
        raise ValueError(f"expiry time must be in (0, {WATCHDOG_MAX_MS}] ms, got {exp_time}")
    return exp_time, WatchdogAction(action)