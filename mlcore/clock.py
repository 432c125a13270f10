"""Times in NTP 32:32 fixed-point format, and a clock producing them."""

from __future__ import annotations

import functools
import math
import time

Time = int

_FRACTION_SCALE = 1 << 32
_LOW_MASK = 0xFFFFFFFF
_TIME_MASK = (1 << 64) - 1
_MICROS_PER_SECOND = 1_000_000


def time_to_float(t: Time) -> float:
    """Convert a 32:32 fixed-point time to seconds as a float."""
    hi = (t >> 32) & _LOW_MASK
    lo = t & _LOW_MASK
    return hi + lo / _FRACTION_SCALE


def float_to_time(t: float) -> Time:
    """Convert seconds as a float to a 32:32 fixed-point time."""
    whole = math.floor(t)
    hi = whole & _LOW_MASK
    lo = int((t - whole) * _FRACTION_SCALE) & _LOW_MASK
    return (hi << 32) | lo


def samples_at_rate_to_time(samples: int, rate: int) -> Time:
    """Return the duration of a number of samples at a sample rate."""
    return float_to_time(samples / rate)


@functools.lru_cache(maxsize=None)
def _system_time_offset() -> int:
    """Microseconds from the monotonic clock to system time, measured once."""
    system_us = time.time_ns() // 1000
    steady_us = time.monotonic_ns() // 1000
    return system_us - steady_us


def _micros_to_time(micros: int) -> Time:
    seconds, frac_us = divmod(micros, _MICROS_PER_SECOND)
    lo = int(frac_us * _FRACTION_SCALE / _MICROS_PER_SECOND) & _LOW_MASK
    return ((seconds << 32) | lo) & _TIME_MASK


class Clock:
    """A steady clock reporting system time, which can be stopped and advanced."""

    def __init__(self) -> None:
        self._offset_us = _system_time_offset()
        self._running = True
        self._shift: Time = 0
        self._frozen: Time = 0

    def _steady_now(self) -> Time:
        return _micros_to_time(self._offset_us + time.monotonic_ns() // 1000)

    def now(self) -> Time:
        """Return the current time of this clock."""
        if self._running:
            return (self._steady_now() + self._shift) & _TIME_MASK
        return self._frozen

    def stop(self) -> None:
        """Freeze the clock at its current time."""
        if self._running:
            self._frozen = self.now()
        self._running = False

    def start(self) -> None:
        """Let the clock run again, continuing from where it stopped."""
        if not self._running:
            self._shift = (self._frozen - self._steady_now()) & _TIME_MASK
            self._running = True

    def advance(self, t: Time) -> None:
        """Move the clock forward by the time t."""
        if self._running:
            self._shift = (self._shift + t) & _TIME_MASK
        else:
            self._frozen = (self._frozen + t) & _TIME_MASK