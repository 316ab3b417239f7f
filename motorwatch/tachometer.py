"""Shaft speed from tachometer pulse timestamps on a wrapping microsecond counter."""

from __future__ import annotations

COUNTER_MAX = 0xFFFFFFFF
MAX_PULSE_INTERVAL_US = 1_000_000
DECAY = 0.97
STOP_RPM = 10.0


def elapsed_us(now_us: int, last_us: int) -> int:
    """Microseconds from ``last_us`` to ``now_us`` on a 32-bit wrapping counter."""
    for name, value in (("now_us", now_us), ("last_us", last_us)):
        if not 0 <= value <= COUNTER_MAX:
            raise ValueError(f"{name}={value} outside the 32-bit counter range")
    if now_us >= last_us:
        return now_us - last_us
    return (COUNTER_MAX - last_us) + now_us + 1


class RpmTracker:
    """Smoothed RPM estimate fed by pulse times and periodic ticks."""

    def __init__(
        self,
        rated_rpm: float = 1500,
        max_rpm: float = 3000,
        pulses_per_rev: int = 1,
        stop_timeout_us: int = 3_000_000,
        alpha: float = 0.2,
    ) -> None:
        if pulses_per_rev < 1:
            raise ValueError(f"pulses_per_rev must be at least 1, got {pulses_per_rev}")
        if max_rpm <= 0:
            raise ValueError(f"max_rpm must be positive, got {max_rpm}")
        if not 0 < alpha <= 1:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.rated_rpm = rated_rpm
        self.max_rpm = max_rpm
        self.pulses_per_rev = pulses_per_rev
        self.stop_timeout_us = stop_timeout_us
        self.alpha = alpha
        self.min_pulse_us = int(60_000_000 // (max_rpm * pulses_per_rev))
        self._rpm = 0.0
        self._last_pulse_us: int | None = None

    def pulse(self, now_us: int) -> float:
        """Record a pulse seen at ``now_us``; return the updated RPM."""
        if self._last_pulse_us is None:
            elapsed_us(now_us, 0)
            self._last_pulse_us = now_us
            return self._rpm
        diff = elapsed_us(now_us, self._last_pulse_us)
        if self.min_pulse_us <= diff < MAX_PULSE_INTERVAL_US:
            new_rpm = 60_000_000.0 / (diff * self.pulses_per_rev)
            if new_rpm <= self.rated_rpm:
                self._rpm = (1 - self.alpha) * self._rpm + self.alpha * new_rpm
            self._last_pulse_us = now_us
        return self._rpm

    def tick(self, now_us: int) -> float:
        """Let the RPM decay towards zero when pulses have stopped; return it."""
        if self._last_pulse_us is None:
            return self._rpm
        if elapsed_us(now_us, self._last_pulse_us) > self.stop_timeout_us:
            self._rpm *= DECAY
            if self._rpm < STOP_RPM:
                self._rpm = 0.0
                self._last_pulse_us = None
        return self._rpm

    def rpm(self) -> float:
        """The current RPM estimate."""
        return self._rpm