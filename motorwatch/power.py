"""Mains voltage and load current from interleaved ADC samples.

The ADC scans two channels into one buffer. Even positions hold the voltage
channel and odd positions hold the current-sensor channel. Both are 12-bit
codes referred to a 3.3 V reference.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

ADC_MAX = 4095
VREF = 3.3
ADC_VALID_MIN = 100
ADC_VALID_MAX = 4000
CURRENT_VOLTS_PER_COUNT = 0.000805
ACS_SENSITIVITY = 0.185  # volts per ampere of the hall-effect current sensor
KNOWN_CURRENT = 0.444  # amperes drawn by the calibration load
MIN_CURRENT_DELTA = 0.001


@dataclass
class PowerCalibration:
    """Factors that turn raw channel RMS values into volts and amperes."""

    voltage_factor: float = 1.0
    current_baseline: float = 0.0
    current_scale: float = 1.0


@dataclass(frozen=True)
class PowerReading:
    """Result of analysing one block of interleaved samples."""

    voltage: float
    current: float
    raw_max: int
    raw_min: int
    raw_peak: int


def _codes(samples: Sequence[int], what: str) -> np.ndarray:
    codes = np.asarray(samples, dtype=np.int64)
    if codes.ndim != 1:
        raise ValueError(f"{what} must be a flat sequence of ADC codes")
    if codes.size == 0:
        raise ValueError(f"{what} must not be empty")
    return codes


def _ac_rms(volts: np.ndarray) -> float:
    mean = float(volts.mean())
    return math.sqrt(float(((volts - mean) ** 2).mean()))


def voltage_rms(samples) -> float:
    """Uncalibrated AC RMS, in volts at the ADC pin, of voltage-channel codes.

    The mean is taken over codes inside the valid window only; the deviation
    sum runs over every code and is divided by the valid count.
    """
    codes = _codes(samples, "voltage samples")
    volts = codes * VREF / ADC_MAX
    valid = (codes >= ADC_VALID_MIN) & (codes <= ADC_VALID_MAX)
    count = int(valid.sum())
    if count == 0:
        raise ValueError("no voltage samples inside the valid ADC window")
    mean = float(volts[valid].mean())
    return math.sqrt(float(((volts - mean) ** 2).sum()) / count)


def current_rms(samples) -> float:
    """Uncalibrated RMS current, in amperes, of current-channel codes."""
    codes = _codes(samples, "current samples")
    return _ac_rms(codes * VREF / ADC_MAX) / ACS_SENSITIVITY


def voltage_calibration_factor(samples, known_voltage) -> float:
    """Factor that maps the RMS of the voltage-channel codes to ``known_voltage``."""
    codes = _codes(samples, "voltage samples")
    rms = _ac_rms(codes * VREF / ADC_MAX)
    if rms == 0.0:
        raise ValueError("voltage channel carries no AC signal to calibrate against")
    return known_voltage / rms


def current_scale_factor(baseline, loaded, known_current=KNOWN_CURRENT) -> float:
    """Scale that maps the loaded-minus-baseline reading to ``known_current``."""
    delta = loaded - baseline
    if delta < MIN_CURRENT_DELTA:
        delta = MIN_CURRENT_DELTA
    return known_current / delta


def analyse_samples(buffer, calibration=None) -> PowerReading:
    """Compute calibrated voltage and current from an interleaved sample block."""
    calibration = calibration or PowerCalibration()
    codes = _codes(buffer, "sample buffer")
    voltage_codes = codes[0::2]
    current_codes = codes[1::2]
    if current_codes.size == 0:
        raise ValueError("sample buffer holds no current-channel samples")

    voltage = voltage_rms(voltage_codes) * calibration.voltage_factor
    raw_max = max(int(voltage_codes.max()), 0)
    raw_min = min(int(voltage_codes.min()), ADC_MAX)
    raw_peak = (raw_max - raw_min) // 2

    raw_current = _ac_rms(current_codes * CURRENT_VOLTS_PER_COUNT) / ACS_SENSITIVITY
    current = (raw_current - calibration.current_baseline) * calibration.current_scale

    return PowerReading(
        voltage=voltage,
        current=current,
        raw_max=raw_max,
        raw_min=raw_min,
        raw_peak=raw_peak,
    )