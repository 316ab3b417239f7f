"""ADXL345 three-axis accelerometer over an I2C bus."""

from __future__ import annotations

import struct
from typing import Protocol

DEFAULT_ADDRESS = 0x53
DEVICE_ID = 0xE5

REG_DEVID = 0x00
REG_BW_RATE = 0x2C
REG_POWER_CTL = 0x2D
REG_DATA_FORMAT = 0x31
REG_DATAX0 = 0x32

RATE_200HZ = 0x0C
FULL_RES = 0x08
MEASURE = 0x08
FULL_RES_SCALE = 0.004  # g per LSB in full-resolution mode


class I2CBus(Protocol):
    """The register access an ADXL345 needs from its bus."""

    def read_register(self, address: int, register: int, length: int) -> bytes: ...

    def write_register(self, address: int, register: int, value: int) -> None: ...


class DeviceNotFoundError(RuntimeError):
    """The device at the given address did not report the ADXL345 ID."""


def decode_axes(raw, scale) -> tuple[float, float, float]:
    """Turn six little-endian data register bytes into (x, y, z) in g."""
    raw = bytes(raw)
    if len(raw) != 6:
        raise ValueError(f"expected 6 data bytes, got {len(raw)}")
    x, y, z = struct.unpack("<3h", raw)
    return x * scale, y * scale, z * scale


class ADXL345:
    """An ADXL345 accelerometer reached through an I2C bus."""

    def __init__(self, bus: I2CBus, address: int = DEFAULT_ADDRESS) -> None:
        self.bus = bus
        self.address = address
        self.scale = FULL_RES_SCALE

    def _write(self, register: int, value: int) -> None:
        self.bus.write_register(self.address, register, value & 0xFF)

    def _read(self, register: int, length: int) -> bytes:
        return bytes(self.bus.read_register(self.address, register, length))

    def initialize(self) -> None:
        """Check the device ID and start measuring at 200 Hz, full resolution, +-4 g."""
        device_id = self._read(REG_DEVID, 1)
        if not device_id or device_id[0] != DEVICE_ID:
            found = device_id[0] if device_id else None
            raise DeviceNotFoundError(
                f"no ADXL345 at 0x{self.address:02X} (device id {found!r})"
            )
        self._write(REG_BW_RATE, RATE_200HZ)
        self._write(REG_DATA_FORMAT, FULL_RES | 0x01)
        self._write(REG_POWER_CTL, MEASURE)
        self.scale = FULL_RES_SCALE

    def set_range(self, range_bits: int) -> None:
        """Select the measurement range (0..3) keeping full resolution."""
        if not 0 <= range_bits <= 3:
            raise ValueError(f"range bits must be 0..3, got {range_bits}")
        self._write(REG_DATA_FORMAT, FULL_RES | range_bits)

    def read_xyz(self) -> tuple[float, float, float]:
        """Read the current acceleration on all three axes, in g."""
        return decode_axes(self._read(REG_DATAX0, 6), self.scale)