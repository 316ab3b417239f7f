"""Dallas/Maxim 8-bit CRC used on the 1-Wire bus (x^8 + x^5 + x^4 + 1)."""

from __future__ import annotations

from collections.abc import Iterable

_POLYNOMIAL = 0x8C


def _as_bytes(data: Iterable[int] | bytes | bytearray) -> bytes:
    try:
        return bytes(data)
    except ValueError as exc:
        raise ValueError("CRC input must be byte values 0..255") from exc


def crc8(data) -> int:
    """Compute the 1-Wire CRC8 of a non-empty sequence of bytes."""
    payload = _as_bytes(data)
    if not payload:
        raise ValueError("CRC input must not be empty")
    crc = 0
    for byte in payload:
        for _ in range(8):
            mix = (crc ^ byte) & 0x01
            crc >>= 1
            if mix:
                crc ^= _POLYNOMIAL
            byte >>= 1
    return crc


def check_crc8(data) -> bool:
    """True when the last byte is the CRC8 of all the bytes before it."""
    payload = _as_bytes(data)
    if len(payload) < 2:
        raise ValueError("need at least one data byte and one CRC byte")
    return crc8(payload[:-1]) == payload[-1]