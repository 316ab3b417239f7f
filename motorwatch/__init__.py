"""Motor condition monitoring blocks: accelerometer access, 1-Wire CRC-8, shaft speed, mains power and model format words."""

__version__ = "0.1.0"

__all__ = [
    "adxl345",
    "aiformat",
    "crc8",
    "power",
    "tachometer",
]