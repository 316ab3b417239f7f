"""Packed 32-bit array format descriptors used by the on-device model runtime.

Layout, from the least significant bit upwards:

    bits  0..6   FBITS   fractional bits, stored with a bias of 64
    bits  7..13  BITS    total bits of an element (sign + integer + fraction)
    bits 14..16  PMASK   padding mask
    bits 17..20  TYPE    format family (see FormatType)
    bits 21..22  LDIV    log2 divider used for element size of packed formats
    bit  23      SIGN
    bit  24      COMPLEX
    bits 25..31  attribute flags (see FormatFlag)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

_WORD = 0xFFFFFFFF

_COMPLEX_MASK, _COMPLEX_SHIFT = 0x1, 24
_SIGN_MASK, _SIGN_SHIFT = 0x1, 23
_FBITS_MASK, _FBITS_SHIFT = 0x7F, 0
_FBITS_BIAS = (_FBITS_MASK + 1) >> 1
_BITS_MASK, _BITS_SHIFT = 0x7F, 7
_BITS_BIAS = 0
_PMASK_MASK, _PMASK_SHIFT = 0x7, 14
_TYPE_MASK, _TYPE_SHIFT = 0xF, 17
_LDIV_MASK, _LDIV_SHIFT = 0x3, 21

FLAG_BITS = 25
FORMAT_MASK = (1 << FLAG_BITS) - 1
Q_MASK = (
    (_FBITS_MASK << _FBITS_SHIFT)
    | (_BITS_MASK << _BITS_SHIFT)
    | (_PMASK_MASK << _PMASK_SHIFT)
)


class FormatType(enum.IntEnum):
    """Family of an array format."""

    NONE = 0x0
    FLOAT = 0x1
    Q = 0x2
    BOOL = 0x3
    LUT_Q = 0x4
    LUT_FLOAT = 0x8


class FormatFlag(enum.IntFlag):
    """Attribute flags kept in the most significant bits of a format."""

    VISITED = 1 << 26
    IS_IO = 1 << 27
    SCRATCH_BUFFER = 1 << 28
    STATIC = 1 << 29
    CONST = 1 << 30


_ALL_FLAGS = (
    FormatFlag.VISITED
    | FormatFlag.IS_IO
    | FormatFlag.SCRATCH_BUFFER
    | FormatFlag.STATIC
    | FormatFlag.CONST
)


@dataclass(frozen=True)
class FormatFields:
    """The unpacked fields of a format word."""

    type_id: int
    sign: int
    complex_: int
    pmask: int
    bits: int
    fbits: int
    ldiv: int

    @property
    def family(self) -> FormatType | int:
        """The format family as a FormatType where it is a known one."""
        try:
            return FormatType(self.type_id)
        except ValueError:
            return self.type_id


def _field(name: str, value: int, low: int, high: int) -> int:
    if not low <= value <= high:
        raise ValueError(f"{name}={value} outside {low}..{high}")
    return value


def encode_format(type_id, sign, complex_, pmask, bits, fbits, ldiv) -> int:
    """Pack the format fields into a 32-bit format word."""
    type_id = _field("type_id", int(type_id), 0, _TYPE_MASK)
    sign = _field("sign", int(sign), 0, _SIGN_MASK)
    complex_ = _field("complex_", int(complex_), 0, _COMPLEX_MASK)
    pmask = _field("pmask", int(pmask), 0, _PMASK_MASK)
    bits = _field("bits", int(bits), -_BITS_BIAS, _BITS_MASK - _BITS_BIAS)
    fbits = _field("fbits", int(fbits), -_FBITS_BIAS, _FBITS_MASK - _FBITS_BIAS)
    ldiv = _field("ldiv", int(ldiv), 0, _LDIV_MASK)
    return (
        (complex_ << _COMPLEX_SHIFT)
        | (sign << _SIGN_SHIFT)
        | ((bits + _BITS_BIAS) << _BITS_SHIFT)
        | ((fbits + _FBITS_BIAS) << _FBITS_SHIFT)
        | (pmask << _PMASK_SHIFT)
        | (type_id << _TYPE_SHIFT)
        | (ldiv << _LDIV_SHIFT)
    )


def decode_format(fmt) -> FormatFields:
    """Unpack a format word into its fields; flags are ignored."""
    word = int(fmt) & _WORD

    def get(mask: int, shift: int) -> int:
        return (word >> shift) & mask

    return FormatFields(
        type_id=get(_TYPE_MASK, _TYPE_SHIFT),
        sign=get(_SIGN_MASK, _SIGN_SHIFT),
        complex_=get(_COMPLEX_MASK, _COMPLEX_SHIFT),
        pmask=get(_PMASK_MASK, _PMASK_SHIFT),
        bits=get(_BITS_MASK, _BITS_SHIFT) - _BITS_BIAS,
        fbits=get(_FBITS_MASK, _FBITS_SHIFT) - _FBITS_BIAS,
        ldiv=get(_LDIV_MASK, _LDIV_SHIFT),
    )


def format_flags(fmt) -> FormatFlag:
    """Return the attribute flags set in a format word."""
    return FormatFlag(int(fmt) & _WORD & _ALL_FLAGS)


def strip_flags(fmt) -> int:
    """Return the format word with all attribute flag bits cleared."""
    return int(fmt) & FORMAT_MASK


def same_format(fmt1, fmt2) -> bool:
    """True when two format words describe the same format, flags aside."""
    return strip_flags(fmt1) == strip_flags(fmt2)


def integer_bits(fmt) -> int:
    """Number of integer bits: total bits minus fraction bits minus sign."""
    fields = decode_format(fmt)
    return fields.bits - fields.fbits - fields.sign


def mask_q(fmt) -> int:
    """Clear the bit-width, fraction and padding fields of a format word."""
    return int(fmt) & _WORD & ~Q_MASK