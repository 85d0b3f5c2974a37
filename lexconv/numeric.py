"""Checked conversion between arithmetic types.

A value is converted only if it fits the target range and, for a floating
point source with an integral target, loses no precision.  A negative value
given for an unsigned target is negated, converted, and wrapped, as scanf
does for unsigned input.
"""

from __future__ import annotations

import enum
import math
import struct
import sys

from .errors import BadLexicalCast


class _Kind(enum.Enum):
    BOOL = "bool"
    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOAT = "float"


_FLOAT_LIMITS = {
    32: (struct.unpack("<f", b"\xff\xff\x7f\x7f")[0], 2.0**-23),
    64: (sys.float_info.max, sys.float_info.epsilon),
    80: (sys.float_info.max, 2.0**-63),
}


class NumericType(enum.Enum):
    """The arithmetic types a value can be converted between."""

    BOOL = ("bool", _Kind.BOOL, 1)
    CHAR = ("char", _Kind.SIGNED, 8)
    SIGNED_CHAR = ("signed char", _Kind.SIGNED, 8)
    UNSIGNED_CHAR = ("unsigned char", _Kind.UNSIGNED, 8)
    SHORT = ("short", _Kind.SIGNED, 16)
    UNSIGNED_SHORT = ("unsigned short", _Kind.UNSIGNED, 16)
    INT = ("int", _Kind.SIGNED, 32)
    UNSIGNED_INT = ("unsigned int", _Kind.UNSIGNED, 32)
    LONG = ("long", _Kind.SIGNED, 64)
    UNSIGNED_LONG = ("unsigned long", _Kind.UNSIGNED, 64)
    LONG_LONG = ("long long", _Kind.SIGNED, 64)
    UNSIGNED_LONG_LONG = ("unsigned long long", _Kind.UNSIGNED, 64)
    FLOAT = ("float", _Kind.FLOAT, 32)
    DOUBLE = ("double", _Kind.FLOAT, 64)
    LONG_DOUBLE = ("long double", _Kind.FLOAT, 80)

    def __init__(self, label: str, kind: _Kind, bits: int) -> None:
        self.label = label
        self.kind = kind
        self.bits = bits

    @property
    def is_float(self) -> bool:
        return self.kind is _Kind.FLOAT

    @property
    def is_integral(self) -> bool:
        return self.kind is not _Kind.FLOAT

    @property
    def min_value(self) -> float:
        if self.kind is _Kind.SIGNED:
            return -(1 << (self.bits - 1))
        if self.kind is _Kind.FLOAT:
            return -_FLOAT_LIMITS[self.bits][0]
        return 0

    @property
    def max_value(self) -> float:
        if self.kind is _Kind.SIGNED:
            return (1 << (self.bits - 1)) - 1
        if self.kind is _Kind.FLOAT:
            return _FLOAT_LIMITS[self.bits][0]
        return (1 << self.bits) - 1

    @property
    def epsilon(self) -> float:
        return _FLOAT_LIMITS[self.bits][1] if self.is_float else 0.0

    def in_range(self, value: float) -> bool:
        """Tell whether ``value`` lies within this type's range.

        Floating values are truncated towards zero before an integral range
        is checked; NaN fits any floating type and no integral one.
        """
        if isinstance(value, float):
            if math.isnan(value):
                return self.is_float
            if math.isinf(value):
                return False
            if self.is_integral:
                value = math.trunc(value)
        return self.min_value <= value <= self.max_value

    def _cast(self, value: float) -> float | int | bool:
        if self.kind is _Kind.BOOL:
            return bool(value)
        if self.is_integral:
            return int(value)
        if self.bits == 32:
            return struct.unpack("<f", struct.pack("<f", float(value)))[0]
        return float(value)


def _keeps_precision(value: float, epsilon: float) -> bool:
    near_int = math.trunc(value)
    if not near_int:
        return True
    ratio = value / near_int
    return abs(ratio - 1) <= epsilon


def _checked_convert(value: float, source: NumericType, target: NumericType):
    widening_float = source.is_float and target.is_float and target.bits >= source.bits
    if not widening_float and not target.in_range(value):
        raise BadLexicalCast(source, target)
    if source.is_float and target.is_integral and not _keeps_precision(value, source.epsilon):
        raise BadLexicalCast(source, target)
    return target._cast(value)


def convert_number(value: float, source: NumericType, target: NumericType):
    """Convert ``value`` of type ``source`` to ``target``.

    Raises ``BadLexicalCast`` on overflow or loss of precision.
    """
    ignoring_minus = (
        target.kind is _Kind.UNSIGNED
        and source.kind in (_Kind.SIGNED, _Kind.FLOAT)
    )
    if ignoring_minus and value < 0:
        magnitude = _checked_convert(-value, source, target)
        return (-magnitude) % (1 << target.bits)
    return _checked_convert(value, source, target)