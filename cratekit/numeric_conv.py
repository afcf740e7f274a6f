"""Extending, truncating, wrapping and rounding numeric conversions."""

from __future__ import annotations

import enum
import math
import struct
import typing as t

from cratekit.numeric_cast import IntType, NumericCastError


class FloatType(enum.Enum):
    """IEEE 754 binary floating-point types."""

    F32 = "f32"
    F64 = "f64"

    @property
    def bits(self) -> int:
        return int(self.value[1:])


_SIZED = (IntType.USIZE, IntType.ISIZE)
_F32_MAX = ((1 << 24) - 1) << 104


def _int_type(x: IntType | str) -> IntType:
    if isinstance(x, IntType):
        return x
    if isinstance(x, FloatType):
        raise TypeError(f"{x.value} is not an integer type")
    return IntType(x)


def _num_type(x: IntType | FloatType | str) -> IntType | FloatType:
    if isinstance(x, (IntType, FloatType)):
        return x
    try:
        return IntType(x)
    except ValueError:
        return FloatType(x)


def _check_int(value: t.Any, ty: IntType) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not ty.contains(value):
        raise ValueError(f"{value} is not a valid {ty.value}")
    return value


def _to_f32(x: float) -> float:
    return struct.unpack("<f", struct.pack("<f", x))[0]


def _check_float(value: t.Any, ty: FloatType) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a float, got {type(value).__name__}")
    x = float(value)
    if ty is FloatType.F32 and math.isfinite(x):
        try:
            narrowed = _to_f32(x)
        except OverflowError:
            raise ValueError(f"{x} is not a valid f32") from None
        if narrowed != x:
            raise ValueError(f"{x} is not a valid f32")
    return x


def _reinterpret(value: int, ty: IntType) -> int:
    bits = ty.bits
    v = value & ((1 << bits) - 1)
    if ty.signed and v >> (bits - 1):
        v -= 1 << bits
    return v


def _int_to_f32(n: int) -> float:
    """Round an integer to the nearest f32, ties to even; ``inf`` on overflow."""
    if n == 0:
        return 0.0
    sign = -1 if n < 0 else 1
    a = abs(n)
    excess = a.bit_length() - 24
    if excess > 0:
        q, r = divmod(a, 1 << excess)
        half = 1 << (excess - 1)
        if r > half or (r == half and q & 1):
            q += 1
        a = q << excess
    if a > _F32_MAX:
        return sign * math.inf
    return float(sign * a)


def extending_cast(value: int, source: IntType | str, target: IntType | str) -> int:
    """Widen ``value`` to a larger type of the same signedness."""
    src = _int_type(source)
    dst = _int_type(target)
    if src in _SIZED or dst in _SIZED or src.signed != dst.signed or dst.bits <= src.bits:
        raise TypeError(f"no extending cast from {src.value} to {dst.value}")
    return _check_int(value, src)


def truncating_cast(value: int, source: IntType | str, target: IntType | str) -> int:
    """Narrow ``value`` to a smaller type of the same signedness, keeping the low bits."""
    src = _int_type(source)
    dst = _int_type(target)
    if src in _SIZED or dst in _SIZED or src.signed != dst.signed or dst.bits >= src.bits:
        raise TypeError(f"no truncating cast from {src.value} to {dst.value}")
    return _reinterpret(_check_int(value, src), dst)


def wrapping_cast(value: int, source: IntType | str) -> int:
    """Reinterpret ``value`` as the type of equal width and opposite signedness."""
    src = _int_type(source)
    dst = IntType(("u" if src.signed else "i") + src.value[1:])
    return _reinterpret(_check_int(value, src), dst)


def rounding_cast(
    value: int | float,
    source: IntType | FloatType | str,
    target: IntType | FloatType | str,
) -> int | float:
    """Convert between integers and floats, rounding to the nearest value.

    Floats converted to integers are truncated toward zero and saturated at
    the target's bounds. Raises :class:`NumericCastError` for NaN or infinite
    inputs and for results that overflow to infinity.
    """
    src = _num_type(source)
    dst = _num_type(target)

    if isinstance(src, IntType):
        if not isinstance(dst, FloatType):
            raise TypeError(f"no rounding cast from {src.value} to {dst.value}")
        n = _check_int(value, src)
        if dst is FloatType.F64:
            return float(n)
        ans = _int_to_f32(n)
        if math.isinf(ans):
            raise NumericCastError("rounding_cast_failure", n, src, dst)
        return ans

    if src is dst:
        raise TypeError(f"no rounding cast from {src.value} to {dst.value}")
    x = _check_float(value, src)
    if math.isnan(x) or math.isinf(x):
        raise NumericCastError("rounding_cast_failure", x, src, dst)

    if isinstance(dst, IntType):
        return max(dst.min, min(dst.max, math.trunc(x)))
    if dst is FloatType.F64:
        return x
    try:
        return _to_f32(x)
    except OverflowError:
        raise NumericCastError("rounding_cast_failure", x, src, dst) from None