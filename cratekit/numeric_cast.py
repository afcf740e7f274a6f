"""Checked conversion between fixed-width integer types."""

from __future__ import annotations

import enum
import typing as t


class NumericCastError(OverflowError):
    """Raised when a value cannot be represented in the target type."""

    def __init__(self, kind: str, value: object, source: object, target: object) -> None:
        lhs = getattr(source, "value", source)
        rhs = getattr(target, "value", target)
        super().__init__(f"{kind}: lhs: {lhs}, rhs: {rhs}, val: {value}")
        self.kind = kind
        self.value = value
        self.source = source
        self.target = target


class IntType(enum.Enum):
    """Fixed-width integer types; pointer-sized types are 64 bits wide."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bits(self) -> int:
        digits = self.value[1:]
        return 64 if digits == "size" else int(digits)

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1 if self.signed else self.bits)) - 1

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


def _int_type(x: IntType | str) -> IntType:
    return x if isinstance(x, IntType) else IntType(x)


def _check_source(value: t.Any, source: IntType) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not source.contains(value):
        raise ValueError(f"{value} is not a valid {source.value}")
    return value


def numeric_cast(value: int, source: IntType | str, target: IntType | str) -> int:
    """Convert ``value`` of type ``source`` to ``target`` without loss.

    Raises :class:`NumericCastError` if the value does not fit ``target``.
    """
    src = _int_type(source)
    dst = _int_type(target)
    value = _check_source(value, src)
    if not dst.contains(value):
        raise NumericCastError("numeric_cast_failure", value, src, dst)
    return value