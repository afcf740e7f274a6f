import math
import sys

import pytest

from cratekit.numeric_cast import IntType, NumericCastError
from cratekit.numeric_conv import (
    FloatType,
    extending_cast,
    rounding_cast,
    truncating_cast,
    wrapping_cast,
)


def test_extending_from_source():
    assert extending_cast(-1, IntType.I8, IntType.I16) == -1
    assert extending_cast(255, "u8", "u32") == 255


@pytest.mark.parametrize(
    "source,target",
    [("u8", "i16"), ("u32", "u16"), ("i8", "i8"), ("u8", "usize"), ("isize", "i128")],
)
def test_extending_rejects_unsupported_pairs(source, target):
    with pytest.raises(TypeError):
        extending_cast(1, source, target)


def test_extending_rejects_out_of_range_value():
    with pytest.raises(ValueError):
        extending_cast(256, "u8", "u16")


def test_truncating_from_source():
    assert truncating_cast(-1, "i16", "i8") == -1
    assert truncating_cast(256, "u32", "u8") == 0
    assert truncating_cast(257, IntType.U16, IntType.U8) == 1


def test_truncating_rejects_unsupported_pairs():
    with pytest.raises(TypeError):
        truncating_cast(1, "u16", "u32")
    with pytest.raises(TypeError):
        truncating_cast(1, "i32", "u8")


@pytest.mark.parametrize("value", [IntType.I8.min, -1, 0, 1, IntType.I8.max])
def test_truncating_undoes_extending(value):
    wide = extending_cast(value, "i8", "i64")
    assert truncating_cast(wide, "i64", "i8") == value


def test_wrapping_from_source():
    assert wrapping_cast(-1, "i8") == 255
    assert wrapping_cast(IntType.USIZE.max // 2, "usize") == IntType.ISIZE.max
    assert wrapping_cast(IntType.ISIZE.max, "isize") == IntType.USIZE.max // 2


@pytest.mark.parametrize("ty", list(IntType))
def test_wrapping_round_trip(ty):
    partner = IntType(("u" if ty.signed else "i") + ty.value[1:])
    for value in (ty.min, ty.max, 0):
        wrapped = wrapping_cast(value, ty)
        assert partner.contains(wrapped)
        assert wrapping_cast(wrapped, partner) == value


def test_rounding_from_source():
    x = IntType.USIZE.max // 2
    assert rounding_cast(x, "usize", "f64") == float(x)
    assert rounding_cast(1.0, "f64", "f32") == 1.0
    assert rounding_cast(300.0, FloatType.F32, IntType.U8) == 255


def test_rounding_int_overflow():
    with pytest.raises(NumericCastError):
        rounding_cast(IntType.U128.max, "u128", "f32")


def test_rounding_nan():
    with pytest.raises(NumericCastError):
        rounding_cast(math.nan, "f64", "f32")


def test_rounding_inf():
    with pytest.raises(NumericCastError, match="rounding_cast_failure"):
        rounding_cast(math.inf, "f64", "u8")


def test_rounding_saturates_at_lower_bound():
    assert rounding_cast(-1e10, "f64", "i32") == IntType.I32.min
    assert rounding_cast(-5.0, "f64", "u8") == IntType.U8.min


def test_rounding_truncates_toward_zero():
    assert rounding_cast(-2.75, "f64", "i8") == -2
    assert rounding_cast(2.75, "f64", "i8") == 2


def test_rounding_f64_overflow_to_f32():
    with pytest.raises(NumericCastError):
        rounding_cast(sys.float_info.max, "f64", "f32")


def test_rounding_int_to_f32_is_representable():
    for n in (IntType.I128.max, IntType.I128.min, IntType.U64.max, (1 << 24) + 1):
        result = rounding_cast(n, "i128", "f32")
        assert rounding_cast(result, "f32", "f64") == result
        assert rounding_cast(result, "f64", "f32") == result


def test_rounding_f32_f64_round_trip():
    value = rounding_cast(0.1, "f64", "f32")
    wide = rounding_cast(value, "f32", "f64")
    assert rounding_cast(wide, "f64", "f32") == value


def test_rounding_rejects_unrepresentable_f32_input():
    with pytest.raises(ValueError):
        rounding_cast(0.1, "f32", "f64")


def test_rounding_rejects_unsupported_pairs():
    with pytest.raises(TypeError):
        rounding_cast(1, "u8", "u16")
    with pytest.raises(TypeError):
        rounding_cast(1.0, "f64", "f64")


def test_float_type_bits():
    assert FloatType("f32").bits == 32
    assert FloatType("f64").bits == 64