import math
import sys

import pytest

from lexconv.errors import BadLexicalCast
from lexconv.numeric import NumericType, convert_number

T = NumericType
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def test_int_to_int_limits():
    assert convert_number(INT_MAX, T.INT, T.INT) == INT_MAX
    assert convert_number(INT_MIN, T.INT, T.INT) == INT_MIN
    assert convert_number(1, T.INT, T.INT) == 1


def test_double_to_int():
    assert convert_number(1.0, T.DOUBLE, T.INT) == 1
    with pytest.raises(BadLexicalCast):
        convert_number(1.23, T.DOUBLE, T.INT)
    with pytest.raises(BadLexicalCast):
        convert_number(1e20, T.DOUBLE, T.INT)


def test_bool_to_int():
    assert convert_number(True, T.BOOL, T.INT) == 1
    assert convert_number(False, T.BOOL, T.INT) == 0


def test_to_double():
    assert convert_number(1, T.INT, T.DOUBLE) == 1.0
    assert abs(convert_number(1.23, T.DOUBLE, T.DOUBLE) - 1.23) <= sys.float_info.epsilon
    assert abs(convert_number(1.234567890, T.DOUBLE, T.DOUBLE) - 1.234567890) <= sys.float_info.epsilon
    assert convert_number(True, T.BOOL, T.DOUBLE) == 1.0
    assert convert_number(False, T.BOOL, T.DOUBLE) == 0.0


@pytest.mark.parametrize(
    "value,source,expected",
    [
        (1, T.INT, True),
        (0, T.INT, False),
        (1.0, T.DOUBLE, True),
        (0.0, T.DOUBLE, False),
        (True, T.BOOL, True),
        (False, T.BOOL, False),
    ],
)
def test_to_bool(value, source, expected):
    assert convert_number(value, source, T.BOOL) is expected


@pytest.mark.parametrize(
    "value,source",
    [
        (123, T.INT),
        (-123, T.INT),
        (1234, T.INT),
        (1.0001, T.LONG_DOUBLE),
        (2, T.INT),
        (2, T.UNSIGNED_INT),
        (-1, T.INT),
        (-2, T.INT),
    ],
)
def test_to_bool_rejected(value, source):
    with pytest.raises(BadLexicalCast):
        convert_number(value, source, T.BOOL)


def test_negative_to_unsigned_wraps():
    assert convert_number(-1, T.INT, T.UNSIGNED_INT) == 2**32 - 1
    assert convert_number(-1.0, T.DOUBLE, T.UNSIGNED_SHORT) == 2**16 - 1
    assert convert_number(INT_MIN, T.INT, T.UNSIGNED_INT) == 2**31


def test_negative_to_unsigned_still_range_checked():
    with pytest.raises(BadLexicalCast):
        convert_number(-70000, T.INT, T.UNSIGNED_SHORT)


def test_double_max_to_float_overflows():
    with pytest.raises(BadLexicalCast):
        convert_number(sys.float_info.max, T.DOUBLE, T.FLOAT)


def test_double_to_float_rounds():
    result = convert_number(0.1, T.DOUBLE, T.FLOAT)
    assert math.isclose(result, 0.1, rel_tol=1e-7)
    assert convert_number(result, T.FLOAT, T.DOUBLE) == result


def test_float_infinity_widens():
    assert convert_number(math.inf, T.FLOAT, T.DOUBLE) == math.inf
    assert math.isnan(convert_number(math.nan, T.DOUBLE, T.DOUBLE))


def test_nan_to_int_rejected():
    with pytest.raises(BadLexicalCast):
        convert_number(math.nan, T.DOUBLE, T.INT)


def test_error_carries_types():
    with pytest.raises(BadLexicalCast) as info:
        convert_number(1.23, T.DOUBLE, T.INT)
    assert info.value.source_type is T.DOUBLE
    assert info.value.target_type is T.INT


def test_in_range():
    assert T.INT.in_range(INT_MAX)
    assert not T.INT.in_range(INT_MAX + 1)
    assert T.INT.in_range(INT_MIN)
    assert not T.INT.in_range(INT_MIN - 1)
    assert not T.UNSIGNED_INT.in_range(-1)
    assert T.UNSIGNED_CHAR.in_range(255)
    assert not T.UNSIGNED_CHAR.in_range(256)
    assert not T.FLOAT.in_range(sys.float_info.max)
    assert T.DOUBLE.in_range(sys.float_info.max)
    assert not T.DOUBLE.in_range(math.inf)
    assert T.DOUBLE.in_range(math.nan)
    assert not T.INT.in_range(math.nan)