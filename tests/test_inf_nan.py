import math

import pytest

from lexconv.inf_nan import format_inf_nan, parse_inf_nan


@pytest.mark.parametrize("text", ["nan", "NAN", "nAn", "+nan", "nan()", "nan(abc)"])
def test_parse_positive_nan(text):
    value = parse_inf_nan(text)
    assert value is not None and math.isnan(value)
    assert math.copysign(1.0, value) > 0


@pytest.mark.parametrize("text", ["-nan", "-NaN", "-nan(x)"])
def test_parse_negative_nan_keeps_sign(text):
    value = parse_inf_nan(text)
    assert value is not None and math.isnan(value)
    assert math.copysign(1.0, value) < 0


@pytest.mark.parametrize("text", ["inf", "INF", "Inf", "+inf", "infinity", "INFINITY", "+InFiNiTy"])
def test_parse_positive_infinity(text):
    assert parse_inf_nan(text) == math.inf


@pytest.mark.parametrize("text", ["-inf", "-infinity", "-INFINITY"])
def test_parse_negative_infinity(text):
    assert parse_inf_nan(text) == -math.inf


@pytest.mark.parametrize(
    "text",
    ["", "-", "+", "na", "-in", "nan(", "nan)", "nanx", "nan(x", "infin", "infinityy",
     "inff", "++inf", "--nan", "1.0", " inf", "inf "],
)
def test_parse_rejects(text):
    assert parse_inf_nan(text) is None


def test_format_nan():
    assert format_inf_nan(math.nan) == "nan"
    assert format_inf_nan(math.copysign(math.nan, -1.0)) == "-nan"


def test_format_infinity_uses_short_form():
    assert format_inf_nan(math.inf) == "infinity"[:3]
    assert format_inf_nan(-math.inf) == "-" + "infinity"[:3]


@pytest.mark.parametrize("value", [0.0, -0.0, 1.5, -1e300, 5e-324])
def test_format_finite_gives_none(value):
    assert format_inf_nan(value) is None


@pytest.mark.parametrize("value", [math.inf, -math.inf])
def test_round_trip_infinity(value):
    assert parse_inf_nan(format_inf_nan(value)) == value


@pytest.mark.parametrize("sign", [1.0, -1.0])
def test_round_trip_nan_sign(sign):
    original = math.copysign(math.nan, sign)
    parsed = parse_inf_nan(format_inf_nan(original))
    assert math.isnan(parsed)
    assert math.copysign(1.0, parsed) == sign