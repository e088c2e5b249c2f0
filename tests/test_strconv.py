import math

import pytest

from jsonvalue.strconv import dtostr, strtod

VALUES = [0.0, 1.5, -3.25, 1e-300, 123e9, 3.141592, 1.7, 1e22, 5e-324,
          1.7976931348623157e308, 123.123, -321.321, 42.0]


@pytest.mark.parametrize("value", VALUES)
def test_round_trip(value):
    assert strtod(dtostr(value)) == value


@pytest.mark.parametrize("value", VALUES)
def test_output_reads_as_real(value):
    text = dtostr(value)
    assert "." in text or "e" in text
    assert "+" not in text


@pytest.mark.parametrize("value", [1e-300, 5e-324, 1e22, 1.7976931348623157e308])
def test_exponent_has_no_leading_zero(value):
    text = dtostr(value)
    exponent = text.partition("e")[2]
    assert exponent
    assert exponent.lstrip("-")[0] != "0"


def test_integral_value_gets_fraction():
    assert dtostr(1.0) == "1.0"


def test_positive_exponent_without_plus():
    assert dtostr(1e100) == "1e100"


def test_negative_exponent_keeps_sign():
    text = dtostr(1e-300)
    assert "e-" in text
    assert strtod(text) == 1e-300


def test_precision_limits_digits():
    text = dtostr(3.141592, 3)
    assert strtod(text) == pytest.approx(3.141592, abs=0.01)
    assert len(text.replace(".", "")) <= 3


def test_default_precision_is_seventeen():
    assert dtostr(0.1) == dtostr(0.1, 17)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_rejected(value):
    with pytest.raises(ValueError):
        dtostr(value)


def test_strtod_parses_text_and_bytes():
    assert strtod("3.141592") == 3.141592
    assert strtod(b"123e9") == 123e9


def test_strtod_overflow():
    big = "1" + "0" * 309
    with pytest.raises(OverflowError, match="real number overflow"):
        strtod(big)
    with pytest.raises(OverflowError):
        strtod("-" + big)


def test_strtod_underflow_gives_zero():
    assert strtod("1e-400") == 0.0


def test_strtod_invalid():
    with pytest.raises(ValueError):
        strtod("garbage")