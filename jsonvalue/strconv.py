"""Conversions between JSON number text and floats."""

from __future__ import annotations

import math

__all__ = ["strtod", "dtostr"]


def strtod(text: str | bytes) -> float:
    """Convert the text of a JSON real number to a float.

    Raises OverflowError if the value is too large to be represented and
    ValueError if the text is not a number.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("ascii")
    value = float(text)
    if math.isinf(value):
        raise OverflowError("real number overflow")
    return value


def dtostr(value: float, precision: int = 0) -> str:
    """Format a float so that it reads back as a real, never as an integer.

    A precision of 0 means 17 significant digits. The result always holds
    a '.' or an 'e'; the exponent carries no '+' sign and no leading zeros.
    """
    if math.isnan(value) or math.isinf(value):
        raise ValueError("cannot format a non-finite real")
    if precision == 0:
        precision = 17
    elif precision < 0:
        precision = 6

    text = "%.*g" % (precision, value)

    if "." not in text and "e" not in text:
        text += ".0"

    mantissa, sep, exponent = text.partition("e")
    if sep:
        sign = "-" if exponent.startswith("-") else ""
        digits = exponent.lstrip("+-").lstrip("0")
        text = f"{mantissa}e{sign}{digits}"
    return text