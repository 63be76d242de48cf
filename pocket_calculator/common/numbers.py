"""Conversion between operand text and floating-point values."""
from decimal import Decimal
import math
import re
from typing import Optional


# Longest leading decimal literal, the way display operands are read back
NUMERIC_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

# Decimal exponents outside [MIN_PLAIN_EXPONENT, MAX_PLAIN_EXPONENT) use scientific notation
MIN_PLAIN_EXPONENT = -6
MAX_PLAIN_EXPONENT = 21


def parse_operand(text: str) -> Optional[float]:
    """
    Read the numeric value of an operand.

    Only the leading numeric part is used, so partial input such as ``"12."``
    reads as 12 and ``"Infinity5"`` as infinity.

    :param str text: Operand as shown on the display

    :return: Parsed value, or None if the text has no numeric prefix
    :rtype: Optional[float]
    """
    match = NUMERIC_PREFIX.match(text.lstrip())
    if match is None:
        return None
    return float(match.group())


def format_number(value: float) -> str:
    """
    Render a result for the display.

    Uses the shortest digit string that reads back to the same float, without
    a trailing ``.0`` for integral values.

    Examples:
        - 2.0 -> "2"
        - 0.1 + 0.2 -> "0.30000000000000004"
        - 1e21 -> "1e+21"
        - 5 / 0 -> "Infinity"

    :param float value: Value to render

    :return: Display text
    :rtype: str
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # Negative zero is shown as "0"
        return "0"

    sign = "-" if value < 0 else ""
    # repr() already yields the shortest round-tripping digits
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    # Position of the decimal point relative to the start of the digits
    point = exponent + len(digits)

    if len(digits) <= point <= MAX_PLAIN_EXPONENT:
        body = digits + "0" * (point - len(digits))
    elif 0 < point <= MAX_PLAIN_EXPONENT:
        body = f"{digits[:point]}.{digits[point:]}"
    elif MIN_PLAIN_EXPONENT < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        mantissa = digits[0] if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{point - 1:+d}"

    return sign + body
