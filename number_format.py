"""
Number formatting helpers for converter and calculator results.

Conversion results are raw floats; these helpers decide how many digits a
user gets to see.
"""

import math
from typing import Optional, Union

Numeric = Union[int, float, str]


def _to_float(value: Numeric) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return None


def format_exact(value: Numeric) -> str:
    """
    Show a number without unnecessary decimals.

    1.0 -> "1", 1.50 -> "1.5". Whole numbers from 1e21 up keep exponent
    notation ("1e+21"). Values that are not finite numbers are returned as
    str(value).
    """
    num = _to_float(value)
    if num is None or not math.isfinite(num):
        return str(value)
    if num.is_integer() and abs(num) < 1e21:
        return str(int(num))
    text = repr(num)
    if "e" in text or "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def format_value(value: Numeric, is_rpm: bool = False) -> str:
    """RPM is always a whole number; everything else keeps its exact form."""
    num = _to_float(value)
    if num is None or not math.isfinite(num):
        return str(value)
    if is_rpm:
        return str(int(math.floor(num + 0.5)))
    return format_exact(num)


def format_significant(value: Numeric, digits: int = 6) -> str:
    num = _to_float(value)
    if num is None or not math.isfinite(num):
        return str(value)
    return f"{num:.{digits}g}"


def format_decimals(value: Numeric, decimals: int = 4) -> str:
    """Round to at most *decimals* places and drop trailing zeros."""
    num = _to_float(value)
    if num is None or not math.isfinite(num):
        return str(value)
    return format_exact(round(num, decimals))


def smart_round(value: Numeric, max_decimals: int = 6) -> str:
    """
    Round based on magnitude.

    - below 0.01 (non-zero): *max_decimals* significant digits
    - below 1,000: up to 4 decimals
    - below 1,000,000: up to 2 decimals
    - anything larger: *max_decimals* significant digits
    """
    num = _to_float(value)
    if num is None or math.isnan(num):
        return "0"

    magnitude = abs(num)
    if 0 < magnitude < 0.01:
        return format_significant(num, max_decimals)
    if magnitude < 1_000:
        return format_decimals(num, min(4, max_decimals))
    if magnitude < 1_000_000:
        return format_decimals(num, min(2, max_decimals))
    return format_significant(num, max_decimals)


def display_format(value: Numeric, decimals: int = 4) -> str:
    """Format a result for display: "0" for garbage, "Error" for infinities."""
    num = _to_float(value)
    if num is None or math.isnan(num):
        return "0"
    if math.isinf(num):
        return "Error"
    return smart_round(num, decimals)


def format_display_number(value: Numeric, max_digits: int = 10) -> str:
    """
    Switch to scientific notation for very large or very small numbers.

    Anything with more than *max_digits* significant digits, or a magnitude
    below 0.0001, is shown as e.g. "1.235e+05".
    """
    num = _to_float(value)
    if num is None or not math.isfinite(num):
        return str(value)
    if num == 0:
        return "0"

    magnitude = abs(num)
    significant = format_exact(magnitude).replace(".", "").lstrip("0")
    if len(significant) > max_digits or magnitude < 0.0001:
        precision = min(3, max_digits - 1)
        return f"{num:.{precision}e}"
    return str(value)
