"""Number parsing and minimal number formatting for CSS output."""

import math


def parse_number(text: str | float) -> float:
    """
    Parse a CSS numeric literal, given as text or as a number.

    Malformed, NaN and infinite literals all read as zero.
    """
    try:
        value = float(text)

    except (TypeError, ValueError):
        return 0.0

    if math.isnan(value) or math.isinf(value):
        return 0.0

    return value


def format_number(value: float, positive: bool = False, keep_leading_zero: bool = False) -> str:
    """
    Format a number using the fewest characters CSS allows.

    The fractional part is truncated (not rounded) to four places and trailing
    zeros are trimmed.  Anything within 1e-5 of an integer prints as that
    integer.  NaN and infinities print as zero.

    Args:
        value: Number to format
        positive: Format the absolute value
        keep_leading_zero: Keep the "0" in "0.5" (used for pretty output)

    Returns:
        Formatted number, e.g. 0.5 -> ".5", -0.25 -> "-.25", 2.000001 -> "2"
    """
    if not math.isfinite(value):
        return '0'

    if positive:
        value = abs(value)

    nearest = round(value)
    if abs(nearest - value) < 0.00001:
        text = str(int(nearest))

    else:
        whole, _, fraction = f"{abs(value):.10f}".partition('.')
        fraction = fraction[:4].rstrip('0')
        text = f"{whole}.{fraction}" if fraction else whole
        if value < 0 and text != '0':
            text = '-' + text

    if keep_leading_zero:
        return text

    if text.startswith('0.'):
        return text[1:]

    if text.startswith('-0.'):
        return '-' + text[2:]

    return text
