"""
Unit tables and minimal-representation search for CSS dimensions.

Each family maps a unit to its size in the family's base unit.  A dimension
can be rewritten into any other unit of its own family; it is never converted
across families.
"""

import math
from typing import Dict, Tuple

from cssopt.cssopt_number import format_number, parse_number


LENGTH_UNITS: Dict[str, float] = {
    'in': 96.0,
    'px': 1.0,
    'pt': 4.0 / 3.0,
    'pc': 16.0,
    'cm': 96.0 / 2.54,
    'mm': 96.0 / 25.4,
}

ANGLE_UNITS: Dict[str, float] = {
    'deg': 1.0,
    'rad': 180.0 / math.pi,
    'grad': 0.9,
    'turn': 360.0,
}

TIME_UNITS: Dict[str, float] = {
    's': 1000.0,
    'ms': 1.0,
}

FREQUENCY_UNITS: Dict[str, float] = {
    'Hz': 1.0,
    'kHz': 1000.0,
}

RESOLUTION_UNITS: Dict[str, float] = {
    'dpi': 1.0,
    'dpcm': 2.54,
    'dppx': 96.0,
}

UNIT_FAMILIES = (LENGTH_UNITS, ANGLE_UNITS, TIME_UNITS, FREQUENCY_UNITS, RESOLUTION_UNITS)

# Only converted from or to in aggressive mode.
AGGRESSIVE_ONLY_UNITS = frozenset({'cm', 'mm'})

# Accepted as input but never produced; support is patchy in older browsers.
NEVER_EMITTED_UNITS = frozenset({'turn'})

_UNIT_TO_FAMILY: Dict[str, Dict[str, float]] = {
    unit: family for family in UNIT_FAMILIES for unit in family
}


def unit_family(unit: str) -> Dict[str, float] | None:
    """Return the conversion table containing a unit, or None for unknown units."""
    return _UNIT_TO_FAMILY.get(unit)


def shortest_equivalent(value: float, unit: str, aggressive: bool) -> Tuple[float, str]:
    """
    Find the shortest textual form of a dimension within its unit family.

    Args:
        value: Numeric part of the dimension
        unit: Unit of the dimension
        aggressive: Whether cm and mm may take part in the search

    Returns:
        Tuple of (value, unit); the input is returned unchanged when no strictly
        shorter form exists or the unit is unknown
    """
    family = unit_family(unit)
    if family is None:
        return value, unit

    if not aggressive and unit in AGGRESSIVE_ONLY_UNITS:
        return value, unit

    base_value = value * family[unit]
    if not math.isfinite(base_value):
        return value, unit

    best = (value, unit)
    best_length = len(format_number(value)) + len(unit)

    for candidate, factor in family.items():
        if candidate == unit or candidate in NEVER_EMITTED_UNITS:
            continue

        if not aggressive and candidate in AGGRESSIVE_ONLY_UNITS:
            continue

        converted = base_value / factor
        if not math.isfinite(converted):
            continue

        text = format_number(converted)

        # Truncation to four places must not change the value.
        if abs(parse_number(text) - converted) > 0.00001:
            continue

        if len(text) + len(candidate) < best_length:
            best = (converted, candidate)
            best_length = len(text) + len(candidate)

    return best
