# src/rlcsim/collector/quantities.py
"""
Turns one line of user text into a validated SI magnitude for a circuit field.
"""
import logging
import math
import re

import numpy as np
import pint

from ..constants import MIN_POSITIVE_VALUE
from ..data_structures import CircuitParameters
from ..solver import solve
from ..units import Quantity, SI_UNITS, UNIT_PARSE_ERRORS, resolve_unit
from .exceptions import InputCombinationError, InputParseError, InputRangeError

logger = logging.getLogger(__name__)

# A decimal number, optionally followed by a unit expression.
NUMBER_WITH_UNIT_REGEX = re.compile(
    r"^\s*(?P<number>[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)\s*(?P<unit>.*?)\s*$"
)

FIELD_LABELS = {
    "supply_voltage": "Voltage",
    "frequency": "Frequency",
    "resistance": "Resistance",
    "inductance": "Inductance",
    "capacitance": "Capacitance",
}


def parse_field_value(raw_text: str, field_name: str, default_unit: str) -> float:
    """
    Parses user text for `field_name` and returns its magnitude in SI base units.

    A bare number is interpreted in `default_unit`; text such as '2.2 uF' or
    '1 kHz' carries its own unit, which must match the field's dimension.

    Raises:
        InputParseError: If the text is not a number, names an unknown unit,
                         or names a unit of the wrong dimension.
    """
    match = NUMBER_WITH_UNIT_REGEX.match(raw_text)
    if not match:
        raise InputParseError(
            field_name=field_name,
            user_input=raw_text,
            details=f"'{raw_text.strip()}' is not a number."
        )

    unit_text = match.group("unit") or default_unit
    try:
        unit = resolve_unit(unit_text, field_name)
    except pint.DimensionalityError:
        expected = SI_UNITS[field_name]
        raise InputParseError(
            field_name=field_name,
            user_input=raw_text,
            details=f"Unit '{unit_text}' cannot be used for {FIELD_LABELS[field_name].lower()} (expected something convertible to {expected:~P})."
        ) from None
    except UNIT_PARSE_ERRORS as e:
        raise InputParseError(
            field_name=field_name,
            user_input=raw_text,
            details=f"Unknown unit '{unit_text}'."
        ) from e

    magnitude = float(match.group("number"))
    return float(Quantity(magnitude, unit).to(SI_UNITS[field_name]).magnitude)


def check_range(value: float, field_name: str, minimum: float) -> float:
    """
    Returns `value` unchanged if it is finite and strictly greater than `minimum`.

    Raises:
        InputRangeError: Otherwise. Values are never clamped.
    """
    label = FIELD_LABELS[field_name]
    if not math.isfinite(value):
        raise InputRangeError(
            field_name=field_name, value=value, minimum=minimum,
            details=f"{label} must be a finite number."
        )
    if value <= minimum:
        si_unit = SI_UNITS[field_name]
        if minimum > MIN_POSITIVE_VALUE:
            bound = f"greater than {minimum:g} {si_unit:~P}"
        else:
            bound = "greater than zero"
        raise InputRangeError(
            field_name=field_name, value=value, minimum=minimum,
            details=f"{label} must be {bound}."
        )
    return value


def check_solvable(params: CircuitParameters) -> None:
    """
    Confirms the solver can produce a finite result for `params`.

    Each field can be in range while a product of fields is not, e.g.
    f = 1e-200 Hz with C = 1e-206 F underflows omega*C to zero, and
    f = 1e200 Hz with L = 1e200 H overflows X_L to infinity.

    Raises:
        InputCombinationError: If the solve fails or any derived value is not
                               finite, or the power factor is not positive.
    """
    try:
        with np.errstate(all="ignore"):
            results = solve(params)
    except (ZeroDivisionError, OverflowError) as e:
        raise InputCombinationError(
            details=f"These values cannot be analyzed together: {e}."
        ) from e

    non_finite = sorted(name for name, value in vars(results).items() if not math.isfinite(value))
    if non_finite:
        raise InputCombinationError(
            details=f"These values cannot be analyzed together: {', '.join(non_finite)} would not be finite."
        )
    if not results.power_factor > 0.0:
        raise InputCombinationError(
            details="These values cannot be analyzed together: the power factor underflows to zero."
        )
