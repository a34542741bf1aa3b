# --- src/rlcsim/units.py ---
import pint
import logging

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.debug("Pint Unit Registry initialized.")

# --- Canonical dimensionality objects for explicit checks ---
IMPEDANCE_DIMENSIONALITY = ureg.parse_expression('ohm').dimensionality
INDUCTANCE_DIMENSIONALITY = ureg.parse_expression('henry').dimensionality
CAPACITANCE_DIMENSIONALITY = ureg.parse_expression('farad').dimensionality
VOLTAGE_DIMENSIONALITY = ureg.parse_expression('volt').dimensionality
FREQUENCY_DIMENSIONALITY = ureg.parse_expression('hertz').dimensionality

#: SI base unit for each circuit input field. Everything that reaches the
#: solver is expressed in these units.
SI_UNITS = {
    "supply_voltage": ureg.volt,
    "frequency": ureg.hertz,
    "resistance": ureg.ohm,
    "inductance": ureg.henry,
    "capacitance": ureg.farad,
}

logger.debug("Defined canonical dimensionalities for circuit inputs.")

#: Errors pint raises for malformed or unknown unit expressions.
UNIT_PARSE_ERRORS = (pint.errors.PintError, AttributeError, SyntaxError, TypeError, ValueError)


def resolve_unit(unit_text: str, field_name: str) -> pint.Unit:
    """
    Parses `unit_text` and checks it measures the quantity held by `field_name`.

    Raises:
        KeyError: If `field_name` is not one of the circuit input fields.
        pint.DimensionalityError: If the unit has the wrong dimensionality.
        Any of UNIT_PARSE_ERRORS: If pint cannot parse the unit expression.
    """
    expected = SI_UNITS[field_name]
    unit = ureg.parse_units(unit_text.strip())
    if unit.dimensionality != expected.dimensionality:
        raise pint.DimensionalityError(unit, expected)
    return unit
