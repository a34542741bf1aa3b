# src/rlcsim/data_structures.py
import logging
import math
from dataclasses import dataclass, fields

from .errors import ParameterValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CircuitParameters:
    """
    The validated inputs of a single series RLC analysis, in SI base units.

    This object is the explicit contract between the InputCollector and the
    solver. It is immutable once constructed, and construction itself refuses
    any field that is not finite and strictly positive. Unit conversion (mH, uF,
    kHz, ...) is the caller's job; nothing here rescales or clamps a value.

    Attributes:
        resistance: Series resistance in ohms.
        inductance: Series inductance in henries.
        capacitance: Series capacitance in farads.
        supply_voltage: RMS source voltage in volts.
        frequency: Drive frequency in hertz.
    """
    resistance: float
    inductance: float
    capacitance: float
    supply_voltage: float
    frequency: float

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            try:
                numeric = float(value)
            except (TypeError, ValueError) as e:
                raise ParameterValidationError(f.name, value, "Value is not a real number.") from e
            if not math.isfinite(numeric):
                raise ParameterValidationError(f.name, value, "Value must be finite.")
            if numeric <= 0.0:
                raise ParameterValidationError(f.name, value, "Value must be strictly positive.")
            # Normalise ints and numpy scalars to plain floats.
            object.__setattr__(self, f.name, numeric)
