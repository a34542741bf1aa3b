# --- src/rlcsim/constants.py ---
import logging

import numpy as np

logger = logging.getLogger(__name__)

# --- Numerical Constants for Analysis ---

#: Default lower bound for circuit inputs (in SI units). Any value less than or
#: equal to this is rejected at the input boundary. Overridable through
#: `AnalysisConfig.min_positive_value`.
#: Value: smallest positive normal double (~2.2e-308).
MIN_POSITIVE_VALUE: float = float(np.finfo(float).tiny)

#: Net reactance below which the circuit is reported as resonant.
#: Value: 1 milli-ohm.
RESONANCE_TOLERANCE_OHM: float = 1.0e-3 # Ohm

#: Lower (exclusive) power factor bounds for each quality band, descending.
POWER_FACTOR_THRESHOLDS = {
    "excellent": 0.9,
    "good": 0.7,
    "fair": 0.5,
}

#: Units the interactive prompts assume when the user types a bare number.
DEFAULT_INPUT_UNITS = {
    "supply_voltage": "V",
    "frequency": "Hz",
    "resistance": "ohm",
    "inductance": "mH",
    "capacitance": "uF",
}

logger.debug("Defined core constants: MIN_POSITIVE_VALUE, RESONANCE_TOLERANCE_OHM, POWER_FACTOR_THRESHOLDS")
