# src/rlcsim/config/settings.py
import logging
from dataclasses import dataclass, field
from typing import Dict

from ..constants import (
    DEFAULT_INPUT_UNITS,
    MIN_POSITIVE_VALUE,
    POWER_FACTOR_THRESHOLDS,
    RESONANCE_TOLERANCE_OHM,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Immutable settings shared by the input collector, the report printer and
    the CLI loop. The defaults reproduce the reference calculator.

    Attributes:
        min_positive_value: Inputs (in SI units) less than or equal to this are rejected.
        resonance_tolerance_ohm: |X_L - X_C| below this is reported as resonance.
        power_factor_thresholds: Exclusive lower bounds for 'excellent', 'good' and 'fair'.
        input_units: Unit assumed for a bare number typed at each prompt.
        log_level: Name of the logging level the CLI configures.
    """
    min_positive_value: float = MIN_POSITIVE_VALUE
    resonance_tolerance_ohm: float = RESONANCE_TOLERANCE_OHM
    power_factor_thresholds: Dict[str, float] = field(default_factory=lambda: dict(POWER_FACTOR_THRESHOLDS))
    input_units: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_INPUT_UNITS))
    log_level: str = "WARNING"
