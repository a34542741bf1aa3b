# src/rlcsim/solver/classification.py
"""
Qualitative readings of a `CircuitResults` snapshot.

None of these values are stored on the results record; they are derived on
demand so the record stays a plain numerical snapshot.
"""
import logging
from enum import Enum
from typing import Mapping, Optional

from ..constants import POWER_FACTOR_THRESHOLDS, RESONANCE_TOLERANCE_OHM
from .results import CircuitResults

logger = logging.getLogger(__name__)


class ReactanceCharacter(Enum):
    """Which reactance dominates the circuit at the drive frequency."""
    RESONANT = "resonant"
    INDUCTIVE = "inductive"
    CAPACITIVE = "capacitive"

    def __str__(self):
        return self.value


class PowerFactorQuality(Enum):
    """Quality band of a power factor, best first."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    def __str__(self):
        return self.value


def is_at_resonance(results: CircuitResults, tolerance: float = RESONANCE_TOLERANCE_OHM) -> bool:
    """True when |X_L - X_C| is below `tolerance` ohms, or exactly zero."""
    net = results.net_reactance
    return net == 0.0 or abs(net) < tolerance


def classify_reactance(
    results: CircuitResults, tolerance: float = RESONANCE_TOLERANCE_OHM
) -> ReactanceCharacter:
    """
    Classifies the circuit as resonant, inductive or capacitive.

    Resonance takes precedence; otherwise the sign of the net reactance decides.
    """
    if is_at_resonance(results, tolerance):
        return ReactanceCharacter.RESONANT
    if results.net_reactance > 0:
        return ReactanceCharacter.INDUCTIVE
    return ReactanceCharacter.CAPACITIVE


def rate_power_factor(
    power_factor: float, thresholds: Optional[Mapping[str, float]] = None
) -> PowerFactorQuality:
    """
    Maps a power factor onto a quality band.

    Args:
        power_factor: The value to rate, in (0, 1].
        thresholds: Exclusive lower bounds keyed by 'excellent', 'good' and
                    'fair'. Defaults to 0.9 / 0.7 / 0.5.

    Returns:
        The first band, best first, whose lower bound `power_factor` exceeds;
        `PowerFactorQuality.POOR` if none.
    """
    bounds = POWER_FACTOR_THRESHOLDS if thresholds is None else thresholds
    for quality in (PowerFactorQuality.EXCELLENT, PowerFactorQuality.GOOD, PowerFactorQuality.FAIR):
        if power_factor > bounds[quality.value]:
            return quality
    return PowerFactorQuality.POOR
