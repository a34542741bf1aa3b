# src/rlcsim/solver/__init__.py
from .results import CircuitResults
from .solver import solve
from .classification import (
    ReactanceCharacter,
    PowerFactorQuality,
    is_at_resonance,
    classify_reactance,
    rate_power_factor,
)

__all__ = [
    # Result Contract
    "CircuitResults",
    # Core Computation
    "solve",
    # Qualitative Readings
    "ReactanceCharacter",
    "PowerFactorQuality",
    "is_at_resonance",
    "classify_reactance",
    "rate_power_factor",
]
