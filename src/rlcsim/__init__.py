# src/rlcsim/__init__.py
import logging

logger = logging.getLogger(__name__)
logger.debug("rlcsim package initialized.")

from .units import ureg, pint, Quantity, SI_UNITS
from .data_structures import CircuitParameters
from .solver import (
    CircuitResults, solve,
    ReactanceCharacter, PowerFactorQuality,
    is_at_resonance, classify_reactance, rate_power_factor,
)
from .config import AnalysisConfig, load_config, ConfigParsingError, ConfigSchemaError
from .collector import InputCollector, InputCombinationError, InputParseError, InputRangeError, InputUnavailableError
from .report import ReportPrinter
from .errors import RLCSimError, AnalysisRunError, ParameterValidationError
from .cli import main

__all__ = [
    # Units
    "ureg", "pint", "Quantity", "SI_UNITS",
    # Data Model
    "CircuitParameters", "CircuitResults",
    # Solver
    "solve",
    "ReactanceCharacter", "PowerFactorQuality",
    "is_at_resonance", "classify_reactance", "rate_power_factor",
    # Configuration
    "AnalysisConfig", "load_config", "ConfigParsingError", "ConfigSchemaError",
    # Input Boundary
    "InputCollector", "InputCombinationError", "InputParseError", "InputRangeError", "InputUnavailableError",
    # Output
    "ReportPrinter",
    # CLI
    "main",
    # Top-Level Errors
    "RLCSimError", "AnalysisRunError", "ParameterValidationError",
]
