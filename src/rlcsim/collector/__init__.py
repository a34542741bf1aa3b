# src/rlcsim/collector/__init__.py
from .collector import InputCollector, FIELD_PROMPTS, AFFIRMATIVE_ANSWERS
from .quantities import parse_field_value, check_range, check_solvable
from .exceptions import InputCombinationError, InputParseError, InputRangeError, InputUnavailableError

__all__ = [
    # Collector
    "InputCollector",
    "FIELD_PROMPTS",
    "AFFIRMATIVE_ANSWERS",
    # Field Parsing
    "parse_field_value",
    "check_range",
    "check_solvable",
    # Exceptions
    "InputParseError",
    "InputRangeError",
    "InputCombinationError",
    "InputUnavailableError",
]
