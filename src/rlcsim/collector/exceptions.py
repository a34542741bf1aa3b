# src/rlcsim/collector/exceptions.py
"""
Defines the exceptions raised at the interactive input boundary.

`InputParseError` and `InputRangeError` are recoverable: the collector catches
them around a single field and re-prompts, so they never travel further.
`InputCombinationError` is recovered the same way, around the whole set.
`InputUnavailableError` is not recoverable; it means the input stream itself
is gone and it propagates out of the collection loop.
"""
from dataclasses import dataclass
from typing import Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class InputParseError(DiagnosableError, ValueError):
    """Raw text could not be read as a number with a compatible unit."""
    field_name: str
    user_input: str
    details: str

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unreadable Input",
            details=self.details,
            suggestion="Type a plain number (e.g. '10'), optionally followed by a unit (e.g. '10 mH', '2.2 uF', '1 kHz').",
            context={'field': self.field_name, 'user_input': self.user_input}
        )


@dataclass()
class InputRangeError(DiagnosableError, ValueError):
    """Input parsed correctly but is not finite or not above the minimum positive value."""
    field_name: str
    value: float
    minimum: float
    details: str

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Value Out Of Range",
            details=self.details,
            suggestion="Circuit values must be finite and strictly positive.",
            context={'field': self.field_name, 'user_input': str(self.value)}
        )


@dataclass()
class InputUnavailableError(DiagnosableError):
    """The input stream was exhausted or could not be read."""
    prompt: str
    field_name: Optional[str] = None

    def __str__(self):
        return f"Input became unavailable while waiting for: {self.prompt}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Input Unavailable",
            details=(
                f"The input stream ended or could not be read at the prompt '{self.prompt}'.\n"
                "The circuit being entered was discarded."
            ),
            suggestion="Run the calculator interactively, or supply one line per prompt when piping input.",
            context={'field': self.field_name}
        )


@dataclass()
class InputCombinationError(DiagnosableError, ValueError):
    """
    Every field is valid on its own, but together they drive a derived
    quantity out of floating-point range (division by an underflowed
    product, an infinite reactance, a zero power factor).
    """
    details: str

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unsolvable Circuit",
            details=self.details,
            suggestion="Use component values and a frequency of realistic magnitude; extreme exponents (e.g. 1e-200 or 1e200) overflow or underflow the calculation.",
            context={}
        )
