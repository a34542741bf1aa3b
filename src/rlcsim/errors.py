# src/rlcsim/errors.py
import logging
from typing import Any, Dict, Protocol, abstractmethod
from typing import runtime_checkable

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class RLCSimError(Exception):
    """Base class for all custom, user-facing errors in rlcsim."""
    pass

class AnalysisRunError(RLCSimError):
    """
    Raised when an interactive analysis session cannot continue, for example
    because the input stream was exhausted while a circuit was being collected.
    The message is a pre-formatted, user-friendly diagnostic report.
    """
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can generate their own rich diagnostic report.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...

class DiagnosableError(Exception, Diagnosable):
    """
    A common, concrete base class for all internal exceptions that are diagnosable.

    It inherits from `Exception` so it can be used in `except` clauses, and it
    declares `get_diagnostic_report` abstract so every subclass has to say how
    it is presented to the user.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        """
        Abstract method to generate the diagnostic report.
        Subclasses MUST implement this.
        """
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    A stateless helper to format the final multi-line report string, ensuring a
    consistent look and feel for all user-facing diagnostics.

    Args:
        error_type: The high-level category of the error (e.g., "Invalid Input").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: A dictionary of contextual information (field, source file, user input).

    Returns:
        A formatted, user-friendly diagnostic report string ready for display.
    """
    lines = [
        "\n",
        "================ rlcsim: Actionable Diagnostic Report ================",
        f"Error Type:     {error_type}",
    ]
    if field_name := context.get('field'):
        lines.append(f"Field:          {field_name}")
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")
    if user_input := context.get('user_input'):
        lines.append(f"User Input:     '{user_input}'")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("======================================================================")
    return "\n".join(lines)


# --- Data Model Errors ---

class ParameterValidationError(DiagnosableError, ValueError):
    """
    Raised when a `CircuitParameters` record is constructed with a field that
    is not a finite, strictly positive number.
    """
    def __init__(self, field_name: str, value: Any, details: str):
        self.field_name = field_name
        self.value = value
        self.details = details
        super().__init__(f"Invalid value for '{field_name}' ({value!r}): {details}")

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Invalid Circuit Parameter",
            details=self.details,
            suggestion="All circuit parameters must be finite and strictly positive, expressed in SI base units.",
            context={'field': self.field_name, 'user_input': str(self.value)}
        )
