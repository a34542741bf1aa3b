# src/rlcsim/collector/collector.py
import logging
import sys
from typing import Callable, Optional, TextIO

from ..config import AnalysisConfig
from ..data_structures import CircuitParameters
from ..units import resolve_unit
from .exceptions import InputCombinationError, InputParseError, InputRangeError, InputUnavailableError
from .quantities import check_range, check_solvable, parse_field_value

logger = logging.getLogger(__name__)

#: Order in which the fields are requested.
FIELD_PROMPTS = {
    "supply_voltage": "Enter voltage of the circuit",
    "frequency": "Enter frequency of the circuit",
    "resistance": "Enter resistance of the circuit",
    "inductance": "Enter inductance of the circuit",
    "capacitance": "Enter capacitance of the circuit",
}

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})

CONTINUE_PROMPT = "Do you want to analyze another circuit? (y/n): "


class InputCollector:
    """
    Prompts for the five circuit values and turns them into a `CircuitParameters`.

    Every field is read in a local loop: unreadable or out-of-range text prints
    a message and asks again, indefinitely, so only valid values ever reach the
    parameter record. The only error that leaves this class is
    `InputUnavailableError`, raised when the input stream itself fails.

    Args:
        config: Units and limits to apply. Defaults to `AnalysisConfig()`.
        input_func: Callable with the signature of the builtin `input`.
        output: Stream for error messages. Defaults to the current `sys.stdout`.
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.config = config if config is not None else AnalysisConfig()
        self._input = input_func
        self._output = output

    def _write(self, text: str):
        print(text, file=self._output if self._output is not None else sys.stdout)

    def _read(self, prompt: str, field_name: Optional[str] = None) -> str:
        try:
            return self._input(prompt)
        except (EOFError, OSError) as e:
            logger.debug(f"Input stream unavailable at prompt '{prompt.strip()}': {e!r}")
            raise InputUnavailableError(prompt=prompt.strip(), field_name=field_name) from e

    def prompt_for(self, field_name: str) -> str:
        """Returns the prompt text for a field, including its default unit."""
        unit = resolve_unit(self.config.input_units[field_name], field_name)
        return f"{FIELD_PROMPTS[field_name]} [{unit:~P}]: "

    def read_field(self, field_name: str) -> float:
        """
        Reads one field, re-prompting until a valid value is entered.

        Returns:
            The value in SI base units.

        Raises:
            InputUnavailableError: If the input stream fails.
        """
        prompt = self.prompt_for(field_name)
        default_unit = self.config.input_units[field_name]
        while True:
            raw_text = self._read(prompt, field_name)
            try:
                value = parse_field_value(raw_text, field_name, default_unit)
                return check_range(value, field_name, self.config.min_positive_value)
            except (InputParseError, InputRangeError) as e:
                logger.debug(f"Rejected input {raw_text!r} for '{field_name}': {e}")
                self._write(f"Invalid input: {e} Please try again.")

    def collect(self) -> CircuitParameters:
        """
        Reads all five fields in order and returns the validated record.

        A set whose fields are individually valid but cannot be solved
        together is rejected, and all five fields are asked for again.

        Raises:
            InputUnavailableError: If the input stream fails.
        """
        while True:
            values = {field_name: self.read_field(field_name) for field_name in FIELD_PROMPTS}
            params = CircuitParameters(**values)
            try:
                check_solvable(params)
                break
            except InputCombinationError as e:
                logger.debug(f"Rejected parameter set {params}: {e}")
                self._write(f"Invalid input: {e} Please enter the circuit again.")
        logger.debug(f"Collected circuit parameters: {params}")
        return params

    def ask_continue(self, prompt: str = CONTINUE_PROMPT) -> bool:
        """
        Asks whether to analyze another circuit.

        Only 'y' or 'yes' (any case) count as yes. A failed read counts as no.
        """
        try:
            answer = self._read(prompt)
        except InputUnavailableError:
            return False
        return answer.strip().lower() in AFFIRMATIVE_ANSWERS
