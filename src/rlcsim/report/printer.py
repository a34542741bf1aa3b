# src/rlcsim/report/printer.py
"""
Formats a solved circuit for the terminal.

The report has three parts: labelled summary lines with fixed precision and
unit symbols, a short narrative built from the classification helpers, and a
single-row table with the same figures for copying into notes.
"""
import logging
import sys
from typing import List, Optional, TextIO

from ..config import AnalysisConfig
from ..solver.classification import ReactanceCharacter, classify_reactance, rate_power_factor
from ..solver.results import CircuitResults
from ..units import Quantity

logger = logging.getLogger(__name__)

BANNER = "\t\t<-----------|WELCOME TO RLC CIRCUIT CALCULATOR|----------->"

LABEL_WIDTH = 35
COLUMN_WIDTH = 12

# (label, results attribute, unit, format spec)
SUMMARY_ROWS = [
    ("Capacitive Reactance", "capacitive_reactance", "ohm", ".1f"),
    ("Inductive Reactance", "inductive_reactance", "ohm", ".2f"),
    ("Impedance of the circuit", "impedance_magnitude", "ohm", ".2f"),
    ("Current through the circuit", "rms_current", "A", ".4f"),
    ("Voltage across Resistor", "voltage_across_resistor", "V", ".2f"),
    ("Voltage across Capacitor", "voltage_across_capacitor", "V", ".2f"),
    ("Voltage across Inductor", "voltage_across_inductor", "V", ".2f"),
    ("Power in the circuit", "power_dissipated", "W", ".3f"),
    ("Resonant Frequency", "resonant_frequency", "Hz", ".2f"),
]

# (header, results attribute, format spec)
TABLE_COLUMNS = [
    ("Xc[Ω]", "capacitive_reactance", ".1f"),
    ("Xl[Ω]", "inductive_reactance", ".2f"),
    ("Z[Ω]", "impedance_magnitude", ".2f"),
    ("I_rms[A]", "rms_current", ".4f"),
    ("Vr[V]", "voltage_across_resistor", ".2f"),
    ("Vl[V]", "voltage_across_inductor", ".2f"),
    ("Vc[V]", "voltage_across_capacitor", ".2f"),
    ("P[W]", "power_dissipated", ".3f"),
    ("Fr[Hz]", "resonant_frequency", ".2f"),
    ("Phi[°]", "phase_angle_degrees", ".2f"),
    ("PF", "power_factor", ".4f"),
]


class ReportPrinter:
    """Renders `CircuitResults` as plain text."""

    def __init__(self, config: Optional[AnalysisConfig] = None, output: Optional[TextIO] = None):
        self.config = config if config is not None else AnalysisConfig()
        self._output = output

    def summary_lines(self, results: CircuitResults) -> List[str]:
        lines = []
        for label, attr, unit, spec in SUMMARY_ROWS:
            qty = Quantity(getattr(results, attr), unit)
            lines.append(f"{label:<{LABEL_WIDTH}}: {qty:{spec}~P}")
        lines.append(f"{'Phase Angle':<{LABEL_WIDTH}}: {results.phase_angle_degrees:.2f}°")
        lines.append(f"{'Power Factor':<{LABEL_WIDTH}}: {results.power_factor:.4f}")
        return lines

    def narrative_lines(self, results: CircuitResults) -> List[str]:
        character = classify_reactance(results, self.config.resonance_tolerance_ohm)
        angle = abs(results.phase_angle_degrees)
        if character is ReactanceCharacter.RESONANT:
            behaviour = (
                "The circuit is at resonance: the inductive and capacitive reactances cancel "
                "and the current is in phase with the supply voltage."
            )
        elif character is ReactanceCharacter.INDUCTIVE:
            behaviour = f"The circuit is inductive (XL > XC): the current lags the supply voltage by {angle:.2f}°."
        else:
            behaviour = f"The circuit is capacitive (XC > XL): the current leads the supply voltage by {angle:.2f}°."

        quality = rate_power_factor(results.power_factor, self.config.power_factor_thresholds)
        return [behaviour, f"Power factor quality: {quality}."]

    def table_lines(self, results: CircuitResults) -> List[str]:
        header = " ".join(f"{title:<{COLUMN_WIDTH}}" for title, _, _ in TABLE_COLUMNS)
        row = " ".join(
            f"{getattr(results, attr):<{COLUMN_WIDTH}{spec}}" for _, attr, spec in TABLE_COLUMNS
        )
        return [header.rstrip(), row.rstrip()]

    def render(self, results: CircuitResults) -> str:
        """Returns the complete report as one string."""
        sections = [
            "\n".join(self.summary_lines(results)),
            "\n".join(self.narrative_lines(results)),
            "\n".join(self.table_lines(results)),
        ]
        return "\n" + "\n\n".join(sections) + "\n"

    def print_report(self, results: CircuitResults):
        print(self.render(results), file=self._output if self._output is not None else sys.stdout)
