# src/rlcsim/config/exceptions.py
"""
Defines the diagnosable exceptions raised while loading an analysis
configuration file.

`ConfigParsingError` covers file-level problems (missing file, permissions,
invalid YAML). `ConfigSchemaError` covers a well-formed YAML document that does
not match the cerberus schema.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from ..errors import DiagnosableError, format_diagnostic_report


class BaseConfigError(DiagnosableError, ValueError):
    """Common base for every configuration loading error."""
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Configuration Error",
            details=str(self),
            suggestion="Please check the format and content of the configuration file.",
            context={}
        )


@dataclass()
class ConfigParsingError(BaseConfigError):
    """
    Raised when a configuration file cannot be read or is not a YAML mapping.
    """
    details: str
    file_path: Path

    def __str__(self):
        return f"Configuration error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="YAML Parsing or File Error",
            details=self.details,
            suggestion="Ensure the file exists, has the correct read permissions, and contains valid YAML syntax.",
            context={'source_file': self.file_path}
        )


@dataclass()
class ConfigSchemaError(BaseConfigError):
    """
    Raised when the YAML content does not conform to the configuration schema
    (unknown keys, wrong types, thresholds out of order, units of the wrong
    dimension).
    """
    errors: Dict[str, Any]
    file_path: Path

    def __str__(self):
        error_lines = [f"  - In field '{k}': {v[0]}" for k, v in sorted(self.errors.items())]
        return (
            f"Configuration schema validation failed for file '{self.file_path}':\n"
            + "\n".join(error_lines)
        )

    def get_diagnostic_report(self) -> str:
        error_list_str = "\n".join(
            f"  - Field '{k}': {v[0]}" for k, v in sorted(self.errors.items())
        )
        details = (
            "The structure of the configuration file does not conform to the required schema.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n{error_list_str}"
        )
        return format_diagnostic_report(
            error_type="Configuration Schema Error",
            details=details,
            suggestion="Correct the specified fields. Power factor thresholds must be strictly descending (excellent > good > fair) and input units must match their quantity (e.g. 'mH' for inductance).",
            context={'source_file': self.file_path}
        )
