# src/rlcsim/config/loader.py
import logging
from pathlib import Path
from typing import Any, Dict, Union

import cerberus
import pint
import yaml

from ..units import SI_UNITS, UNIT_PARSE_ERRORS, resolve_unit
from .exceptions import ConfigParsingError, ConfigSchemaError
from .settings import AnalysisConfig

logger = logging.getLogger(__name__)

LOG_LEVEL_NAMES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidator(cerberus.Validator):
    """Cerberus validator with the physical checks the configuration needs."""

    def _validate_unit_of(self, field_name: str, field: str, value: Any):
        """
        Checks that a unit string is understood by pint and measures the
        quantity stored in the named circuit field.
        The rule's arguments are validated against this schema:
        {'type': 'string'}
        """
        if not isinstance(value, str):
            return # Let the 'type: string' rule handle this.
        try:
            resolve_unit(value, field_name)
        except pint.DimensionalityError:
            expected = SI_UNITS[field_name]
            self._error(field, f"Unit '{value}' is not compatible with {expected:~P} ({field_name}).")
        except UNIT_PARSE_ERRORS as e:
            self._error(field, f"Unit '{value}' could not be parsed: {e}")

    def _validate_greater_than(self, bound: float, field: str, value: Any):
        """
        Exclusive lower bound; cerberus' 'min' is inclusive.
        The rule's arguments are validated against this schema:
        {'type': 'number'}
        """
        if isinstance(value, (int, float)) and not value > bound:
            self._error(field, f"Must be greater than {bound}; got {value}.")

    def _validate_descending_thresholds(self, constraint: bool, field: str, value: Any):
        """
        Checks that power factor thresholds satisfy excellent > good > fair.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint or not isinstance(value, dict):
            return
        try:
            ordered = [float(value[k]) for k in ("excellent", "good", "fair")]
        except (KeyError, TypeError, ValueError):
            return # Let the sub-schema report missing or mistyped keys.
        if not (ordered[0] > ordered[1] > ordered[2]):
            self._error(
                field,
                f"Thresholds must be strictly descending (excellent > good > fair); got {ordered}."
            )


def _threshold_rule() -> Dict[str, Any]:
    return {"type": "number", "coerce": float, "required": True, "min": 0.0, "max": 1.0}


def _unit_rule(field_name: str) -> Dict[str, Any]:
    return {"type": "string", "empty": False, "unit_of": field_name}


CONFIG_SCHEMA = {
    "min_positive_value": {"type": "number", "coerce": float, "min": 0.0},
    "resonance_tolerance_ohm": {"type": "number", "coerce": float, "greater_than": 0.0},
    "power_factor_thresholds": {
        "type": "dict",
        "descending_thresholds": True,
        "schema": {
            "excellent": _threshold_rule(),
            "good": _threshold_rule(),
            "fair": _threshold_rule(),
        },
    },
    "input_units": {
        "type": "dict",
        "schema": {name: _unit_rule(name) for name in SI_UNITS},
    },
    "log_level": {"type": "string", "coerce": str.upper, "allowed": LOG_LEVEL_NAMES},
}


def build_config(raw_config: Dict[str, Any], source: Union[str, Path] = "<memory>") -> AnalysisConfig:
    """
    Validates a raw configuration mapping and merges it over the defaults.

    Raises:
        ConfigSchemaError: If the mapping does not conform to CONFIG_SCHEMA.
    """
    validator = ConfigValidator(CONFIG_SCHEMA)
    validator.allow_unknown = False
    if not validator.validate(raw_config):
        raise ConfigSchemaError(errors=validator.errors, file_path=Path(source))

    document = validator.document
    defaults = AnalysisConfig()
    input_units = dict(defaults.input_units)
    input_units.update(document.get("input_units", {}))

    config = AnalysisConfig(
        min_positive_value=document.get("min_positive_value", defaults.min_positive_value),
        resonance_tolerance_ohm=document.get("resonance_tolerance_ohm", defaults.resonance_tolerance_ohm),
        power_factor_thresholds=dict(document.get("power_factor_thresholds", defaults.power_factor_thresholds)),
        input_units=input_units,
        log_level=document.get("log_level", defaults.log_level),
    )
    logger.info(f"Analysis configuration built from {source}.")
    return config


def load_config(config_path: Union[str, Path]) -> AnalysisConfig:
    """
    Loads an analysis configuration from a YAML file.

    Every key is optional; missing keys keep their defaults. Unknown keys are
    rejected.

    Raises:
        ConfigParsingError: If the file is missing, unreadable, empty, not a
                            mapping or not valid YAML.
        ConfigSchemaError: If the content fails schema validation.
    """
    source = Path(config_path).resolve()
    logger.info(f"Loading analysis configuration from: {source}")
    if not source.is_file():
        raise ConfigParsingError(details=f"Configuration file not found at path: {source}", file_path=source)
    try:
        with source.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except PermissionError as e:
        raise ConfigParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
    except yaml.YAMLError as e:
        raise ConfigParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e

    if content is None:
        raise ConfigParsingError(details="The YAML file is empty or contains no valid content.", file_path=source)
    if not isinstance(content, dict):
        raise ConfigParsingError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
    return build_config(content, source)
