# src/rlcsim/config/__init__.py
from .settings import AnalysisConfig
from .loader import CONFIG_SCHEMA, build_config, load_config
from .exceptions import ConfigParsingError, ConfigSchemaError

__all__ = [
    "AnalysisConfig",
    "CONFIG_SCHEMA",
    "build_config",
    "load_config",
    "ConfigParsingError",
    "ConfigSchemaError",
]
