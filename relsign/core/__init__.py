"""Core domain types and logic."""

from .config import Config, ConfigError, load_config
from .errors import ErrorCode
from .project import Project, ProjectError, detect_project
from .properties import Properties, load_properties, parse_properties
from .result import Err, Ok, Result
from .signing import REQUIRED_KEYS, SigningConfig, missing_keys

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    # errors
    "ErrorCode",
    # project
    "Project",
    "ProjectError",
    "detect_project",
    # properties
    "Properties",
    "load_properties",
    "parse_properties",
    # result
    "Err",
    "Ok",
    "Result",
    # signing
    "REQUIRED_KEYS",
    "SigningConfig",
    "missing_keys",
]
