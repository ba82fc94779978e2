"""Typed loading of relsign.toml.

The file is optional. It never changes where key.properties is read from.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table

__all__ = [
    "AndroidConfig",
    "Config",
    "ConfigError",
    "SigningPolicyConfig",
    "load_config",
]


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class SigningPolicyConfig:
    """How hard to fail when release signing cannot be resolved.

    strict=False keeps the Gradle behaviour: warn and let packaging fail later.
    """

    strict: bool = False


@dataclass(frozen=True, slots=True)
class AndroidConfig:
    """Identity of the Android app, shown in reports."""

    namespace: str | None = None
    application_id: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    signing: SigningPolicyConfig = field(default_factory=SigningPolicyConfig)
    android: AndroidConfig = field(default_factory=AndroidConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a parsed TOML mapping."""
        signing: StrDict = get_table(data, "signing") or {}
        android: StrDict = get_table(data, "android") or {}

        strict = get_bool(signing, "strict")
        namespace = get_str(android, "namespace")
        return cls(
            signing=SigningPolicyConfig(strict=bool(strict)),
            android=AndroidConfig(
                namespace=namespace,
                application_id=get_str(android, "application_id") or namespace,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data = as_str_dict(tomllib.loads(path.read_bytes().decode("utf-8")))
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to relsign.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))

