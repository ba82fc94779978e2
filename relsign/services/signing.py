"""Release signing resolver.

Reads key.properties and builds the release SigningConfig when every
required key is there. Problems are reported on the console and turned into
an empty result; whether a missing config is fatal is decided by whoever
packages the release artifact (see services.variants).
"""

from __future__ import annotations

from pathlib import Path

from relsign.core.properties import (
    PropertiesMissing,
    PropertiesUnreadable,
    load_properties,
)
from relsign.core.result import Err
from relsign.core.signing import SigningConfig, missing_keys
from relsign.output.console import ConsoleProtocol, Style

__all__ = ["SigningResolver", "resolve_signing_config"]


class SigningResolver:
    """Turns a properties file into an optional SigningConfig.

    Holds no state besides the console, so resolving the same file twice
    gives the same answer.
    """

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def resolve(self, properties_path: Path) -> SigningConfig | None:
        """Resolve the release signing config from properties_path.

        Returns:
            The config, or None when the file is missing, unreadable or
            incomplete (a diagnostic has been printed in that case).
        """
        loaded = load_properties(properties_path)
        if isinstance(loaded, Err):
            match loaded.error:
                case PropertiesMissing(path=path):
                    self._console.warning(
                        f"{path.name} file not found at {path.absolute()}"
                    )
                    self._console.print(
                        f"hint: put {path.name} in the Flutter project root "
                        "(next to pubspec.yaml)",
                        Style.DIM,
                    )
                case PropertiesUnreadable(path=path, reason=reason):
                    self._console.error(f"cannot read {path.absolute()}: {reason}")
            return None

        properties = loaded.value
        missing = missing_keys(properties)
        if missing:
            self._console.error(
                f"missing release signing properties in {properties_path.name}: "
                + ", ".join(missing)
            )
            return None

        return SigningConfig.from_properties(properties)


def resolve_signing_config(
    properties_path: Path, console: ConsoleProtocol
) -> SigningConfig | None:
    """Shorthand for SigningResolver(console).resolve(properties_path)."""
    return SigningResolver(console).resolve(properties_path)
