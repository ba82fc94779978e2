"""Release signing configuration.

The four keys below must match the ones written in `key.properties`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "KEY_ALIAS",
    "KEY_PASSWORD",
    "REQUIRED_KEYS",
    "STORE_FILE",
    "STORE_PASSWORD",
    "SigningConfig",
    "missing_keys",
]

STORE_FILE = "MYAPP_RELEASE_STORE_FILE"
STORE_PASSWORD = "MYAPP_RELEASE_STORE_PASSWORD"
KEY_ALIAS = "MYAPP_RELEASE_KEY_ALIAS"
KEY_PASSWORD = "MYAPP_RELEASE_KEY_PASSWORD"

REQUIRED_KEYS: tuple[str, ...] = (STORE_FILE, STORE_PASSWORD, KEY_ALIAS, KEY_PASSWORD)

_MASK = "********"


@dataclass(frozen=True, slots=True)
class SigningConfig:
    """Credentials used to sign the release artifact.

    Values are kept exactly as read from the properties file. The store file
    is resolved to an absolute path only when asked, against the Android app
    module directory.
    """

    store_file: str
    store_password: str
    key_alias: str
    key_password: str

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> SigningConfig:
        """Build from a mapping that holds all REQUIRED_KEYS."""
        return cls(
            store_file=properties[STORE_FILE],
            store_password=properties[STORE_PASSWORD],
            key_alias=properties[KEY_ALIAS],
            key_password=properties[KEY_PASSWORD],
        )

    def resolve_store_file(self, module_dir: Path) -> Path:
        """Absolute keystore path; relative paths are taken from module_dir."""
        path = Path(self.store_file).expanduser()
        if not path.is_absolute():
            path = module_dir / path
        return path.resolve()

    def redacted(self) -> dict[str, str]:
        """Display form with passwords masked."""
        return {
            "store_file": self.store_file,
            "store_password": _MASK,
            "key_alias": self.key_alias,
            "key_password": _MASK,
        }

    def __repr__(self) -> str:
        return f"SigningConfig(store_file={self.store_file!r}, key_alias={self.key_alias!r})"


def missing_keys(properties: Mapping[str, str]) -> tuple[str, ...]:
    """Required keys that are absent or empty, in REQUIRED_KEYS order."""
    return tuple(key for key in REQUIRED_KEYS if not properties.get(key))
