from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SigningUnavailable:
    variant: str
    properties_path: Path | None = None
    hint: str = "Add MYAPP_RELEASE_* keys to key.properties in the project root"


@dataclass(frozen=True, slots=True)
class KeystoreMissing:
    path: Path
    hint: str = "Check MYAPP_RELEASE_STORE_FILE (relative paths start at android/app)"


SigningError = SigningUnavailable | KeystoreMissing
