"""Flutter project detection and paths.

A project root is the directory holding `pubspec.yaml` next to an `android/`
directory. `key.properties` always lives in that root.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "CONFIG_NAME",
    "KEY_PROPERTIES_NAME",
    "Project",
    "ProjectError",
    "detect_project",
    "find_project_upward",
    "is_project_root",
]

KEY_PROPERTIES_NAME = "key.properties"
CONFIG_NAME = "relsign.toml"


@dataclass(frozen=True)
class ProjectError:
    """Error when no Flutter project can be found."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Project:
    """A Flutter project with an Android host app."""

    root: Path

    @property
    def android_dir(self) -> Path:
        """Gradle root project (`android/`)."""
        return self.root / "android"

    @property
    def app_module_dir(self) -> Path:
        """Android application module; relative keystore paths resolve here."""
        return self.android_dir / "app"

    @property
    def key_properties_path(self) -> Path:
        """Signing properties, next to pubspec.yaml."""
        return self.root / KEY_PROPERTIES_NAME

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_NAME

    def __str__(self) -> str:
        return str(self.root)


def is_project_root(path: Path) -> bool:
    return (path / "pubspec.yaml").is_file() and (path / "android").is_dir()


def find_project_upward(start: Path) -> Path | None:
    """Search upward from start for a project root."""
    for parent in (start, *start.parents):
        if is_project_root(parent):
            return parent
    return None


def detect_project(
    *,
    start_dir: Path | None = None,
    env_var: str = "RELSIGN_PROJECT_ROOT",
) -> Result[Project, ProjectError]:
    """Detect the project root.

    Detection order:
    1. env_var (if set it must point at a valid project)
    2. Search upward from start_dir (or cwd)
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if is_project_root(env_path):
            return Ok(Project(root=env_path))
        return Err(
            ProjectError(
                message=f"${env_var} is set to '{env_value}' but it is not a Flutter project",
                searched_from=env_path if env_path.is_dir() else None,
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_project_upward(search_start)
    if found is None:
        return Err(
            ProjectError(
                message="Could not find a Flutter project (pubspec.yaml with android/)",
                searched_from=search_start,
            )
        )
    return Ok(Project(root=found))
