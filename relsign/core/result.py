"""Result type for explicit error handling.

Loading a properties file or checking a release variant can fail in ways the
caller is expected to handle (missing file, missing keystore). Those outcomes
are returned as values instead of raised:

    match load_properties(path):
        case Ok(props):
            ...
        case Err(PropertiesMissing(path=p)):
            console.warning(f"not found: {p}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result carrying an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]
