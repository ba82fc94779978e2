"""Reader for `.properties` files.

Follows the rules of `java.util.Properties.load`, the parser Gradle scripts use
for `key.properties`:

- `#` and `!` start a comment when they are the first non-blank character
- the key ends at the first unescaped `=`, `:` or blank
- a trailing odd run of backslashes continues the line
- `\\t \\n \\r \\f \\uXXXX` escapes are decoded, any other escaped char is itself

The file is decoded as ISO-8859-1, like the JVM's byte stream loader.
A line with a malformed `\\uXXXX` escape is skipped instead of failing the
whole file.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .result import Err, Ok, Result

__all__ = [
    "Properties",
    "PropertiesError",
    "PropertiesMissing",
    "PropertiesUnreadable",
    "load_properties",
    "parse_properties",
]

PROPERTIES_ENCODING = "iso-8859-1"

_BLANKS = " \t\f"
_SEPARATORS = "=:"
_NEWLINE = re.compile(r"\r\n|\r|\n")
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class _MalformedEscape(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class PropertiesMissing:
    """The properties file does not exist."""

    path: Path


@dataclass(frozen=True, slots=True)
class PropertiesUnreadable:
    """The properties file exists but cannot be read."""

    path: Path
    reason: str


PropertiesError = PropertiesMissing | PropertiesUnreadable


def _empty_entries() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, eq=False)
class Properties(Mapping[str, str]):
    """Read-only key/value pairs loaded from a properties file."""

    __hash__ = None  # type: ignore[assignment]

    entries: Mapping[str, str] = field(default_factory=_empty_entries)
    path: Path | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __getitem__(self, key: str) -> str:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def _logical_lines(text: str) -> Iterator[str]:
    parts: list[str] | None = None
    for raw in _NEWLINE.split(text):
        line = raw.lstrip(_BLANKS)
        if parts is None:
            if not line or line[0] in "#!":
                continue
            parts = []
        if _continues(line):
            parts.append(line[:-1])
            continue
        parts.append(line)
        yield "".join(parts)
        parts = None
    if parts:
        yield "".join(parts)


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    n = len(line)
    i = 0
    escaped = False
    while i < n:
        c = line[i]
        if escaped:
            escaped = False
        elif c == "\\":
            escaped = True
        elif c in _SEPARATORS or c in _BLANKS:
            break
        i += 1

    key = line[:i]
    j = i
    while j < n and line[j] in _BLANKS:
        j += 1
    if j < n and line[j] in _SEPARATORS:
        j += 1
        while j < n and line[j] in _BLANKS:
            j += 1
    return key, line[j:]


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        i += 1
        if c != "\\":
            out.append(c)
            continue
        if i >= n:
            break
        c = text[i]
        i += 1
        if c == "u":
            digits = text[i : i + 4]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise _MalformedEscape(f"malformed \\uxxxx escape: \\u{digits}")
            out.append(chr(int(digits, 16)))
            i += 4
            continue
        out.append(_SIMPLE_ESCAPES.get(c, c))
    # a surrogate pair written as two escapes becomes one code point
    return "".join(out).encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dict. Later duplicates win."""
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        try:
            key = _unescape(raw_key)
            value = _unescape(raw_value)
        except _MalformedEscape:
            continue
        entries[key] = value
    return entries


def load_properties(path: Path) -> Result[Properties, PropertiesError]:
    """Load a properties file.

    Args:
        path: Location of the file.

    Returns:
        Ok(Properties) on success, Err(PropertiesMissing) when there is no
        file, Err(PropertiesUnreadable) when it cannot be read.
    """
    try:
        with path.open("r", encoding=PROPERTIES_ENCODING, newline="") as handle:
            text = handle.read()
    except FileNotFoundError:
        return Err(PropertiesMissing(path=path))
    except IsADirectoryError:
        return Err(PropertiesUnreadable(path=path, reason="is a directory"))
    except PermissionError:
        return Err(PropertiesUnreadable(path=path, reason="permission denied"))
    except OSError as e:
        return Err(PropertiesUnreadable(path=path, reason=e.strerror or str(e)))

    return Ok(Properties(entries=parse_properties(text), path=path))
