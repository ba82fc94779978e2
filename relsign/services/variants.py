"""Build variants and release signing consumption.

Mirrors the `buildTypes` block of a Flutter app's Gradle script: `debug` is
debuggable and signed with the implicit debug identity, `release` takes its
signing config from the resolver, queried once per configuration.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from relsign.core.project import Project
from relsign.core.result import Err, Ok, Result
from relsign.core.signing import SigningConfig
from relsign.output.console import ConsoleProtocol
from relsign.services.signing import resolve_signing_config
from relsign.services.signing_errors import KeystoreMissing, SigningError, SigningUnavailable

__all__ = [
    "DEBUG",
    "RELEASE",
    "BuildVariant",
    "Variants",
    "configure_variants",
    "require_release_signing",
]

DEBUG = "debug"
RELEASE = "release"

SigningResolve = Callable[[Path, ConsoleProtocol], SigningConfig | None]


@dataclass(frozen=True, slots=True)
class BuildVariant:
    """A named build mode and the identity used to sign its output.

    Attributes:
        name: Variant name ("debug", "release")
        debuggable: Whether the artifact is debuggable
        signing: Release signing config, None if not resolved
        uses_debug_identity: Signed with the toolchain's debug keystore
        signing_source: Properties file consulted for `signing`
    """

    name: str
    debuggable: bool
    signing: SigningConfig | None = None
    uses_debug_identity: bool = False
    signing_source: Path | None = None

    @property
    def is_signable(self) -> bool:
        return self.uses_debug_identity or self.signing is not None


@dataclass(frozen=True, slots=True)
class Variants:
    debug: BuildVariant
    release: BuildVariant

    def __iter__(self) -> Iterator[BuildVariant]:
        return iter((self.debug, self.release))


def configure_variants(
    project: Project,
    console: ConsoleProtocol,
    *,
    resolve: SigningResolve = resolve_signing_config,
) -> Variants:
    """Configure debug and release variants for project."""
    properties_path = project.key_properties_path
    return Variants(
        debug=BuildVariant(name=DEBUG, debuggable=True, uses_debug_identity=True),
        release=BuildVariant(
            name=RELEASE,
            debuggable=False,
            signing=resolve(properties_path, console),
            signing_source=properties_path,
        ),
    )


def require_release_signing(
    variant: BuildVariant, module_dir: Path
) -> Result[SigningConfig, SigningError]:
    """Check that variant can be signed with its release identity.

    This is the packaging-side check: a release variant without a config, or
    whose keystore file is missing, cannot produce a signed artifact.
    """
    signing = variant.signing
    if signing is None:
        return Err(SigningUnavailable(variant=variant.name, properties_path=variant.signing_source))

    keystore = signing.resolve_store_file(module_dir)
    if not keystore.is_file():
        return Err(KeystoreMissing(path=keystore))
    return Ok(signing)
