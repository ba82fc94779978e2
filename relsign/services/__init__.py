"""Services: signing resolution and build variant configuration."""

from .signing import SigningResolver, resolve_signing_config
from .variants import BuildVariant, Variants, configure_variants, require_release_signing

__all__ = [
    "BuildVariant",
    "SigningResolver",
    "Variants",
    "configure_variants",
    "require_release_signing",
    "resolve_signing_config",
]
