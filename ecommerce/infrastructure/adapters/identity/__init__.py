"""Identity adapters."""

from .static_identity_context import StaticIdentityContext

__all__ = ["StaticIdentityContext"]
