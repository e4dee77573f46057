"""
Static Identity Context.

Identity fixed at construction, e.g. resolved once per request by the
transport layer or set by a test.
"""
from dataclasses import dataclass

from ecommerce.application.interfaces import IIdentityContext


@dataclass(frozen=True)
class StaticIdentityContext(IIdentityContext):
    """Caller identity captured when the request was authenticated."""

    user_id: str
    is_admin: bool = False

    def current_user_id(self) -> str:
        return self.user_id

    def current_user_is_admin(self) -> bool:
        return self.is_admin
