"""Application layer interfaces."""
from abc import ABC, abstractmethod

from ecommerce.domain.entities.order import Order


class IIdentityContext(ABC):
    """
    Interface for the caller's authenticated identity.

    Implementations must reflect the identity at invocation time; the
    application layer never reads ambient request state.
    """

    @abstractmethod
    def current_user_id(self) -> str:
        """Identifier of the authenticated caller."""
        pass

    @abstractmethod
    def current_user_is_admin(self) -> bool:
        """Whether the caller holds the administrator role."""
        pass


class INotificationService(ABC):
    """
    Interface for customer notifications.

    Allows different delivery channels (log, e-mail, Slack, ...).
    """

    @abstractmethod
    async def send_order_confirmation(self, order: Order) -> None:
        """
        Send the order confirmation for a placed order.

        Args:
            order: Placed order
        """
        pass


__all__ = ["IIdentityContext", "INotificationService"]
