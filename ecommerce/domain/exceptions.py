"""Order placement exceptions.

Raised by the placement workflow when a business rule is violated or the
order store fails. Callers catch these and translate them for their own
transport.
"""

from typing import Optional


class OrderPlacementError(Exception):
    """Base class for every error raised while placing an order."""

    def __init__(self, message: str, order_id: Optional[int] = None):
        super().__init__(message)
        self.order_id = order_id


class NotFoundError(OrderPlacementError):
    """No order matches the requested identifier."""


class InvalidStateError(OrderPlacementError):
    """The order is not in a status that allows the requested transition."""


class EmptyOrderError(OrderPlacementError):
    """The order has no items."""


class AuthorizationError(OrderPlacementError):
    """The caller is neither the owning customer nor an administrator."""


class PersistenceError(OrderPlacementError):
    """The order store failed to commit the order."""


class ConcurrencyError(PersistenceError):
    """Raised when concurrent modification detected. Safe to retry."""
