"""
Order Status Enum.

Lifecycle states of an order.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle: Draft -> Placed -> Shipped -> Delivered."""

    DRAFT = "Draft"
    PLACED = "Placed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"

    def can_transition_to(self, target: "OrderStatus") -> bool:
        """Only a single step forward is allowed; status never regresses."""
        return _NEXT.get(self) is target


_NEXT = {
    OrderStatus.DRAFT: OrderStatus.PLACED,
    OrderStatus.PLACED: OrderStatus.SHIPPED,
    OrderStatus.SHIPPED: OrderStatus.DELIVERED,
}
