"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..enums import OrderStatus
from ..events.base import DomainEvent
from ..events.order_events import OrderPlacedEvent
from ..exceptions import InvalidStateError
from ..value_objects import ExecutionID, Money


@dataclass
class OrderItem:
    """Individual line item within an order."""
    order_item_id: int
    product_id: int
    price: Money
    quantity: int

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got: {self.quantity}")

    def line_total(self) -> Money:
        """Unit price times quantity."""
        return self.price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    Orders are built elsewhere; this core only moves a Draft order to
    Placed and fixes its total. The owning customer is fixed at creation.
    """
    order_id: int
    customer_id: str
    items: List[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.DRAFT
    total_value: Optional[Money] = None
    is_vip_customer: bool = False

    # Optimistic concurrency token, owned by the repository
    version: int = 0

    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __setattr__(self, name, value):
        if name == "customer_id" and "customer_id" in self.__dict__:
            raise AttributeError(f"Order {self.order_id}: customer_id cannot be changed")
        super().__setattr__(name, value)

    @property
    def is_draft(self) -> bool:
        return self.status is OrderStatus.DRAFT

    def place(
        self,
        total: Money,
        execution_id: Optional[ExecutionID] = None,
        placed_by: Optional[str] = None,
    ) -> None:
        """
        Business rule: Transition Draft -> Placed with a fixed total.

        Records OrderPlacedEvent.

        Raises:
            InvalidStateError: If the order is not a draft
        """
        self._transition_to(OrderStatus.PLACED)
        self.total_value = total

        self._record_event(
            OrderPlacedEvent(
                order_id=self.order_id,
                customer_id=self.customer_id,
                total_amount=total.amount,
                execution_id=str(execution_id) if execution_id else None,
                user_id=placed_by,
            )
        )

    def _transition_to(self, target: OrderStatus) -> None:
        if not self.status.can_transition_to(target):
            raise InvalidStateError(
                f"Order {self.order_id} cannot move from "
                f"{self.status.value} to {target.value}",
                order_id=self.order_id,
            )
        self.status = target

    def get_events(self) -> List[DomainEvent]:
        """
        Get all recorded events.

        Returns:
            Copy of events list
        """
        return list(self._domain_events)

    def clear_events(self) -> None:
        """Clear recorded events after publishing."""
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)
