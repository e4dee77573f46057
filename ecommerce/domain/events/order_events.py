"""Events raised by the Order aggregate."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .base import DomainEvent


@dataclass
class OrderPlacedEvent(DomainEvent):
    """
    A draft order was placed.

    Raised by Order.place; published once OrderPlacementService has
    committed the order. total_amount is the committed total.
    """

    order_id: int = 0
    customer_id: str = ""
    total_amount: Optional[Decimal] = None

    def __post_init__(self):
        if not self.aggregate_id and self.order_id:
            self.aggregate_id = str(self.order_id)
