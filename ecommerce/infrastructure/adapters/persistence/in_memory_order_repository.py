"""
In-Memory Order Repository Implementation.

Dictionary-backed store for tests and local runs.
"""
from copy import deepcopy
from typing import Dict, List, Optional
import logging

from ecommerce.domain.entities.order import Order
from ecommerce.domain.exceptions import ConcurrencyError, PersistenceError
from ecommerce.domain.repositories.order_repository import OrderRepository
from ecommerce.domain.value_objects import ExecutionID


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Callers always get their own copy of an order, so nothing changes in
    the store until save() succeeds. save() applies the same optimistic
    version check as the database store.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[int, Order] = {}
        logger.info("InMemoryOrderRepository initialized")

    def add(self, order: Order) -> None:
        """
        Seed an order (orders are created outside the placement core).

        Args:
            order: Order to store as-is
        """
        self._storage[order.order_id] = deepcopy(order)
        logger.debug(f"Order {order.order_id} added to in-memory repository")

    async def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Get a copy of the order.

        Args:
            order_id: Order ID to lookup

        Returns:
            Order if found, None otherwise
        """
        order = self._storage.get(order_id)

        if order is None:
            logger.info(f"Order not found in in-memory repository: {order_id}")
            return None

        return deepcopy(order)

    async def save(self, order: Order, execution_id: ExecutionID) -> None:
        """
        Store the order if nobody saved it since it was loaded.

        Args:
            order: Order entity to save
            execution_id: Execution ID for tracing

        Raises:
            PersistenceError: Order was never added
            ConcurrencyError: Stored version differs from order.version
        """
        stored = self._storage.get(order.order_id)
        if stored is None:
            raise PersistenceError(
                f"Order {order.order_id} does not exist in the store",
                order_id=order.order_id,
            )
        if stored.version != order.version:
            raise ConcurrencyError(
                f"Concurrency conflict on order {order.order_id}: "
                f"expected version {order.version}, found {stored.version}",
                order_id=order.order_id,
            )

        order.version += 1
        snapshot = deepcopy(order)
        snapshot.clear_events()
        self._storage[order.order_id] = snapshot
        logger.info(
            f"✅ Order saved to in-memory repository: {order.order_id} "
            f"(status: {order.status.value}, version: {order.version}, "
            f"execution_id: {execution_id.value})"
        )

    async def find_all(self, limit: int = 100) -> List[Order]:
        """
        Get copies of stored orders.

        Args:
            limit: Maximum number of orders to return

        Returns:
            List of orders (up to limit)
        """
        return [deepcopy(order) for order in list(self._storage.values())[:limit]]

    async def exists(self, order_id: int) -> bool:
        """Check if order exists in storage."""
        return order_id in self._storage

    def clear(self) -> None:
        """Clear all orders."""
        self._storage.clear()
        logger.info("In-memory repository cleared")
