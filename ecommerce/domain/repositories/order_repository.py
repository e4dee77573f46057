"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order
from ..value_objects import ExecutionID


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def find_by_id(self, order_id: int) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, order: Order, execution_id: ExecutionID) -> None:
        """Commit the order aggregate.

        This call is the durability boundary: when it returns, the change is
        committed.

        Args:
            order: Order aggregate to persist
            execution_id: ExecutionID for tracing

        Raises:
            ConcurrencyError: If the order changed since it was loaded
            PersistenceError: If the store could not commit
        """
        pass
