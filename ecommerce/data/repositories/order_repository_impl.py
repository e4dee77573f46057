"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.exc import StaleDataError

from ecommerce.domain.entities.order import Order
from ecommerce.domain.exceptions import ConcurrencyError, PersistenceError
from ecommerce.domain.repositories.order_repository import OrderRepository
from ecommerce.domain.value_objects import ExecutionID

from ..mappers import OrderMapper
from ..models.order_model import OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    save() commits the session, so one repository instance should serve a
    single placement. Concurrent writers are detected through the
    version_id_col on OrderModel.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session (expire_on_commit=False)
        """
        self._session = session

    async def find_by_id(self, order_id: int) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        try:
            result = await self._session.execute(
                select(OrderModel)
                .options(selectinload(OrderModel.items))
                .where(OrderModel.order_id == order_id)
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to load order {order_id}: {e}")
            raise PersistenceError(f"Failed to load order {order_id}", order_id=order_id) from e

        model = result.scalar_one_or_none()
        if not model:
            logger.info(f"Order not found: {order_id}")
            return None

        return OrderMapper.to_domain(model)

    async def find_all(self, limit: int = 100) -> List[Order]:
        """List orders with pagination.

        Args:
            limit: Maximum number of orders to return

        Returns:
            List of Order aggregates
        """
        result = await self._session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .order_by(OrderModel.order_id)
            .limit(limit)
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def save(self, order: Order, execution_id: ExecutionID) -> None:
        """Update the stored order and commit.

        Args:
            order: Order domain aggregate
            execution_id: ExecutionID for tracing

        Raises:
            ConcurrencyError: Row version differs from the loaded one
            PersistenceError: Row missing or database failure
        """
        logger.info(f"[{execution_id}] Saving order {order.order_id} (version {order.version})")

        try:
            model = await self._session.get(OrderModel, order.order_id)
            if model is None:
                raise PersistenceError(
                    f"Order {order.order_id} does not exist in the store",
                    order_id=order.order_id,
                )
            if model.version != order.version:
                raise ConcurrencyError(
                    f"Concurrency conflict on order {order.order_id}: "
                    f"expected version {order.version}, found {model.version}",
                    order_id=order.order_id,
                )

            OrderMapper.update_persistence(order, model)
            await self._session.flush()
            await self._session.commit()
        except StaleDataError as e:
            await self._session.rollback()
            logger.warning(f"[{execution_id}] Stale order {order.order_id}: {e}")
            raise ConcurrencyError(
                f"Order {order.order_id} was modified concurrently",
                order_id=order.order_id,
            ) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"[{execution_id}] Failed to save order {order.order_id}: {e}")
            raise PersistenceError(
                f"Failed to save order {order.order_id}",
                order_id=order.order_id,
            ) from e

        order.version = model.version
        logger.info(f"[{execution_id}] ✅ Committed order {order.order_id} (version {order.version})")
