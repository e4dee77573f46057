"""Pytest configuration and fixtures for integration tests."""

from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ecommerce.data.mappers import OrderMapper
from ecommerce.data.models import Base
from ecommerce.domain.entities.order import Order, OrderItem
from ecommerce.domain.value_objects import Money
from ecommerce.infrastructure.database.config import get_session_factory


@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path):
    """SQLite database file per test (separate connections per session)."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine) -> async_sessionmaker:
    """Session factory configured like the application one."""
    yield get_session_factory(bind=test_engine)


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with test_session_factory() as session:
        yield session


def _build_order(order_id: int, customer_id: str = "customer-1", is_vip: bool = False) -> Order:
    """Draft with 10.00 x2 and 5.00 x1; item ids derived from order id."""
    return Order(
        order_id=order_id,
        customer_id=customer_id,
        is_vip_customer=is_vip,
        items=[
            OrderItem(order_item_id=order_id * 100 + 1, product_id=10, price=Money(Decimal("10.00")), quantity=2),
            OrderItem(order_item_id=order_id * 100 + 2, product_id=11, price=Money(Decimal("5.00")), quantity=1),
        ],
    )


@pytest.fixture
def build_order():
    return _build_order


@pytest.fixture
def seed_order(test_session_factory):
    """Insert an order the way the order-creation flow would."""
    async def _seed(order: Order) -> None:
        async with test_session_factory() as session:
            session.add(OrderMapper.to_persistence(order))
            await session.commit()
    return _seed
