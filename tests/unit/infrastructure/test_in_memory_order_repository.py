"""Unit tests for InMemoryOrderRepository."""
from decimal import Decimal

import pytest

from ecommerce.domain.entities.order import Order, OrderItem
from ecommerce.domain.enums import OrderStatus
from ecommerce.domain.exceptions import ConcurrencyError, PersistenceError
from ecommerce.domain.value_objects import ExecutionID, Money
from ecommerce.infrastructure.adapters.persistence import InMemoryOrderRepository


def _order(order_id: int = 1) -> Order:
    return Order(
        order_id=order_id,
        customer_id="c-1",
        items=[OrderItem(order_item_id=1, product_id=1, price=Money(Decimal("3.00")), quantity=1)],
    )


@pytest.fixture
def repository():
    repo = InMemoryOrderRepository()
    repo.add(_order())
    return repo


@pytest.mark.asyncio
async def test_find_returns_independent_copy(repository):
    loaded = await repository.find_by_id(1)
    loaded.status = OrderStatus.PLACED

    again = await repository.find_by_id(1)
    assert again.status is OrderStatus.DRAFT


@pytest.mark.asyncio
async def test_find_missing_returns_none(repository):
    assert await repository.find_by_id(999) is None


@pytest.mark.asyncio
async def test_save_bumps_version_and_drops_events(repository):
    order = await repository.find_by_id(1)
    order.place(Money(Decimal("3.00")))

    await repository.save(order, ExecutionID.generate())

    assert order.version == 1
    stored = await repository.find_by_id(1)
    assert stored.version == 1
    assert stored.status is OrderStatus.PLACED
    assert stored.get_events() == []
    # Caller keeps its events for publishing
    assert len(order.get_events()) == 1


@pytest.mark.asyncio
async def test_save_with_stale_version_raises(repository):
    first = await repository.find_by_id(1)
    second = await repository.find_by_id(1)

    await repository.save(first, ExecutionID.generate())

    with pytest.raises(ConcurrencyError):
        await repository.save(second, ExecutionID.generate())


@pytest.mark.asyncio
async def test_save_unknown_order_raises(repository):
    with pytest.raises(PersistenceError):
        await repository.save(_order(order_id=42), ExecutionID.generate())


@pytest.mark.asyncio
async def test_find_all_exists_and_clear(repository):
    repository.add(_order(order_id=2))

    assert len(await repository.find_all()) == 2
    assert len(await repository.find_all(limit=1)) == 1
    assert await repository.exists(2)

    repository.clear()
    assert not await repository.exists(1)
