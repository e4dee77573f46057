"""Tests for the in-memory and Redis Streams event buses."""
import json
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from ecommerce.domain.events import OrderPlacedEvent
from ecommerce.infrastructure.bus import RedisStreamEventBus
from ecommerce.infrastructure.event_bus import InMemoryEventBus, get_event_bus


def _event(order_id: int = 5) -> OrderPlacedEvent:
    return OrderPlacedEvent(
        order_id=order_id,
        customer_id="c-5",
        total_amount=Decimal("22.50"),
        execution_id="exec-test-123",
    )


@pytest.mark.asyncio
async def test_in_memory_bus_records_and_notifies():
    bus = InMemoryEventBus()
    sync_received = []
    async_received = []

    def sync_handler(event):
        sync_received.append(event)

    async def async_handler(event):
        async_received.append(event)

    bus.subscribe(sync_handler)
    bus.subscribe(async_handler)

    event = _event()
    await bus.publish(event)

    assert list(bus.published) == [event]
    assert sync_received == [event]
    assert async_received == [event]


@pytest.mark.asyncio
async def test_in_memory_bus_publish_all_keeps_order():
    bus = InMemoryEventBus()
    events = [_event(1), _event(2), _event(3)]

    await bus.publish_all(events)

    assert [e.order_id for e in bus.published] == [1, 2, 3]


@pytest.mark.asyncio
async def test_in_memory_bus_history_is_bounded():
    bus = InMemoryEventBus(history_size=2)

    for order_id in (1, 2, 3):
        await bus.publish(_event(order_id))

    assert [e.order_id for e in bus.published] == [2, 3]


@pytest.mark.asyncio
async def test_failing_subscriber_does_not_stop_others():
    bus = InMemoryEventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    def healthy(event):
        received.append(event)

    bus.subscribe(broken)
    bus.subscribe(healthy)

    await bus.publish(_event())

    assert len(received) == 1


@pytest.mark.asyncio
async def test_unsubscribe():
    bus = InMemoryEventBus()
    received = []

    def handler(event):
        received.append(event)

    bus.subscribe(handler)
    bus.unsubscribe(handler)
    await bus.publish(_event())

    assert received == []


def test_get_event_bus_is_singleton():
    assert get_event_bus() is get_event_bus()


def test_redis_message_is_flat_strings():
    message = RedisStreamEventBus.to_message(_event())

    assert message["event_type"] == "OrderPlacedEvent"
    assert message["aggregate_id"] == "5"
    assert message["execution_id"] == "exec-test-123"
    assert json.loads(message["data"]) == {
        "order_id": 5,
        "customer_id": "c-5",
        "total_amount": "22.50",
    }
    assert all(isinstance(value, str) for value in message.values())


@pytest.mark.asyncio
async def test_redis_bus_xadds_to_stream():
    client = AsyncMock()
    client.xadd = AsyncMock(return_value="1700000000000-0")
    bus = RedisStreamEventBus(stream_name="test:stream", maxlen=50, client=client)

    await bus.publish(_event())

    client.xadd.assert_awaited_once()
    args, kwargs = client.xadd.call_args
    assert args[0] == "test:stream"
    assert args[1]["event_type"] == "OrderPlacedEvent"
    assert kwargs == {"maxlen": 50, "approximate": True}


@pytest.mark.asyncio
async def test_redis_bus_propagates_errors():
    client = AsyncMock()
    client.xadd = AsyncMock(side_effect=ConnectionError("redis down"))
    bus = RedisStreamEventBus(client=client)

    with pytest.raises(ConnectionError):
        await bus.publish(_event())


@pytest.mark.asyncio
async def test_redis_bus_disconnect_closes_client():
    client = AsyncMock()
    bus = RedisStreamEventBus(client=client)

    await bus.disconnect()

    client.aclose.assert_awaited_once()
