"""Persistence adapters."""

from .in_memory_order_repository import InMemoryOrderRepository

__all__ = ["InMemoryOrderRepository"]
