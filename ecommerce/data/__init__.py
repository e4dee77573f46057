"""Data layer - infrastructure persistence and mapping."""

from .mappers import OrderItemMapper, OrderMapper
from .models import Base, OrderItemModel, OrderModel
from .repositories import SqlAlchemyOrderRepository

__all__ = [
    "Base",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "SqlAlchemyOrderRepository",
]
