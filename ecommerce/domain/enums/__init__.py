"""Domain enums."""

from .order_status import OrderStatus

__all__ = ["OrderStatus"]
