"""Static mappers for domain entities ↔ database models.

Amounts are stored as Decimal text so the row holds exactly the value
the domain computed.
"""

from decimal import Decimal
from typing import Optional

from ecommerce.domain.entities.order import Order, OrderItem
from ecommerce.domain.enums import OrderStatus
from ecommerce.domain.value_objects import Money

from .models.order_model import OrderItemModel, OrderModel


def _amount_text(money: Optional[Money]) -> Optional[str]:
    return str(money.amount) if money is not None else None


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            order_item_id=model.order_item_id,
            product_id=model.product_id,
            price=Money(amount=Decimal(model.price_amount)),
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(entity: OrderItem) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            order_item_id=entity.order_item_id,
            product_id=entity.product_id,
            price_amount=str(entity.price.amount),
            quantity=entity.quantity,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        The model's items must already be loaded.

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        total_value = (
            Money(amount=Decimal(model.total_value_amount))
            if model.total_value_amount is not None
            else None
        )

        return Order(
            order_id=model.order_id,
            customer_id=model.customer_id,
            items=[OrderItemMapper.to_domain(item) for item in model.items],
            status=OrderStatus(model.status),
            total_value=total_value,
            is_vip_customer=model.is_vip_customer,
            version=model.version,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        The version column is left to SQLAlchemy.

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            order_id=entity.order_id,
            customer_id=entity.customer_id,
            status=entity.status.value,
            total_value_amount=_amount_text(entity.total_value),
            is_vip_customer=entity.is_vip_customer,
        )
        order_model.items = [OrderItemMapper.to_persistence(item) for item in entity.items]
        return order_model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Copy placement state onto an existing ORM model.

        Only status, total and VIP flag change after creation; items and
        customer are left untouched.

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        model.status = entity.status.value
        model.total_value_amount = _amount_text(entity.total_value)
        model.is_vip_customer = entity.is_vip_customer
        return model
