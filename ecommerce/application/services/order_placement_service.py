"""
Order Placement Service.

Moves a customer's Draft order to Placed.

Flow:
1. Load the order
2. Validate: exists, is a draft, has items, caller may place it
3. Price the order (VIP discount applied to the sum)
4. Transition to Placed and commit
5. Send confirmation and publish OrderPlacedEvent (best-effort)
"""
from decimal import Decimal
import logging

from ecommerce.application.interfaces import IIdentityContext, INotificationService
from ecommerce.domain.entities.order import Order
from ecommerce.domain.event_bus import EventBus
from ecommerce.domain.exceptions import (
    AuthorizationError,
    EmptyOrderError,
    InvalidStateError,
    NotFoundError,
)
from ecommerce.domain.repositories.order_repository import OrderRepository
from ecommerce.domain.value_objects import ExecutionID, Money


logger = logging.getLogger(__name__)


DEFAULT_VIP_DISCOUNT_RATE = Decimal("0.10")


class OrderPlacementService:
    """
    Application service for placing orders.

    Validation happens before any mutation, so a rejected placement leaves
    the stored order untouched. The repository save is the commit point:
    nothing is sent or published unless it succeeds. Confirmation and event
    publication after the commit are best-effort; their failures are logged
    and do not undo the placement.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        identity_context: IIdentityContext,
        notification_service: INotificationService,
        event_bus: EventBus,
        vip_discount_rate: Decimal = DEFAULT_VIP_DISCOUNT_RATE,
    ):
        """
        Initialize service with dependencies.

        Args:
            order_repository: Store the order is loaded from and committed to
            identity_context: Caller identity used for the ownership check
            notification_service: Channel for the order confirmation
            event_bus: Bus that receives OrderPlacedEvent
            vip_discount_rate: Fraction taken off the total for VIP customers
        """
        self.order_repository = order_repository
        self.identity_context = identity_context
        self.notification_service = notification_service
        self.event_bus = event_bus
        self.vip_discount_rate = vip_discount_rate

    async def place_order(self, order_id: int) -> None:
        """
        Place a Draft order.

        Args:
            order_id: Identifier of an existing order

        Raises:
            NotFoundError: No order with this id
            InvalidStateError: Order is not a draft
            EmptyOrderError: Order has no items
            AuthorizationError: Caller is neither the customer nor an admin
            PersistenceError: The store failed to commit
        """
        execution_id = ExecutionID.generate()
        logger.info(f"[{execution_id}] Placing order {order_id}")

        order = await self.order_repository.find_by_id(order_id)
        if order is None:
            logger.warning(f"[{execution_id}] Order {order_id} not found")
            raise NotFoundError(f"Order {order_id} not found", order_id=order_id)

        user_id = self._validate(order, execution_id)

        total = self.calculate_total(order)
        logger.info(
            f"[{execution_id}] Order {order_id} priced: total={total.amount} "
            f"(items={len(order.items)}, vip={order.is_vip_customer})"
        )

        order.place(total, execution_id=execution_id, placed_by=user_id)

        # Commit point. Errors propagate and no side effects run.
        await self.order_repository.save(order, execution_id)
        logger.info(f"[{execution_id}] ✅ Order {order_id} placed")

        await self._send_confirmation(order, execution_id)
        await self._publish_events(order, execution_id)

    def calculate_total(self, order: Order) -> Money:
        """
        Sum of price * quantity over the items, less the VIP discount.

        Items are summed in stored order.
        """
        total = Money.zero()
        for item in order.items:
            total = total + item.line_total()

        if order.is_vip_customer:
            discount = total * self.vip_discount_rate
            total = total - discount

        return total

    def _validate(self, order: Order, execution_id: ExecutionID) -> str:
        """Run the placement gates in order; return the caller's user id."""
        if not order.is_draft:
            logger.warning(
                f"[{execution_id}] Order {order.order_id} rejected: "
                f"status is {order.status.value}"
            )
            raise InvalidStateError(
                "Order must be in Draft status to place the order",
                order_id=order.order_id,
            )

        if not order.items:
            logger.warning(f"[{execution_id}] Order {order.order_id} rejected: no items")
            raise EmptyOrderError(
                "Order must have at least one item",
                order_id=order.order_id,
            )

        user_id = self.identity_context.current_user_id()
        if not self.identity_context.current_user_is_admin() and order.customer_id != user_id:
            logger.warning(
                f"[{execution_id}] Order {order.order_id} rejected: "
                f"user {user_id} is not the customer or an administrator"
            )
            raise AuthorizationError(
                "Order can only be placed by the same customer or an administrator",
                order_id=order.order_id,
            )

        return user_id

    async def _send_confirmation(self, order: Order, execution_id: ExecutionID) -> None:
        try:
            await self.notification_service.send_order_confirmation(order)
            logger.info(f"[{execution_id}] Confirmation sent for order {order.order_id}")
        except Exception as e:
            logger.error(
                f"[{execution_id}] Failed to send confirmation for order "
                f"{order.order_id}: {e}",
                exc_info=True,
            )

    async def _publish_events(self, order: Order, execution_id: ExecutionID) -> None:
        events = order.get_events()
        if not events:
            return

        try:
            await self.event_bus.publish_all(events)
            logger.info(f"[{execution_id}] Published {len(events)} event(s)")
        except Exception as e:
            logger.error(
                f"[{execution_id}] Failed to publish events for order "
                f"{order.order_id}: {e}",
                exc_info=True,
            )
        finally:
            order.clear_events()
