"""Application service: Submit Order (checkout) use case.

Builds the order request from the cart, sends it once, and clears the
cart only after the backend has created the order. Any failure leaves the
cart exactly as it was.
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from heritage.application.dto import OrderDTO
from heritage.application.mappers import order_to_dto
from heritage.domain.exceptions import (
    DomainException,
    OrderRejectedError,
    StorageError,
    SubmissionInProgressError,
    ValidationError,
)
from heritage.domain.gateway.order_gateway import OrderGateway
from heritage.domain.model.cart import Cart
from heritage.domain.model.order import CustomerInfo, OrderRequest

logger = structlog.get_logger(__name__)


class SubmitOrderHandler:

    def __init__(self, cart: Cart, order_gateway: OrderGateway) -> None:
        self._cart = cart
        self._order_gateway = order_gateway
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def handle(self, customer: CustomerInfo) -> OrderDTO:
        """Place an order for the current cart contents.

        Steps:
        1. Build and validate the OrderRequest locally (no network on failure).
        2. POST it once through the gateway.
        3. On success, clear the cart and return the created order.
        """
        if self._in_flight:
            raise SubmissionInProgressError("An order is already being submitted")

        request = OrderRequest.from_cart(self._cart, customer)

        self._in_flight = True
        try:
            logger.info(
                "Submitting order",
                item_count=len(request.items),
                total=request.total.cents,
            )
            order = self._order_gateway.create_order(request)
        except OrderRejectedError as exc:
            logger.info("Order rejected", reason=exc.message, field=exc.field)
            raise
        except ValidationError:
            raise
        except DomainException as exc:
            logger.warning("Order submission failed", error=str(exc))
            raise
        finally:
            self._in_flight = False

        if order.total != request.total:
            logger.warning(
                "Server total differs from cart total; using server figure",
                order_id=order.id,
                submitted=request.total.cents,
                accepted=order.total.cents,
            )

        dto = order_to_dto(order)
        logger.info("Order placed", order_id=order.id, total=order.total.cents)

        # The order exists now; a failing cart listener must not hide that.
        try:
            self._cart.clear()
        except StorageError as exc:
            logger.error("Could not persist cleared cart", order_id=order.id, error=str(exc))
            return replace(dto, cart_saved=False)
        return dto
