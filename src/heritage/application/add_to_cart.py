"""Application service: Add To Cart use case.

The catalog supplies the display data for the line (name, price); the
cart itself never talks to the network.
"""

from __future__ import annotations

import structlog

from heritage.application.cart_command import run_cart_command
from heritage.application.dto import CartDTO
from heritage.application.mappers import cart_to_dto
from heritage.domain.exceptions import EntityNotFoundError
from heritage.domain.gateway.catalog_gateway import CatalogGateway
from heritage.domain.model.cart import Cart

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(self, cart: Cart, catalog: CatalogGateway) -> None:
        self._cart = cart
        self._catalog = catalog

    def handle(self, product_id: int, quantity: int = 1) -> CartDTO:
        product = self._catalog.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        run_cart_command(self._cart, lambda cart: cart.add_item(product, quantity))

        logger.info(
            "Added to cart",
            product_id=product_id,
            quantity=quantity,
            item_count=self._cart.item_count,
        )
        return cart_to_dto(self._cart)
