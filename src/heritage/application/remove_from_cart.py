"""Application service: Remove From Cart use case."""

from __future__ import annotations

from heritage.application.cart_command import run_cart_command
from heritage.application.dto import CartDTO
from heritage.application.mappers import cart_to_dto
from heritage.domain.model.cart import Cart


class RemoveFromCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, product_id: int) -> CartDTO:
        run_cart_command(self._cart, lambda cart: cart.remove_item(product_id))
        return cart_to_dto(self._cart)
