"""Application service: Update Cart Quantity use case.

Setting a quantity of zero or less removes the line.
"""

from __future__ import annotations

from heritage.application.cart_command import run_cart_command
from heritage.application.dto import CartDTO
from heritage.application.mappers import cart_to_dto
from heritage.domain.model.cart import Cart


class UpdateCartQuantityHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, product_id: int, quantity: int) -> CartDTO:
        run_cart_command(self._cart, lambda cart: cart.set_quantity(product_id, quantity))
        return cart_to_dto(self._cart)
