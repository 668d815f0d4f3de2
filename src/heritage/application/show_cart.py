"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from heritage.application.dto import CartDTO
from heritage.application.mappers import cart_to_dto
from heritage.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return cart_to_dto(self._cart)
