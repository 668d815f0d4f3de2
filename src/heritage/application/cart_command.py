"""Run a cart mutation so that a failure leaves the cart as it was.

Listeners (persistence, UI badges) run inside the mutation; if any of them
raises, the cart is restored to the snapshot taken beforehand.
"""

from __future__ import annotations

from typing import Callable

from heritage.domain.model.cart import Cart


def run_cart_command(cart: Cart, command: Callable[[Cart], None]) -> None:
    snapshot = cart.snapshot()
    try:
        command(cart)
    except Exception:
        cart.restore(snapshot)
        raise
