"""Cart aggregate — the client-side shopping cart.

The Cart owns its line items and is the single mutation entry point for
them. Observers register with ``subscribe()`` and are told about every
change, so nothing else needs to hold its own copy of the cart contents.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from heritage.domain.exceptions import ValidationError
from heritage.domain.model.product import Product
from heritage.domain.model.value_objects import Money, Quantity

CartListener = Callable[["Cart"], None]
CartSnapshot = tuple["CartLineItem", ...]


@dataclass(frozen=True)
class CartLineItem:
    """One (product, quantity) pair in the cart.

    Frozen: a quantity change replaces the line rather than editing it,
    which keeps snapshots taken for rollback untouched.
    """

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - at most one line item per product id
    - every line has a positive quantity
    - ``total`` is always derived from the current lines, never stored
    """

    def __init__(self, items: list[CartLineItem] | None = None) -> None:
        self._items: list[CartLineItem] = []
        self._listeners: list[CartListener] = []
        for item in items or []:
            self._merge(item.product, item.quantity.value)

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> tuple[CartLineItem, ...]:
        return tuple(self._items)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity.value for item in self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def get(self, product_id: int) -> CartLineItem | None:
        index = self._index_of(product_id)
        return None if index is None else self._items[index]

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: int = 1) -> None:
        """Add *quantity* units of *product*, merging with an existing line."""
        if quantity <= 0:
            raise ValidationError(
                f"Cannot add {quantity} of {product.name}: quantity must be positive",
                field="quantity",
            )
        self._merge(product, quantity)
        self._notify()

    def remove_item(self, product_id: int) -> None:
        """Remove the line for *product_id*. Removing a missing line is a no-op."""
        index = self._index_of(product_id)
        if index is None:
            return
        del self._items[index]
        self._notify()

    def set_quantity(self, product_id: int, quantity: int) -> None:
        """Replace the quantity of an existing line.

        A quantity of zero or less removes the line. Unknown product ids
        are ignored.
        """
        if quantity <= 0:
            self.remove_item(product_id)
            return
        index = self._index_of(product_id)
        if index is None:
            return
        line = self._items[index]
        if line.quantity.value == quantity:
            return
        self._items[index] = replace(line, quantity=Quantity(quantity))
        self._notify()

    def clear(self) -> None:
        if not self._items:
            return
        self._items.clear()
        self._notify()

    # --- Rollback -------------------------------------------------------------

    def snapshot(self) -> CartSnapshot:
        return tuple(self._items)

    def restore(self, snapshot: CartSnapshot) -> None:
        """Put the cart back to a state captured with ``snapshot()``."""
        if tuple(self._items) == snapshot:
            return
        self._items = list(snapshot)
        self._notify()

    # --- Observers ------------------------------------------------------------

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Internal helpers -----------------------------------------------------

    def _merge(self, product: Product, quantity: int) -> None:
        index = self._index_of(product.id)
        if index is None:
            self._items.append(CartLineItem(product=product, quantity=Quantity(quantity)))
            return
        line = self._items[index]
        self._items[index] = replace(line, quantity=Quantity(line.quantity.value + quantity))

    def _index_of(self, product_id: int) -> int | None:
        for index, item in enumerate(self._items):
            if item.product_id == product_id:
                return index
        return None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
