"""Order request and server-assigned Order.

An OrderRequest is built from the cart at checkout time and never changes
after that. The Order is what the backend hands back once it has accepted
the request: the same data plus an id, a timestamp and a status.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from heritage.domain.exceptions import ValidationError
from heritage.domain.model.cart import Cart
from heritage.domain.model.value_objects import Money

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Status is free text on the backend; unknown values are kept as-is.
DEFAULT_STATUS = "pending"


@dataclass(frozen=True)
class CustomerInfo:
    """Contact and shipping details typed in at checkout."""

    name: str
    email: str
    address: str


@dataclass(frozen=True)
class OrderItemRef:
    """A (product id, quantity) pair as sent to the backend."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderRequest:
    """Immutable checkout payload.

    Use ``OrderRequest.from_cart()``; it enforces every rule that can be
    checked without talking to the backend.
    """

    customer_name: str
    customer_email: str
    address: str
    items: tuple[OrderItemRef, ...]
    total: Money

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_cart(cart: Cart, customer: CustomerInfo) -> OrderRequest:
        """Build and validate a request from the current cart contents."""
        name = (customer.name or "").strip()
        email = (customer.email or "").strip()
        address = (customer.address or "").strip()

        if not name:
            raise ValidationError("Customer name is required", field="customer_name")
        if not email:
            raise ValidationError("Email is required", field="customer_email")
        if not _EMAIL_RE.match(email):
            raise ValidationError("Invalid email address", field="customer_email")
        if not address:
            raise ValidationError("Shipping address is required", field="address")
        if cart.is_empty:
            raise ValidationError("Cannot submit an empty cart", field="items")

        request = OrderRequest(
            customer_name=name,
            customer_email=email,
            address=address,
            items=tuple(
                OrderItemRef(product_id=line.product_id, quantity=line.quantity.value)
                for line in cart.items
            ),
            total=cart.total,
        )
        request.validate_total({line.product_id: line.product.price for line in cart.items})
        return request

    # --- Invariants -----------------------------------------------------------

    def validate_total(self, prices: dict[int, Money]) -> None:
        """Check ``total`` against Σ price × quantity for the given prices.

        Raises ValidationError if a product has no known price or the sum
        does not match.
        """
        expected = Money.zero(self.total.currency)
        for index, item in enumerate(self.items):
            if item.quantity <= 0:
                raise ValidationError(
                    "Quantity must be positive", field=f"items.{index}.quantity"
                )
            price = prices.get(item.product_id)
            if price is None:
                raise ValidationError(
                    f"No price known for product {item.product_id}",
                    field=f"items.{index}.product_id",
                )
            expected = expected + price * item.quantity
        if expected != self.total:
            raise ValidationError(
                f"Order total {self.total} does not match item prices ({expected})",
                field="total",
            )


@dataclass(frozen=True)
class Order:
    """An order as persisted by the backend. Never mutated client-side."""

    id: int
    customer_name: str
    customer_email: str
    address: str
    items: tuple[OrderItemRef, ...]
    total: Money
    status: str = DEFAULT_STATUS
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
