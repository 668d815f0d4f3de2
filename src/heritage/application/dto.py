"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog product as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "$450.00"
    category: str
    era: str
    condition: str
    material: str
    description: str
    images: list[str]
    is_featured: bool


@dataclass(frozen=True)
class CategoryDTO:
    id: int
    name: str


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart with its derived totals."""

    items: list[CartLineDTO]
    item_count: int
    total: str
    total_cents: int


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as confirmed by the backend."""

    id: int
    customer_name: str
    customer_email: str
    address: str
    status: str
    items: list[OrderItemDTO]
    total: str
    total_cents: int
    created_at: str
    cart_saved: bool = True
