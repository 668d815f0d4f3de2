"""Domain → DTO mapping shared by the handlers."""

from __future__ import annotations

from heritage.application.dto import (
    CartDTO,
    CartLineDTO,
    OrderDTO,
    OrderItemDTO,
    ProductDTO,
)
from heritage.domain.model.cart import Cart
from heritage.domain.model.order import Order
from heritage.domain.model.product import Product


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        category=product.category,
        era=product.era,
        condition=product.condition,
        material=product.material,
        description=product.description,
        images=list(product.images),
        is_featured=product.is_featured,
    )


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        items=[
            CartLineDTO(
                product_id=line.product_id,
                product_name=line.product.name,
                quantity=line.quantity.value,
                unit_price=str(line.product.price),
                line_total=str(line.line_total),
            )
            for line in cart.items
        ],
        item_count=cart.item_count,
        total=str(cart.total),
        total_cents=cart.total.cents,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_name=order.customer_name,
        customer_email=order.customer_email,
        address=order.address,
        status=order.status,
        items=[
            OrderItemDTO(product_id=item.product_id, quantity=item.quantity)
            for item in order.items
        ],
        total=str(order.total),
        total_cents=order.total.cents,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
