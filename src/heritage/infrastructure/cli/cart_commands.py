"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from heritage.application.add_to_cart import AddToCartHandler
from heritage.application.clear_cart import ClearCartHandler
from heritage.application.dto import CartDTO
from heritage.application.remove_from_cart import RemoveFromCartHandler
from heritage.application.show_cart import ShowCartHandler
from heritage.application.update_cart_quantity import UpdateCartQuantityHandler
from heritage.domain.exceptions import DomainException
from heritage.infrastructure import bootstrap


def display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<30} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*68}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.product_name[:30]:<30} {item.quantity:>5} "
            f"{item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*68}")
    click.echo(f"  {'Cart Total':<43} {dto.total:>25}")


@click.command("add")
@click.option("--product-id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def cart_add(product_id: int, quantity: int) -> None:
    """Add a product to the cart."""
    cart = bootstrap.cart_store()
    with bootstrap.http_client() as http:
        handler = AddToCartHandler(cart=cart, catalog=bootstrap.catalog_gateway(http))
        try:
            dto = handler.handle(product_id=product_id, quantity=quantity)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Added {quantity} x product #{product_id}  ({dto.item_count} items in cart)")


@click.command("remove")
@click.option("--product-id", required=True, type=int, help="Product ID.")
def cart_remove(product_id: int) -> None:
    """Remove a product from the cart."""
    try:
        dto = RemoveFromCartHandler(cart=bootstrap.cart_store()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_cart(dto)


@click.command("set")
@click.option("--product-id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_set(product_id: int, quantity: int) -> None:
    """Change the quantity of a cart line."""
    try:
        dto = UpdateCartQuantityHandler(cart=bootstrap.cart_store()).handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_cart(dto)


@click.command("show")
def cart_show() -> None:
    """Show the cart."""
    display_cart(ShowCartHandler(cart=bootstrap.cart_store()).handle())


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    try:
        ClearCartHandler(cart=bootstrap.cart_store()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo("Cart cleared.")
