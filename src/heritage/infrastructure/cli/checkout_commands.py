"""CLI command for placing an order from the cart."""

from __future__ import annotations

import click

from heritage.application.submit_order import SubmitOrderHandler
from heritage.domain.exceptions import DomainException, OrderRejectedError, ValidationError
from heritage.domain.model.order import CustomerInfo
from heritage.infrastructure import bootstrap


@click.command("checkout")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--address", required=True, help="Shipping address.")
def checkout(name: str, email: str, address: str) -> None:
    """Place an order for everything in the cart."""
    cart = bootstrap.cart_store()
    customer = CustomerInfo(name=name, email=email, address=address)

    with bootstrap.http_client() as http:
        handler = SubmitOrderHandler(cart=cart, order_gateway=bootstrap.order_gateway(http))
        try:
            dto = handler.handle(customer)
        except (ValidationError, OrderRejectedError) as exc:
            where = f" [{exc.field}]" if exc.field else ""
            raise click.ClickException(f"{exc.message}{where}")
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    click.echo(f"Ship to:  {dto.address}")
    click.echo(f"Items:    {sum(item.quantity for item in dto.items)}")
    click.echo(f"Total:    {dto.total}")
    if not dto.cart_saved:
        click.echo(
            "Warning: the order was placed but the emptied cart could not be saved. "
            "Run 'heritage cart clear' before checking out again.",
            err=True,
        )
