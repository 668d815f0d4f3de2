import click

from heritage.infrastructure import bootstrap
from heritage.infrastructure.cli.admin_commands import admin_login, admin_logout, admin_whoami
from heritage.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from heritage.infrastructure.cli.checkout_commands import checkout
from heritage.infrastructure.cli.product_commands import (
    category_list,
    product_list,
    product_show,
)
from heritage.utils.logging import configure_logging


@click.group()
def cli() -> None:
    """Heritage: vintage storefront client"""
    cfg = bootstrap.settings()
    configure_logging(cfg.log_level, cfg.log_json)


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def admin() -> None:
    """Admin session."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_show)
product.add_command(category_list)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
cart.add_command(cart_clear)
cli.add_command(checkout)
admin.add_command(admin_login)
admin.add_command(admin_logout)
admin.add_command(admin_whoami)
