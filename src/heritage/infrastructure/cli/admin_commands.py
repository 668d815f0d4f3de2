"""CLI commands for the admin session."""

from __future__ import annotations

import click

from heritage.domain.exceptions import DomainException
from heritage.infrastructure import bootstrap


@click.command("login")
@click.option("--username", required=True, help="Admin username.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Admin password.")
def admin_login(username: str, password: str) -> None:
    """Sign in as an admin."""
    with bootstrap.http_client() as http:
        try:
            user = bootstrap.session_guard(http).login(username, password)
        except DomainException as exc:
            raise click.ClickException(str(exc))
    click.echo(f"Signed in as {user.username}")


@click.command("logout")
def admin_logout() -> None:
    """Forget the stored admin session."""
    with bootstrap.http_client() as http:
        bootstrap.session_guard(http).logout()
    click.echo("Signed out.")


@click.command("whoami")
def admin_whoami() -> None:
    """Check the stored session against the backend."""
    with bootstrap.http_client() as http:
        user = bootstrap.session_guard(http).check()
    if user is None:
        raise click.ClickException("Not signed in")
    role = "admin" if user.is_admin else "staff" if user.is_staff else "user"
    click.echo(f"{user.username} ({role})")
