"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers,
and the only one that reads Settings. Every other module depends only on
abstractions.
"""

from __future__ import annotations

from functools import lru_cache

import httpx

from heritage.domain.model.cart import Cart
from heritage.infrastructure.config import Settings
from heritage.infrastructure.http.catalog_client import HttpCatalogGateway
from heritage.infrastructure.http.order_client import HttpOrderGateway
from heritage.infrastructure.http.session_guard import SessionGuard
from heritage.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from heritage.infrastructure.persistence.json_session_repository import (
    JsonSessionRepository,
)


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings.from_env()


def http_client() -> httpx.Client:
    cfg = settings()
    return httpx.Client(
        base_url=cfg.api_url,
        timeout=cfg.http_timeout,
        headers={"Accept": "application/json"},
    )


def catalog_gateway(http: httpx.Client) -> HttpCatalogGateway:
    return HttpCatalogGateway(http)


def order_gateway(http: httpx.Client) -> HttpOrderGateway:
    return HttpOrderGateway(http)


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().data_dir / "cart.json")


def cart_store() -> Cart:
    """Load the cart and keep its file in step with every mutation."""
    repo = cart_repository()
    cart = repo.load()
    cart.subscribe(repo.save)
    return cart


def session_guard(http: httpx.Client) -> SessionGuard:
    return SessionGuard(http, JsonSessionRepository(settings().data_dir / "session.json"))
