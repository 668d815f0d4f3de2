"""In-memory fakes for testing.

These implement the same abstract interfaces as the HTTP gateways and
JSON repositories but keep everything in memory. No network, no file I/O.
"""

from __future__ import annotations

from datetime import datetime, timezone

from heritage.domain.gateway.catalog_gateway import CatalogGateway
from heritage.domain.gateway.order_gateway import OrderGateway
from heritage.domain.model.cart import Cart
from heritage.domain.model.order import Order, OrderRequest
from heritage.domain.model.product import Category, Product
from heritage.domain.model.session import Session
from heritage.domain.model.value_objects import Money
from heritage.domain.repository.cart_repository import CartRepository
from heritage.domain.repository.session_repository import SessionRepository


def make_product(
    product_id: int = 1,
    name: str = "1890s Victorian Silk Bodice",
    price: int = 45000,
    category: str = "Tops",
    era: str = "Victorian",
    featured: bool = False,
) -> Product:
    return Product(
        id=product_id,
        name=name,
        price=Money(price),
        category=category,
        era=era,
        condition="Excellent",
        material="Silk",
        is_featured=featured,
    )


class FakeCatalogGateway(CatalogGateway):

    def __init__(
        self,
        products: list[Product] | None = None,
        categories: list[Category] | None = None,
    ) -> None:
        self._store: dict[int, Product] = {p.id: p for p in products or []}
        self._categories = list(categories or [])

    def list_products(self) -> list[Product]:
        return list(self._store.values())

    def get_product(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_categories(self) -> list[Category]:
        return list(self._categories)


class FakeOrderGateway(OrderGateway):
    """Records every request; answers with an Order or raises ``error``."""

    def __init__(self, error: Exception | None = None, total_override: int | None = None) -> None:
        self.requests: list[OrderRequest] = []
        self.error = error
        self.total_override = total_override
        self._next_id = 1

    def create_order(self, request: OrderRequest) -> Order:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        order = Order(
            id=self._next_id,
            customer_name=request.customer_name,
            customer_email=request.customer_email,
            address=request.address,
            items=request.items,
            total=Money(self.total_override) if self.total_override is not None else request.total,
            created_at=datetime(2026, 1, 2, 15, 30, tzinfo=timezone.utc),
        )
        self._next_id += 1
        return order


class FakeCartRepository(CartRepository):

    def __init__(self) -> None:
        self.saved: list[tuple] = []
        self._snapshot: tuple = ()

    def load(self) -> Cart:
        return Cart(list(self._snapshot))

    def save(self, cart: Cart) -> None:
        self._snapshot = cart.snapshot()
        self.saved.append(self._snapshot)


class FakeSessionRepository(SessionRepository):

    def __init__(self, session: Session | None = None) -> None:
        self._session = session

    def get(self) -> Session | None:
        return self._session

    def save(self, session: Session) -> None:
        self._session = session

    def clear(self) -> None:
        self._session = None
