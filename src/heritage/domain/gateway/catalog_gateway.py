"""Abstract gateway to the remote product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The HTTP implementation lives in the infrastructure
layer; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from heritage.domain.model.product import Category, Product


class CatalogGateway(ABC):

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def get_product(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Return the catalog categories."""
