"""Application service: List Products use case (query).

Category and featured filters are applied over the full catalog listing,
which the gateway caches.
"""

from __future__ import annotations

from heritage.application.dto import CategoryDTO, ProductDTO
from heritage.application.mappers import product_to_dto
from heritage.domain.gateway.catalog_gateway import CatalogGateway


class ListProductsHandler:

    def __init__(self, catalog: CatalogGateway) -> None:
        self._catalog = catalog

    def handle(
        self,
        category: str | None = None,
        featured_only: bool = False,
    ) -> list[ProductDTO]:
        products = self._catalog.list_products()
        if category:
            wanted = category.strip().lower()
            products = [p for p in products if p.category.lower() == wanted]
        if featured_only:
            products = [p for p in products if p.is_featured]
        return [product_to_dto(p) for p in products]


class ListCategoriesHandler:

    def __init__(self, catalog: CatalogGateway) -> None:
        self._catalog = catalog

    def handle(self) -> list[CategoryDTO]:
        return [CategoryDTO(id=c.id, name=c.name) for c in self._catalog.list_categories()]
