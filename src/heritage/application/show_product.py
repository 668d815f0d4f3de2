"""Application service: Show Product use case (query)."""

from __future__ import annotations

from heritage.application.dto import ProductDTO
from heritage.application.mappers import product_to_dto
from heritage.domain.exceptions import EntityNotFoundError
from heritage.domain.gateway.catalog_gateway import CatalogGateway


class ShowProductHandler:

    def __init__(self, catalog: CatalogGateway) -> None:
        self._catalog = catalog

    def handle(self, product_id: int) -> ProductDTO:
        product = self._catalog.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product_to_dto(product)
