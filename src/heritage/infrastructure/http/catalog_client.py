"""HTTP implementation of CatalogGateway.

Products are read-only on the client, so the first successful read is
cached in memory and served from there until ``invalidate()``.
"""

from __future__ import annotations

import httpx
import pydantic
import structlog

from heritage.domain.exceptions import CatalogUnavailableError, SchemaError
from heritage.domain.gateway.catalog_gateway import CatalogGateway
from heritage.domain.model.product import Category, Product
from heritage.infrastructure.http.schemas import CategorySchema, ProductSchema

logger = structlog.get_logger(__name__)

_PRODUCT_LIST = pydantic.TypeAdapter(list[ProductSchema])
_CATEGORY_LIST = pydantic.TypeAdapter(list[CategorySchema])


class HttpCatalogGateway(CatalogGateway):

    def __init__(self, http: httpx.Client) -> None:
        self._http = http
        self._by_id: dict[int, Product] = {}
        self._listing: list[Product] | None = None

    # --- CatalogGateway interface ---------------------------------------------

    def list_products(self) -> list[Product]:
        if self._listing is None:
            payload = self._get_json("/api/products/")
            schemas = self._parse(_PRODUCT_LIST, _unwrap_page(payload), "product list")
            self._listing = [schema.to_domain() for schema in schemas]
            self._by_id.update({product.id: product for product in self._listing})
        return list(self._listing)

    def get_product(self, product_id: int) -> Product | None:
        cached = self._by_id.get(product_id)
        if cached is not None:
            return cached

        response = self._request(f"/api/products/{product_id}/")
        if response.status_code == 404:
            return None
        payload = self._json_or_fail(response)
        product = self._parse(ProductSchema, payload, "product").to_domain()
        self._by_id[product.id] = product
        return product

    def list_categories(self) -> list[Category]:
        payload = self._get_json("/api/categories/")
        schemas = self._parse(_CATEGORY_LIST, _unwrap_page(payload), "category list")
        return [schema.to_domain() for schema in schemas]

    # --- Cache ----------------------------------------------------------------

    def invalidate(self) -> None:
        self._by_id.clear()
        self._listing = None

    # --- Internal helpers -----------------------------------------------------

    def _request(self, path: str) -> httpx.Response:
        try:
            return self._http.get(path)
        except httpx.HTTPError as exc:
            logger.warning("Catalog request failed", path=path, error=str(exc))
            raise CatalogUnavailableError(f"Could not reach the catalog: {exc}") from exc

    def _get_json(self, path: str) -> object:
        return self._json_or_fail(self._request(path))

    @staticmethod
    def _json_or_fail(response: httpx.Response) -> object:
        if not response.is_success:
            raise CatalogUnavailableError(
                f"Catalog request failed (HTTP {response.status_code})"
            )
        try:
            return response.json()
        except ValueError as exc:
            raise SchemaError("Catalog response is not valid JSON") from exc

    @staticmethod
    def _parse(model, payload: object, what: str):
        validate = (
            model.validate_python
            if isinstance(model, pydantic.TypeAdapter)
            else model.model_validate
        )
        try:
            return validate(payload)
        except pydantic.ValidationError as exc:
            logger.warning("Malformed catalog payload", what=what, errors=exc.error_count())
            raise SchemaError(f"Malformed {what} from backend") from exc


def _unwrap_page(payload: object) -> object:
    """Accept both a bare list and a paginated ``{"results": [...]}`` body."""
    if isinstance(payload, dict) and "results" in payload:
        return payload["results"]
    return payload
