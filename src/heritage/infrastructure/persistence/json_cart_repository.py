"""JSON-file-backed implementation of CartRepository.

Each line stores a snapshot of the product next to its quantity, so the
cart can be shown without a catalog round-trip.
"""

from __future__ import annotations

import json
from pathlib import Path

import pydantic
import structlog

from heritage.domain.exceptions import DomainException, StorageError
from heritage.domain.model.cart import Cart, CartLineItem
from heritage.domain.model.product import Product
from heritage.domain.model.value_objects import Quantity
from heritage.domain.repository.cart_repository import CartRepository
from heritage.infrastructure.http.schemas import ProductSchema

logger = structlog.get_logger(__name__)


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> Cart:
        if not self._file_path.exists():
            return Cart()
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return Cart([self._to_domain(line) for line in raw])
        except (ValueError, TypeError, KeyError, pydantic.ValidationError, DomainException) as exc:
            logger.warning(
                "Discarding unreadable cart file",
                path=str(self._file_path),
                error=str(exc),
            )
            return Cart()

    def save(self, cart: Cart) -> None:
        raw = [self._to_raw(line) for line in cart.items]
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write cart file", path=str(self._file_path), error=str(exc))
            raise StorageError(f"Could not save cart to {self._file_path}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLineItem) -> dict:
        product = line.product
        schema = ProductSchema(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price.cents,
            category=product.category,
            era=product.era,
            condition=product.condition,
            material=product.material,
            images=list(product.images),
            is_featured=product.is_featured,
        )
        return {
            "product": schema.model_dump(by_alias=True),
            "quantity": line.quantity.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartLineItem:
        product: Product = ProductSchema.model_validate(raw["product"]).to_domain()
        return CartLineItem(product=product, quantity=Quantity(raw["quantity"]))
