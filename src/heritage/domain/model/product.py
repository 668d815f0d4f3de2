"""Product — a read-only catalog record.

Products are owned and mutated only by the backend. From the storefront's
point of view they are immutable snapshots taken when the catalog was read.
"""

from __future__ import annotations

from dataclasses import dataclass

from heritage.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A vintage piece listed in the catalog."""

    id: int
    name: str
    price: Money
    category: str
    era: str = ""
    condition: str = ""
    material: str = ""
    description: str = ""
    images: tuple[str, ...] = ()
    is_featured: bool = False

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None


@dataclass(frozen=True)
class Category:
    """A catalog category, as listed on the shop page."""

    id: int
    name: str
    image: str = ""
