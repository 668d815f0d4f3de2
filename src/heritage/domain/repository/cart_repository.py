"""Abstract repository for the Cart aggregate.

The storefront keeps exactly one cart per client, so there is no id to
look up by.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from heritage.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the stored cart, or a new empty cart if none is stored."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart's current line items.

        Raises StorageError if the cart cannot be written.
        """
