"""Abstract gateway for submitting orders to the backend."""

from __future__ import annotations

from abc import ABC, abstractmethod

from heritage.domain.model.order import Order, OrderRequest


class OrderGateway(ABC):

    @abstractmethod
    def create_order(self, request: OrderRequest) -> Order:
        """Send *request* once and return the Order the backend created.

        Implementations make a single attempt and never retry.
        """
