"""HTTP implementation of OrderGateway.

One POST per call, no retries: a user action maps to a single attempt.
"""

from __future__ import annotations

import httpx
import pydantic
import structlog

from heritage.domain.exceptions import (
    OrderRejectedError,
    OrderSubmissionError,
    ValidationError,
)
from heritage.domain.gateway.order_gateway import OrderGateway
from heritage.domain.model.order import Order, OrderRequest
from heritage.infrastructure.http.errors import (
    GENERIC_ORDER_FAILURE,
    extract_rejection,
    first_validation_error,
)
from heritage.infrastructure.http.schemas import InsertOrderSchema, OrderSchema

logger = structlog.get_logger(__name__)

ORDERS_PATH = "/api/orders/"


class HttpOrderGateway(OrderGateway):

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    def create_order(self, request: OrderRequest) -> Order:
        body = self._encode(request)

        try:
            response = self._http.post(ORDERS_PATH, json=body)
        except httpx.HTTPError as exc:
            logger.warning("Order request failed in transport", error=str(exc))
            raise OrderSubmissionError(GENERIC_ORDER_FAILURE) from exc

        if response.is_client_error:
            message, field = extract_rejection(response)
            raise OrderRejectedError(message, field)

        if not response.is_success:
            logger.warning("Order request failed", status=response.status_code)
            raise OrderSubmissionError(
                f"{GENERIC_ORDER_FAILURE} (HTTP {response.status_code})"
            )

        return self._decode(response)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _encode(request: OrderRequest) -> dict:
        try:
            schema = InsertOrderSchema.from_domain(request)
        except pydantic.ValidationError as exc:
            message, field = first_validation_error(exc)
            raise ValidationError(message, field=field) from exc
        return schema.model_dump(mode="json", by_alias=True)

    @staticmethod
    def _decode(response: httpx.Response) -> Order:
        try:
            return OrderSchema.model_validate(response.json()).to_domain()
        except (ValueError, pydantic.ValidationError) as exc:
            logger.error(
                "Order response did not match schema",
                status=response.status_code,
                error=str(exc),
            )
            raise OrderSubmissionError(GENERIC_ORDER_FAILURE) from exc
