"""Helpers for turning wire-level failures into domain errors."""

from __future__ import annotations

import httpx
import pydantic

from heritage.infrastructure.http.schemas import ErrorSchema

GENERIC_ORDER_FAILURE = "Failed to place order"


def first_validation_error(exc: pydantic.ValidationError) -> tuple[str, str]:
    """Return (message, dotted field path) of the first pydantic error."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ()))
    return error.get("msg", "Invalid value"), field


def extract_rejection(response: httpx.Response) -> tuple[str, str | None]:
    """Pull the user-facing message and field out of a 4xx response.

    Understands ``{"message": ..., "field": ...}`` as well as the
    ``{"<field>": ["<message>", ...]}`` shape some backends produce.
    Falls back to a generic message when the body is not JSON.
    """
    try:
        body = response.json()
    except ValueError:
        return GENERIC_ORDER_FAILURE, None

    if isinstance(body, dict):
        try:
            parsed = ErrorSchema.model_validate(body)
        except pydantic.ValidationError:
            parsed = None
        if parsed is not None:
            return parsed.message, parsed.field or None

        for key, value in body.items():
            if isinstance(value, list) and value and isinstance(value[0], str):
                return value[0], key
            if isinstance(value, str) and key in ("detail", "error"):
                return value, None

    return GENERIC_ORDER_FAILURE, None
