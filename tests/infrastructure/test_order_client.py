"""Tests for HttpOrderGateway against an httpx MockTransport."""

import json

import httpx
import pytest

from heritage.domain.exceptions import OrderRejectedError, OrderSubmissionError
from heritage.domain.model.cart import Cart
from heritage.domain.model.order import CustomerInfo, OrderRequest
from heritage.domain.model.value_objects import Money
from heritage.infrastructure.http.order_client import HttpOrderGateway
from tests.fakes import make_product

BASE_URL = "http://shop.test"


def _request() -> OrderRequest:
    cart = Cart()
    cart.add_item(make_product(1, "Bodice", 45000), 1)
    cart.add_item(make_product(2, "Jacket", 12000), 2)
    return OrderRequest.from_cart(
        cart, CustomerInfo("Ada", "ada@example.com", "12 St James's Sq")
    )


def _gateway(handler) -> tuple[HttpOrderGateway, list[httpx.Request]]:
    calls: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(recording))
    return HttpOrderGateway(client), calls


def _created(request: httpx.Request) -> httpx.Response:
    body = json.loads(request.content)
    return httpx.Response(
        201,
        json={**body, "id": 17, "createdAt": "2026-03-04T10:00:00Z", "status": "pending"},
    )


class TestCreateOrder:

    def test_posts_camel_case_body(self):
        gateway, calls = _gateway(_created)
        gateway.create_order(_request())

        [sent] = calls
        assert sent.method == "POST"
        assert sent.url.path == "/api/orders/"
        assert json.loads(sent.content) == {
            "customerName": "Ada",
            "customerEmail": "ada@example.com",
            "address": "12 St James's Sq",
            "items": [
                {"productId": 1, "quantity": 1},
                {"productId": 2, "quantity": 2},
            ],
            "total": 69000,
        }

    def test_201_returns_order(self):
        gateway, _ = _gateway(_created)
        order = gateway.create_order(_request())
        assert order.id == 17
        assert order.status == "pending"
        assert order.total == Money(69000)
        assert order.created_at.year == 2026
        assert len(order.items) == 2

    def test_missing_status_defaults_to_pending(self):
        def handler(request):
            body = json.loads(request.content)
            return httpx.Response(201, json={**body, "id": 3})

        gateway, _ = _gateway(handler)
        assert gateway.create_order(_request()).status == "pending"

    def test_400_surfaces_message_and_field_once(self):
        gateway, calls = _gateway(
            lambda r: httpx.Response(400, json={"message": "address required", "field": "address"})
        )
        with pytest.raises(OrderRejectedError) as exc_info:
            gateway.create_order(_request())
        assert exc_info.value.message == "address required"
        assert exc_info.value.field == "address"
        assert len(calls) == 1

    def test_400_with_field_error_lists(self):
        gateway, _ = _gateway(
            lambda r: httpx.Response(400, json={"customer_email": ["Enter a valid email address."]})
        )
        with pytest.raises(OrderRejectedError) as exc_info:
            gateway.create_order(_request())
        assert exc_info.value.message == "Enter a valid email address."
        assert exc_info.value.field == "customer_email"

    def test_500_is_generic_failure_without_retry(self):
        gateway, calls = _gateway(lambda r: httpx.Response(500, text="boom"))
        with pytest.raises(OrderSubmissionError, match="Failed to place order") as exc_info:
            gateway.create_order(_request())
        assert not isinstance(exc_info.value, OrderRejectedError)
        assert len(calls) == 1

    def test_transport_error_is_generic_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        gateway, calls = _gateway(handler)
        with pytest.raises(OrderSubmissionError, match="Failed to place order"):
            gateway.create_order(_request())
        assert len(calls) == 1

    def test_malformed_201_is_generic_failure(self):
        gateway, _ = _gateway(lambda r: httpx.Response(201, json={"ok": True}))
        with pytest.raises(OrderSubmissionError):
            gateway.create_order(_request())

    def test_unlisted_status_is_kept(self):
        def handler(request):
            body = json.loads(request.content)
            return httpx.Response(201, json={**body, "id": 9, "status": "confirmed"})

        gateway, _ = _gateway(handler)
        order = gateway.create_order(_request())
        assert order.id == 9
        assert order.status == "confirmed"

    @pytest.mark.parametrize("status", [409, 422])
    def test_other_4xx_surfaces_message_and_field(self, status):
        gateway, calls = _gateway(
            lambda r: httpx.Response(status, json={"message": "address required", "field": "address"})
        )
        with pytest.raises(OrderRejectedError) as exc_info:
            gateway.create_order(_request())
        assert exc_info.value.message == "address required"
        assert exc_info.value.field == "address"
        assert len(calls) == 1
