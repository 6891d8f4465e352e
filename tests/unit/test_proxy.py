"""Unit tests for the store data proxy."""

import json

import httpx
import pytest

from shop_explorer.errors import ErrorKind, ProxyError, ProxySuccess
from shop_explorer.integrations.queries import DataType, get_query
from shop_explorer.services.proxy import fetch_store_data, validate_request


def ok(payload):
    return lambda request: httpx.Response(200, json=payload)


class TestValidateRequest:
    """Tests for request validation."""

    def test_valid(self):
        request = validate_request({"store_id": 1, "data_type": "orders"})
        assert request.store_id == 1
        assert request.data_type is DataType.ORDERS

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"store_id": 1},
            {"data_type": "orders"},
            {"store_id": None, "data_type": "orders"},
            None,
            [1, "orders"],
            "orders",
        ],
    )
    def test_missing_fields(self, payload):
        error = validate_request(payload)

        assert isinstance(error, ProxyError)
        assert error.kind is ErrorKind.BAD_REQUEST
        assert error.message == "Missing required fields: store_id and data_type."

    def test_unknown_data_type(self):
        error = validate_request({"store_id": 1, "data_type": "invoices"})

        assert error.kind is ErrorKind.BAD_REQUEST
        assert error.message == "Invalid data_type specified: invoices"

    @pytest.mark.parametrize("store_id", [0, -3, "abc", 1.5, 2**63, 10**20])
    def test_invalid_store_id(self, store_id):
        error = validate_request({"store_id": store_id, "data_type": "orders"})

        assert error.kind is ErrorKind.BAD_REQUEST
        assert error.details[0]["loc"] == ["store_id"]


@pytest.mark.asyncio
class TestFetchStoreData:
    """Tests for the full proxy flow."""

    @pytest.mark.parametrize("data_type", ["invoices", "Orders", 4])
    async def test_bad_selector_skips_lookup_and_upstream(self, data_type, fake_session, shopify_factory, store):
        session = fake_session(store)
        factory = shopify_factory(ok({"data": {}}))

        result = await fetch_store_data({"store_id": 1, "data_type": data_type}, session, factory)

        assert isinstance(result, ProxyError)
        assert result.status_code == 400
        session.execute.assert_not_called()
        assert factory.calls == []

    async def test_unknown_store(self, fake_session, shopify_factory):
        session = fake_session(None)
        factory = shopify_factory(ok({"data": {}}))

        result = await fetch_store_data({"store_id": 42, "data_type": "orders"}, session, factory)

        assert result.kind is ErrorKind.NOT_FOUND
        assert result.status_code == 404
        assert result.to_envelope() == {"error": "Store with ID 42 not found."}
        session.execute.assert_awaited_once()
        assert factory.calls == []
        assert factory.requests == []

    async def test_success_returns_data_portion(self, fake_session, shopify_factory, store, orders_payload):
        factory = shopify_factory(ok(orders_payload))

        result = await fetch_store_data({"store_id": 1, "data_type": "orders"}, fake_session(store), factory)

        assert isinstance(result, ProxySuccess)
        assert result.data == orders_payload["data"]

    async def test_uses_stored_credentials_and_canned_query(self, fake_session, shopify_factory, store):
        factory = shopify_factory(ok({"data": {"products": {"edges": []}}}))

        await fetch_store_data({"store_id": 1, "data_type": "products"}, fake_session(store), factory)

        assert factory.calls == [("shop.myshopify.com", "shpat_test_token")]
        assert len(factory.requests) == 1
        request = factory.requests[0]
        assert request.url.host == "shop.myshopify.com"
        assert json.loads(request.content) == {"query": get_query(DataType.PRODUCTS)}

    async def test_upstream_401(self, fake_session, shopify_factory, store):
        body = '{"errors":"[API] Invalid API key or access token (unrecognized login or wrong password)"}'
        factory = shopify_factory(lambda request: httpx.Response(401, text=body))

        result = await fetch_store_data({"store_id": 1, "data_type": "orders"}, fake_session(store), factory)

        assert result.kind is ErrorKind.UPSTREAM
        assert result.status_code == 401
        assert result.details == body
        assert result.to_envelope()["error"] == "Shopify API failed with status 401"

    async def test_upstream_unreachable(self, fake_session, shopify_factory, store):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        factory = shopify_factory(handler)

        result = await fetch_store_data({"store_id": 1, "data_type": "orders"}, fake_session(store), factory)

        assert result.kind is ErrorKind.UPSTREAM
        assert result.status_code == 502
        assert len(factory.requests) == 1

    async def test_graphql_errors(self, fake_session, shopify_factory, store):
        errors = [{"message": "Field 'email' doesn't exist on type 'Customer'", "locations": [{"line": 3}]}]
        factory = shopify_factory(ok({"errors": errors}))

        result = await fetch_store_data({"store_id": 1, "data_type": "customers"}, fake_session(store), factory)

        assert result.kind is ErrorKind.GRAPHQL
        assert result.status_code == 500
        assert result.details == errors

    async def test_no_retry_on_failure(self, fake_session, shopify_factory, store):
        factory = shopify_factory(lambda request: httpx.Response(503, text="busy"))

        await fetch_store_data({"store_id": 1, "data_type": "orders"}, fake_session(store), factory)

        assert len(factory.requests) == 1

    async def test_largest_store_id_reaches_lookup(self, fake_session, shopify_factory):
        session = fake_session(None)
        factory = shopify_factory(ok({"data": {}}))

        result = await fetch_store_data({"store_id": 2**63 - 1, "data_type": "orders"}, session, factory)

        assert result.kind is ErrorKind.NOT_FOUND
        session.execute.assert_awaited_once()

    async def test_connection_released_before_upstream_call(self, fake_session, shopify_factory, store):
        session = fake_session(store)
        commits_at_request = []

        def handler(request):
            commits_at_request.append(session.commit.await_count)
            return httpx.Response(200, json={"data": {}})

        factory = shopify_factory(handler)

        result = await fetch_store_data({"store_id": 1, "data_type": "orders"}, session, factory)

        assert isinstance(result, ProxySuccess)
        assert commits_at_request == [1]
        assert factory.calls == [("shop.myshopify.com", "shpat_test_token")]

    async def test_rejected_request_does_not_commit(self, fake_session, shopify_factory, store):
        session = fake_session(store)

        await fetch_store_data({"store_id": 0, "data_type": "orders"}, session, shopify_factory(ok({})))

        session.commit.assert_not_called()
