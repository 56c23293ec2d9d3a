"""Tests for the authenticated request pipeline.

These tests run the client against an in-process fake server and
verify header construction, success/error classification, decoding,
the four distinct error kinds and isolation between concurrent calls.
"""

from __future__ import annotations

import asyncio
import base64
import random
from datetime import datetime

import aiohttp
import pytest  # type: ignore
from prometheus_client import REGISTRY
from pydantic import BaseModel

from trading212 import MarketOrderRequest, Trading212Client
from trading212.errors import ApiError, DecodeError, SerializationError, Trading212Error, TransportError


class Item(BaseModel):
    id: int
    name: str


async def test_authorization_header_on_every_request(broker, client) -> None:
    broker.add("GET", "/a", body={})
    broker.add("POST", "/b", body={})
    await client.http.get("/a")
    await client.http.post("/b", {"x": 1})
    expected = "Basic " + base64.b64encode(b"k:s").decode()
    assert [r.headers["Authorization"] for r in broker.requests] == [expected, expected]


async def test_content_type_only_with_body(broker, client) -> None:
    broker.add("GET", "/a", body={})
    broker.add("POST", "/b", body={})
    await client.http.get("/a")
    await client.http.post("/b", {"ticker": "AAPL_US_EQ"})
    get_req, post_req = broker.requests
    assert "Content-Type" not in get_req.headers
    assert get_req.body == b""
    assert post_req.headers["Content-Type"] == "application/json"
    assert post_req.json() == {"ticker": "AAPL_US_EQ"}


async def test_path_is_appended_verbatim(broker, client) -> None:
    broker.add("GET", "/test", body={})
    await client.http.get("/test?b=2&a=1")
    assert broker.requests[0].path_qs == "/test?b=2&a=1"


async def test_percent_encoding_reaches_the_wire_unchanged(broker, client) -> None:
    broker.add("GET", "/test", body={})
    await client.http.get("/test?time=2023-01-01T12%3A00%3A00Z&q=a%2Fb+c")
    assert broker.requests[0].query_string == "time=2023-01-01T12%3A00%3A00Z&q=a%2Fb+c"


async def test_success_decodes_into_model(broker, client) -> None:
    broker.add("GET", "/item", body='{"id":123,"name":"test"}')
    item = await client.http.get("/item", into=Item)
    assert item.id == 123
    assert item.name == "test"


async def test_no_container_discards_body(broker, client) -> None:
    broker.add("DELETE", "/thing", body="this is not json")
    assert await client.http.delete("/thing") is None


async def test_error_status_raises_api_error_with_raw_body(broker, client) -> None:
    broker.add("GET", "/bad", status=400, body='{"error":"Bad request"}')
    with pytest.raises(ApiError) as excinfo:
        await client.http.get("/bad", into=Item)
    err = excinfo.value
    assert err.status == 400
    assert err.body == '{"error":"Bad request"}'
    assert "400" in str(err)
    assert '{"error":"Bad request"}' in str(err)


@pytest.mark.parametrize("status", [401, 404, 429, 500, 503])
async def test_any_status_at_or_above_400_is_failure(broker, client, status) -> None:
    broker.add("GET", "/x", status=status, body="plain text failure")
    with pytest.raises(ApiError) as excinfo:
        await client.http.get("/x")
    assert excinfo.value.status == status
    assert excinfo.value.body == "plain text failure"


async def test_non_error_status_is_success(broker, client) -> None:
    broker.add("GET", "/accepted", status=202, body='{"id":1,"name":"n"}')
    assert (await client.http.get("/accepted", into=Item)).id == 1


async def test_invalid_json_raises_decode_error(broker, client) -> None:
    broker.add("GET", "/garbage", body="{not json")
    with pytest.raises(DecodeError) as excinfo:
        await client.http.get("/garbage", into=Item)
    assert excinfo.value.body == "{not json"


async def test_shape_mismatch_raises_decode_error(broker, client) -> None:
    broker.add("GET", "/wrong", body={"id": "not-a-number", "name": "x"})
    with pytest.raises(DecodeError):
        await client.http.get("/wrong", into=Item)


async def test_unserialisable_body_raises_before_sending(broker, client) -> None:
    with pytest.raises(SerializationError):
        await client.http.post("/b", {"when": datetime(2024, 1, 1)})
    with pytest.raises(SerializationError):
        await client.http.post("/b", {"price": float("nan")})
    assert broker.requests == []


@pytest.mark.parametrize("quantity", [float("nan"), float("inf"), float("-inf")])
async def test_non_finite_model_body_raises_before_sending(broker, client, quantity) -> None:
    with pytest.raises(SerializationError):
        await client.orders.place_market_order(MarketOrderRequest(ticker="AAPL_US_EQ", quantity=quantity))
    assert broker.requests == []


async def test_connection_refused_raises_transport_error() -> None:
    client = Trading212Client("http://127.0.0.1:1", "k", "s")
    try:
        with pytest.raises(TransportError) as excinfo:
            await client.account.get_info()
        assert excinfo.value.__cause__ is not None
    finally:
        await client.close()


async def test_closed_caller_session_raises_transport_error(broker) -> None:
    session = aiohttp.ClientSession()
    await session.close()
    client = Trading212Client(broker.base_url, "k", "s", session=session)
    with pytest.raises(TransportError):
        await client.account.get_info()
    assert broker.requests == []


async def test_client_timeout_raises_transport_error(broker) -> None:
    async def slow(request):
        await asyncio.sleep(1.0)
        return 200, {}

    broker.add_handler("GET", "/slow", slow)
    client = Trading212Client(broker.base_url, "k", "s", timeout=0.1)
    try:
        with pytest.raises(TransportError):
            await client.http.get("/slow")
    finally:
        await client.close()


async def test_caller_deadline_cancels_request(broker, client) -> None:
    async def slow(request):
        await asyncio.sleep(1.0)
        return 200, {}

    broker.add_handler("GET", "/slow", slow)
    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(client.http.get("/slow"), timeout=0.1)


def test_error_kinds_are_distinct() -> None:
    kinds = [SerializationError, TransportError, ApiError, DecodeError]
    for kind in kinds:
        assert issubclass(kind, Trading212Error)
        assert [k for k in kinds if issubclass(kind, k)] == [kind]


async def test_caller_supplied_session_is_not_closed(broker) -> None:
    broker.add("GET", "/a", body={})
    async with aiohttp.ClientSession() as session:
        client = Trading212Client(broker.base_url, "k", "s", session=session)
        await client.http.get("/a")
        await client.close()
        assert not session.closed
        await client.http.get("/a")
    assert len(broker.requests) == 2


async def test_concurrent_calls_see_only_their_own_response(broker, client) -> None:
    async def echo(request):
        await asyncio.sleep(random.uniform(0, 0.05))
        n = int(request.query["n"])
        return 200, {"id": n, "name": f"item-{n}"}

    broker.add_handler("GET", "/echo", echo)
    results = await asyncio.gather(*(client.http.get(f"/echo?n={n}", into=Item) for n in range(25)))
    assert [(r.id, r.name) for r in results] == [(n, f"item-{n}") for n in range(25)]


async def test_request_metrics_are_recorded(broker, client) -> None:
    broker.add("GET", "/m", body={})
    broker.add("GET", "/m-err", status=500, body="boom")
    labels_ok = {"method": "GET", "status": "200"}
    labels_err = {"method": "GET", "status": "500"}
    before_ok = REGISTRY.get_sample_value("trading212_requests_total", labels_ok) or 0.0
    before_err = REGISTRY.get_sample_value("trading212_requests_total", labels_err) or 0.0
    await client.http.get("/m")
    with pytest.raises(ApiError):
        await client.http.get("/m-err")
    assert REGISTRY.get_sample_value("trading212_requests_total", labels_ok) == before_ok + 1
    assert REGISTRY.get_sample_value("trading212_requests_total", labels_err) == before_err + 1
