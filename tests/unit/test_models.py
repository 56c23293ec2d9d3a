"""Tests for model aliases, request serialisation and tolerant decoding."""

from __future__ import annotations

import base64
import json
from datetime import datetime, timedelta, timezone

import pytest  # type: ignore
from pydantic import ValidationError

from trading212.clients.auth_providers import BasicAuthProvider
from trading212.models import (
    AccountSummary,
    LimitOrderRequest,
    MarketOrderRequest,
    Order,
    OrderStatus,
    Page,
    Report,
    ReportRequest,
    ReportStatus,
    TimeValidity,
    TradableInstrument,
)


def test_basic_auth_header_value():
    provider = BasicAuthProvider("k", "s")
    expected = "Basic " + base64.b64encode(b"k:s").decode()
    assert provider.get_headers("GET", "/x") == {"Authorization": expected}
    assert repr(provider) == "BasicAuthProvider(api_key='***', api_secret='***')"


def test_basic_auth_handles_utf8_and_colons():
    provider = BasicAuthProvider("clé", "a:b")
    assert provider.authorization() == "Basic " + base64.b64encode("clé:a:b".encode("utf-8")).decode()


def test_market_order_serialises_with_camel_case():
    req = MarketOrderRequest(ticker="AAPL_US_EQ", quantity=1.0, extended_hours=True)
    assert json.loads(req.model_dump_json(by_alias=True)) == {
        "ticker": "AAPL_US_EQ",
        "quantity": 1.0,
        "extendedHours": True,
    }


def test_limit_order_sell_is_negative_quantity():
    req = LimitOrderRequest(
        ticker="AAPL_US_EQ", quantity=-0.5, limit_price=200.0, time_validity=TimeValidity.GOOD_TILL_CANCEL
    )
    payload = json.loads(req.model_dump_json(by_alias=True))
    assert payload == {
        "ticker": "AAPL_US_EQ",
        "quantity": -0.5,
        "limitPrice": 200.0,
        "timeValidity": "GOOD_TILL_CANCEL",
    }


def test_limit_price_must_be_positive():
    with pytest.raises(ValidationError):
        LimitOrderRequest(ticker="AAPL_US_EQ", quantity=1, limit_price=0)


def test_order_decodes_optional_prices_and_unknown_status():
    order = Order.model_validate(
        {"id": 7, "ticker": "AAPL_US_EQ", "status": "FILLED", "limitPrice": 101.5, "someNewField": 1}
    )
    assert order.status == OrderStatus.FILLED
    assert order.limit_price == 101.5
    assert order.stop_price is None

    newer = Order.model_validate({"id": 8, "status": "SOMETHING_NEW"})
    assert newer.status == "SOMETHING_NEW"


def test_summary_combines_info_and_cash():
    summary = AccountSummary.model_validate(
        {"id": 1, "currencyCode": "GBP", "cash": {"free": 10, "invested": 5, "result": 1, "total": 16}}
    )
    assert summary.currency_code == "GBP"
    assert summary.cash.total == 16


def test_generic_page():
    page = Page[TradableInstrument].model_validate(
        {"items": [{"ticker": "AAPL_US_EQ", "type": "STOCK"}], "nextPagePath": None}
    )
    assert page.items[0].ticker == "AAPL_US_EQ"
    assert page.next_page_path is None


def test_report_request_and_response():
    req = ReportRequest(
        time_from=datetime(2024, 1, 1, tzinfo=timezone.utc),
        time_to=datetime(2024, 2, 1, tzinfo=timezone.utc),
    )
    payload = json.loads(req.model_dump_json(by_alias=True))
    assert payload["dataIncluded"]["includeOrders"] is True
    assert payload["timeFrom"] == "2024-01-01T00:00:00Z"
    assert payload["timeTo"] == "2024-02-01T00:00:00Z"

    report = Report.model_validate({"reportId": 3, "status": "Finished", "downloadLink": "https://x/y.csv"})
    assert report.status == ReportStatus.FINISHED
    assert report.download_link == "https://x/y.csv"


def test_report_request_bounds_are_rendered_in_utc():
    req = ReportRequest(
        time_from=datetime(2024, 1, 1),
        time_to=datetime(2024, 1, 31, 23, 0, tzinfo=timezone(timedelta(hours=-2))),
    )
    payload = json.loads(req.model_dump_json(by_alias=True))
    assert payload["timeFrom"] == "2024-01-01T00:00:00Z"
    assert payload["timeTo"] == "2024-02-01T01:00:00Z"
