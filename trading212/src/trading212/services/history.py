"""
Paginated account history: filled orders, dividends and cash transactions.

Each ``get_*`` call returns one :class:`~trading212.models.Page`.  Follow
``page.next_page_path`` (or use the ``iter_*`` helpers) to walk the rest;
a ``None`` next path marks the last page.

All filters are optional and omitted from the query when ``None``.
Explicit zero values are sent as-is.
"""

from __future__ import annotations

from datetime import datetime
from typing import AsyncIterator, Optional

from ..config import API_PREFIX
from ..models import HistoricalOrder, HistoryDividendItem, HistoryTransactionItem, Page
from ..query import encode_query

HISTORY_PATH = f"{API_PREFIX}/equity/history"


def orders_path(cursor: Optional[int] = None, ticker: Optional[str] = None, limit: Optional[int] = None) -> str:
    return f"{HISTORY_PATH}/orders" + encode_query({"cursor": cursor, "ticker": ticker, "limit": limit})


def dividends_path(cursor: Optional[int] = None, ticker: Optional[str] = None, limit: Optional[int] = None) -> str:
    return f"{HISTORY_PATH}/dividends" + encode_query({"cursor": cursor, "ticker": ticker, "limit": limit})


def transactions_path(
    cursor: Optional[str] = None, time: Optional[datetime] = None, limit: Optional[int] = None
) -> str:
    return f"{HISTORY_PATH}/transactions" + encode_query({"cursor": cursor, "time": time, "limit": limit})


class HistoryService:
    def __init__(self, http_client) -> None:
        self.http_client = http_client

    async def get_orders(
        self, cursor: Optional[int] = None, ticker: Optional[str] = None, limit: Optional[int] = None
    ) -> Page[HistoricalOrder]:
        return await self.http_client.get_page(orders_path(cursor, ticker, limit), HistoricalOrder)

    async def get_dividends(
        self, cursor: Optional[int] = None, ticker: Optional[str] = None, limit: Optional[int] = None
    ) -> Page[HistoryDividendItem]:
        return await self.http_client.get_page(dividends_path(cursor, ticker, limit), HistoryDividendItem)

    async def get_transactions(
        self, cursor: Optional[str] = None, time: Optional[datetime] = None, limit: Optional[int] = None
    ) -> Page[HistoryTransactionItem]:
        """Cash movements; ``time`` selects the starting point of the listing."""
        return await self.http_client.get_page(
            transactions_path(cursor, time, limit), HistoryTransactionItem
        )

    def iter_orders(
        self, ticker: Optional[str] = None, limit: Optional[int] = None
    ) -> AsyncIterator[HistoricalOrder]:
        """Iterate over every historical order, fetching pages as needed."""
        return self.http_client.paginate(orders_path(None, ticker, limit), HistoricalOrder)

    def iter_dividends(
        self, ticker: Optional[str] = None, limit: Optional[int] = None
    ) -> AsyncIterator[HistoryDividendItem]:
        return self.http_client.paginate(dividends_path(None, ticker, limit), HistoryDividendItem)

    def iter_transactions(
        self, time: Optional[datetime] = None, limit: Optional[int] = None
    ) -> AsyncIterator[HistoryTransactionItem]:
        return self.http_client.paginate(transactions_path(None, time, limit), HistoryTransactionItem)
