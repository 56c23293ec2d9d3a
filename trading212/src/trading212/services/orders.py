"""
Order placement, lookup and cancellation.

Quantities are signed: a positive quantity buys, a negative quantity
sells.  Placement calls return the order as accepted by the broker; a
rejected order surfaces as :class:`~trading212.errors.ApiError`.
"""

from __future__ import annotations

import logging
from typing import List

from ..config import API_PREFIX
from ..models import (
    LimitOrderRequest,
    MarketOrderRequest,
    Order,
    StopLimitOrderRequest,
    StopOrderRequest,
)

logger = logging.getLogger(__name__)

ORDERS_PATH = f"{API_PREFIX}/equity/orders"


class OrdersService:
    def __init__(self, http_client) -> None:
        self.http_client = http_client

    async def get_orders(self) -> List[Order]:
        """Return all pending orders."""
        return await self.http_client.get(ORDERS_PATH, into=List[Order])

    async def get_order(self, order_id: int) -> Order:
        return await self.http_client.get(f"{ORDERS_PATH}/{int(order_id)}", into=Order)

    async def _place(self, kind: str, request) -> Order:
        order = await self.http_client.post(f"{ORDERS_PATH}/{kind}", request, into=Order)
        logger.info(
            "Placed %s order %s for %s qty=%s", kind, order.id, request.ticker, request.quantity
        )
        return order

    async def place_market_order(self, request: MarketOrderRequest) -> Order:
        return await self._place("market", request)

    async def place_limit_order(self, request: LimitOrderRequest) -> Order:
        return await self._place("limit", request)

    async def place_stop_order(self, request: StopOrderRequest) -> Order:
        return await self._place("stop", request)

    async def place_stop_limit_order(self, request: StopLimitOrderRequest) -> Order:
        return await self._place("stop_limit", request)

    async def cancel_order(self, order_id: int) -> None:
        """Cancel a pending order.  The response body is discarded."""
        await self.http_client.delete(f"{ORDERS_PATH}/{int(order_id)}")
        logger.info("Cancelled order %s", order_id)
