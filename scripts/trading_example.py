#!/usr/bin/env python
"""
Order workflow walkthrough.

Places a market buy, a limit sell and a stop order, lists the pending
orders, cancels the most recent one and prints recent historical orders.
Failures of individual steps are logged and the walkthrough continues.

Runs against the demo (paper trading) environment.  Pointing it at the
live environment requires ``--allow-live``.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os

from trading212 import (
    Environment,
    LimitOrderRequest,
    MarketOrderRequest,
    StopOrderRequest,
    TimeValidity,
    Trading212Client,
    Trading212Error,
)

logger = logging.getLogger(__name__)


async def run(ticker: str, pause: float) -> None:
    async with Trading212Client.from_env() as client:
        print("=== Placing Market Buy Order ===")
        try:
            order = await client.orders.place_market_order(MarketOrderRequest(ticker=ticker, quantity=1.0))
            print(f"Order {order.id}: {order.status} {order.ticker} qty={order.quantity}")
        except Trading212Error as exc:
            logger.error("Failed to place market buy order: %s", exc)
        await asyncio.sleep(pause)

        print("\n=== Placing Limit Sell Order ===")
        try:
            order = await client.orders.place_limit_order(
                LimitOrderRequest(ticker=ticker, quantity=-0.5, limit_price=200.0, time_validity=TimeValidity.DAY)
            )
            print(f"Order {order.id}: {order.status} limit={order.limit_price}")
        except Trading212Error as exc:
            logger.error("Failed to place limit sell order: %s", exc)
        await asyncio.sleep(pause)

        print("\n=== Placing Stop-Loss Order ===")
        try:
            order = await client.orders.place_stop_order(
                StopOrderRequest(
                    ticker=ticker, quantity=-1.0, stop_price=150.0, time_validity=TimeValidity.GOOD_TILL_CANCEL
                )
            )
            print(f"Order {order.id}: {order.status} stop={order.stop_price}")
        except Trading212Error as exc:
            logger.error("Failed to place stop order: %s", exc)

        print("\n=== Current Pending Orders ===")
        pending = []
        try:
            pending = await client.orders.get_orders()
        except Trading212Error as exc:
            logger.error("Failed to get pending orders: %s", exc)
        if not pending:
            print("No pending orders")
        for order in pending:
            print(f"Order {order.id} - {order.type} {order.side} {order.quantity} of {order.ticker} ({order.status})")

        if pending:
            last = pending[-1]
            print(f"\n=== Cancelling Order {last.id} ===")
            try:
                await client.orders.cancel_order(last.id)
                print(f"Order {last.id} cancelled")
            except Trading212Error as exc:
                logger.error("Failed to cancel order: %s", exc)

        print("\n=== Recent Historical Orders ===")
        try:
            page = await client.history.get_orders(limit=10)
            if not page.items:
                print("No historical orders found")
            for item in page.items:
                o = item.order
                print(f"Order {o.id} - {o.type} {o.side} {o.quantity} of {o.ticker} (filled {o.filled_quantity})")
        except Trading212Error as exc:
            logger.error("Failed to get historical orders: %s", exc)


def main() -> None:
    parser = argparse.ArgumentParser(description="Walk through the order lifecycle on Trading 212.")
    parser.add_argument("--ticker", default="AAPL_US_EQ", help="Instrument to trade.")
    parser.add_argument("--pause", type=float, default=2.0, help="Seconds to wait between orders.")
    parser.add_argument("--allow-live", action="store_true", help="Permit running against the live environment.")
    args = parser.parse_args()
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))

    env = os.environ.get("TRADING212_ENV", "demo").lower()
    base_url = os.environ.get("TRADING212_BASE_URL", "")
    if (env == "live" or base_url.rstrip("/") == Environment.LIVE.value) and not args.allow_live:
        raise SystemExit("Refusing to place orders on the live environment without --allow-live")

    asyncio.run(run(args.ticker, args.pause))


if __name__ == "__main__":
    main()
