#!/usr/bin/env python
"""Print an overview of a Trading 212 account.

Shows the account summary, open positions, pending orders and the first
few tradable instruments.  Read-only; safe to run against any
environment.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os

from trading212 import Trading212Client

TS_FORMAT = "%Y-%m-%d %H:%M:%S"


async def run(instrument_count: int) -> None:
    async with Trading212Client.from_env() as client:
        print("=== Account Summary ===")
        summary = await client.account.get_summary()
        print(f"Account ID: {summary.id}")
        print(f"Currency: {summary.currency_code}")
        if summary.cash:
            print(f"Free Cash: {summary.cash.free:.2f}")
            print(f"Invested: {summary.cash.invested:.2f}")
            print(f"Result: {summary.cash.result:.2f}")
            print(f"Total: {summary.cash.total:.2f}")

        print("\n=== Open Positions ===")
        positions = await client.portfolio.get_positions()
        if not positions:
            print("No open positions")
        for pos in positions:
            print(f"Ticker: {pos.ticker}")
            print(f"  Quantity: {pos.quantity:.4f}")
            print(f"  Current Price: {pos.current_price}")
            print(f"  Average Price: {pos.average_price}")
            print(f"  P&L: {pos.ppl}  FX P&L: {pos.fx_ppl}")
            if pos.initial_fill_date:
                print(f"  Initial Fill Date: {pos.initial_fill_date.strftime(TS_FORMAT)}")

        print("\n=== Pending Orders ===")
        orders = await client.orders.get_orders()
        if not orders:
            print("No pending orders")
        for order in orders:
            print(f"Order ID: {order.id} {order.type} {order.side} {order.ticker} ({order.status})")
            print(f"  Quantity: {order.quantity}")
            if order.limit_price is not None:
                print(f"  Limit Price: {order.limit_price:.2f}")
            if order.stop_price is not None:
                print(f"  Stop Price: {order.stop_price:.2f}")
            if order.created_at:
                print(f"  Created: {order.created_at.strftime(TS_FORMAT)}")

        print("\n=== Sample Instruments ===")
        instruments = await client.instruments.get_instruments()
        print(f"Total instruments available: {len(instruments)}")
        for instrument in instruments[:instrument_count]:
            print(f"  {instrument.ticker} - {instrument.name} ({instrument.type})")


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a Trading 212 account overview.")
    parser.add_argument("--instruments", type=int, default=5, help="Number of instruments to list.")
    args = parser.parse_args()
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    asyncio.run(run(args.instruments))


if __name__ == "__main__":
    main()
