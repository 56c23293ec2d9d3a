#!/usr/bin/env python
"""Credential check against the Trading 212 API.

Calls a handful of read-only endpoints and reports each step.  The
process exits with status 1 on the first failure, so the script can be
used as a deployment smoke test.

Configuration is read from ``TRADING212_API_KEY`` /
``TRADING212_API_SECRET`` (or their ``*_FILE`` variants) and
``TRADING212_ENV`` (default ``demo``).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from trading212 import Trading212Client, Trading212Error
from trading212.errors import ConfigError


async def run() -> int:
    try:
        client = Trading212Client.from_env()
    except ConfigError as exc:
        print(exc)
        print("Set TRADING212_API_KEY and TRADING212_API_SECRET, e.g.:")
        print("  export TRADING212_API_KEY=your_api_key")
        print("  export TRADING212_API_SECRET=your_api_secret")
        return 1

    print(f"Testing Trading 212 API authentication against {client.base_url}\n")
    async with client:
        try:
            print("1. Account info...")
            info = await client.account.get_info()
            print(f"   OK  account {info.id}, currency {info.currency_code}")

            print("2. Account cash...")
            cash = await client.account.get_cash()
            print(f"   OK  free {cash.free:.2f}, invested {cash.invested:.2f}, total {cash.total:.2f}")

            print("3. Account summary...")
            summary = await client.account.get_summary()
            total = summary.cash.total if summary.cash else 0.0
            print(f"   OK  account {summary.id} ({summary.currency_code}), total {total:.2f}")

            print("4. Positions...")
            positions = await client.portfolio.get_positions()
            print(f"   OK  {len(positions)} open position(s)")
        except Trading212Error as exc:
            print(f"   FAILED: {exc}")
            return 1

    print("\nAuthentication works.")
    return 0


def main() -> None:
    argparse.ArgumentParser(description="Verify Trading 212 API credentials.").parse_args()
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
