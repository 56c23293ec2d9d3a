"""
generate_json_schema
====================

This script exports JSON Schema definitions for the request and
response models of the Trading 212 client.  It uses Pydantic's built-in
JSON schema generator on the models defined in ``trading212.models``.
The resulting schema documents the wire format (camelCase field names)
and can be fed to code generators for other languages.

Usage
-----

Run this script from the project root and specify an output file:

.. code-block:: bash

    python scripts/generate_json_schema.py --out schemas.json

If no output file is provided, the schema will be printed to stdout.
"""

from __future__ import annotations

import argparse
import json
from typing import Any, Dict, Type

from pydantic import BaseModel

from trading212.models import (
    AccountCash,
    AccountInfo,
    AccountSummary,
    EnqueuedReport,
    Exchange,
    HistoricalOrder,
    HistoryDividendItem,
    HistoryTransactionItem,
    LimitOrderRequest,
    MarketOrderRequest,
    Order,
    Position,
    Report,
    ReportRequest,
    StopLimitOrderRequest,
    StopOrderRequest,
    TradableInstrument,
)


def collect_models() -> Dict[str, Type[BaseModel]]:
    models = (
        AccountInfo,
        AccountCash,
        AccountSummary,
        Order,
        Position,
        MarketOrderRequest,
        LimitOrderRequest,
        StopOrderRequest,
        StopLimitOrderRequest,
        TradableInstrument,
        Exchange,
        HistoricalOrder,
        HistoryDividendItem,
        HistoryTransactionItem,
        ReportRequest,
        EnqueuedReport,
        Report,
    )
    return {model.__name__: model for model in models}


def generate_schema(models: Dict[str, Type[BaseModel]]) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "definitions": {},
    }
    for name, model in models.items():
        # by_alias so the schema describes the JSON actually on the wire
        schema["definitions"][name] = model.model_json_schema(by_alias=True)
    return schema


def parse_args() -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Generate JSON schemas for Trading 212 models.")
    ap.add_argument("--out", help="Output file path. Defaults to stdout if omitted.")
    return ap.parse_args()


def main() -> None:
    args = parse_args()
    schema = generate_schema(collect_models())
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(schema, f, indent=2)
        print(f"Schema written to {args.out}")
    else:
        print(json.dumps(schema, indent=2))


if __name__ == "__main__":
    main()
