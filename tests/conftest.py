"""Pytest configuration for path setup and shared fixtures.

The library lives under ``trading212/src``.  When pytest is executed
without the package being installed, that directory is not on
``sys.path``; this file makes both the project root (for
``tests.helpers``) and the source directory importable during test
collection.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest  # type: ignore

ROOT = Path(__file__).resolve().parents[1]

for path in (ROOT, ROOT / "trading212" / "src"):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from tests.helpers.fake_broker import FakeBroker  # noqa: E402
from trading212 import Trading212Client  # noqa: E402


@pytest.fixture
async def broker():
    """A running fake Trading 212 server."""
    fake = FakeBroker()
    await fake.start()
    try:
        yield fake
    finally:
        await fake.close()


@pytest.fixture
async def client(broker):
    """A client pointed at the fake server with key ``k`` and secret ``s``."""
    t212 = Trading212Client(broker.base_url, "k", "s")
    try:
        yield t212
    finally:
        await t212.close()
