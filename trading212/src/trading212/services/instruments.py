from __future__ import annotations

from typing import List

from ..config import API_PREFIX
from ..models import Exchange, TradableInstrument


class InstrumentsService:
    def __init__(self, http_client) -> None:
        self.http_client = http_client

    async def get_instruments(self) -> List[TradableInstrument]:
        """Every instrument the account can trade."""
        return await self.http_client.get(
            f"{API_PREFIX}/equity/metadata/instruments", into=List[TradableInstrument]
        )

    async def get_exchanges(self) -> List[Exchange]:
        """Exchanges with their working schedules."""
        return await self.http_client.get(
            f"{API_PREFIX}/equity/metadata/exchanges", into=List[Exchange]
        )
