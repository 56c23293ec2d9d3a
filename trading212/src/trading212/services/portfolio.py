from __future__ import annotations

from typing import List, Optional

from ..config import API_PREFIX
from ..models import Position
from ..query import encode_query


class PortfolioService:
    def __init__(self, http_client) -> None:
        self.http_client = http_client

    async def get_positions(self, ticker: Optional[str] = None) -> List[Position]:
        """Return all open positions, or only the one for ``ticker``."""
        path = f"{API_PREFIX}/equity/portfolio" + encode_query({"ticker": ticker})
        return await self.http_client.get(path, into=List[Position])
