from __future__ import annotations

from ..config import API_PREFIX
from ..models import AccountCash, AccountInfo, AccountSummary


class AccountService:
    def __init__(self, http_client) -> None:
        self.http_client = http_client

    async def get_info(self) -> AccountInfo:
        """Account id and currency."""
        return await self.http_client.get(f"{API_PREFIX}/equity/account/info", into=AccountInfo)

    async def get_cash(self) -> AccountCash:
        """Free, invested, result and total cash."""
        return await self.http_client.get(f"{API_PREFIX}/equity/account/cash", into=AccountCash)

    async def get_summary(self) -> AccountSummary:
        """Account metadata and cash balances in a single snapshot."""
        return await self.http_client.get(
            f"{API_PREFIX}/equity/account/summary", into=AccountSummary
        )
