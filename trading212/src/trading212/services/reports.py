from __future__ import annotations

from typing import List

from ..config import API_PREFIX
from ..models import EnqueuedReport, Report, ReportRequest


class ReportsService:
    """CSV exports of account history.

    Reports are generated asynchronously on the server: ``request_report``
    only enqueues one, and ``get_reports`` shows its status and, once
    finished, the download link.
    """

    def __init__(self, http_client) -> None:
        self.http_client = http_client

    async def request_report(self, request: ReportRequest) -> EnqueuedReport:
        return await self.http_client.post(
            f"{API_PREFIX}/equity/history/exports", request, into=EnqueuedReport
        )

    async def get_reports(self) -> List[Report]:
        return await self.http_client.get(f"{API_PREFIX}/equity/history/exports", into=List[Report])
