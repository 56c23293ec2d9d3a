"""
Top-level Trading 212 client.

``Trading212Client`` owns one :class:`~trading212.clients.HttpClient` and
exposes the endpoint groups as attributes::

    async with Trading212Client(Environment.DEMO, api_key, api_secret) as client:
        info = await client.account.get_info()
        positions = await client.portfolio.get_positions()

The client keeps no per-call state and may be shared by concurrent tasks.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import aiohttp

from .clients.auth_providers import AuthProvider
from .clients.http_client import HttpClient
from .config import DEFAULT_TIMEOUT, ClientConfig, Environment, resolve_base_url
from .secrets_manager import BaseSecretsManager
from .services import (
    AccountService,
    HistoryService,
    InstrumentsService,
    OrdersService,
    PortfolioService,
    ReportsService,
)

logger = logging.getLogger(__name__)


class Trading212Client:
    """Typed asynchronous client for the Trading 212 equity API."""

    def __init__(
        self,
        env: Union[Environment, str],
        api_key: str,
        api_secret: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[aiohttp.ClientSession] = None,
        auth_provider: Optional[AuthProvider] = None,
    ) -> None:
        """
        :param env: ``Environment.DEMO``, ``Environment.LIVE`` or a base URL
            override used verbatim as the request prefix.
        :param api_key: API key issued by Trading 212.
        :param api_secret: Secret paired with ``api_key``.
        :param timeout: Overall per-request timeout in seconds; ignored
            when ``session`` is supplied.
        :param session: Optional caller-owned aiohttp session.
        :param auth_provider: Optional replacement for Basic auth headers.
        """
        config = ClientConfig(
            api_key=api_key,
            api_secret=api_secret,
            base_url=resolve_base_url(env),
            timeout=timeout,
        )
        self._init_from_config(config, session=session, auth_provider=auth_provider)

    def _init_from_config(
        self,
        config: ClientConfig,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        auth_provider: Optional[AuthProvider] = None,
    ) -> None:
        self.config = config
        self.http = HttpClient(config, session=session, auth_provider=auth_provider)
        self.account = AccountService(self.http)
        self.portfolio = PortfolioService(self.http)
        self.orders = OrdersService(self.http)
        self.instruments = InstrumentsService(self.http)
        self.history = HistoryService(self.http)
        self.reports = ReportsService(self.http)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        auth_provider: Optional[AuthProvider] = None,
    ) -> "Trading212Client":
        client = cls.__new__(cls)
        client._init_from_config(config, session=session, auth_provider=auth_provider)
        return client

    @classmethod
    def from_env(
        cls,
        *,
        prefix: str = "TRADING212_",
        secrets: Optional[BaseSecretsManager] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> "Trading212Client":
        """
        Create a client from ``TRADING212_*`` environment variables.

        See :meth:`ClientConfig.from_env` for the variables read.
        """
        config = ClientConfig.from_env(prefix=prefix, secrets=secrets)
        logger.debug("Loaded %r", config)
        return cls.from_config(config, session=session)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "Trading212Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
