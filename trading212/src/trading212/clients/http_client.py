"""
Authenticated HTTP request pipeline for the Trading 212 REST API.

Every API operation goes through :meth:`HttpClient.request`, which
serialises an optional JSON body, attaches HTTP Basic authentication,
sends the request with aiohttp and classifies the response: status codes
of 400 and above raise :class:`~trading212.errors.ApiError` carrying the
raw body, anything below is decoded into the model type the caller asks
for.  Responses are always released before the call returns.

There is deliberately no retry or rate limiting here.  A failed attempt
surfaces immediately and the caller decides what to do with it.
Cancellation and deadlines come from the caller as well: cancelling the
awaiting task (or wrapping the call in ``asyncio.wait_for``) aborts the
in-flight request.
"""

from __future__ import annotations

import asyncio
import functools
import json
import logging
import math
import time
from typing import Any, AsyncIterator, Dict, Optional

import aiohttp
from aiohttp import ClientResponse
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from yarl import URL

from ..config import ClientConfig
from ..errors import ApiError, DecodeError, SerializationError, TransportError
from ..metrics import observe_request
from ..models import Page
from .auth_providers import AuthProvider, BasicAuthProvider

logger = logging.getLogger(__name__)


def _has_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_has_non_finite(v) for v in value.values())
    if isinstance(value, (list, tuple)):
        return any(_has_non_finite(v) for v in value)
    return False


@functools.lru_cache(maxsize=None)
def _adapter(into: Any) -> TypeAdapter:
    return TypeAdapter(into)


class HttpClient:
    """Asynchronous Trading 212 REST client core shared by all services."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        auth_provider: Optional[AuthProvider] = None,
    ) -> None:
        """Construct the HTTP client.

        Args:
            config: Base URL, credentials and request timeout.
            session: Optional caller-owned aiohttp session.  When given it
                is used as-is: the configured timeout is not applied and
                :meth:`close` leaves it open.
            auth_provider: Optional override for header construction;
                defaults to Basic auth from the config credentials.
        """
        self.config = config
        self.base_url = config.base_url
        self.auth_provider: AuthProvider = auth_provider or BasicAuthProvider(
            config.api_key, config.api_secret
        )
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout)
            )
        return self._session

    async def close(self) -> None:
        """Close the session if this client created it."""
        if not self._owns_session or self._session is None:
            return
        if not self._session.closed:
            await self._session.close()
        self._session = None

    @staticmethod
    def _encode_body(body: Any) -> Optional[bytes]:
        if body is None:
            return None
        try:
            if isinstance(body, BaseModel):
                # model_dump_json would write NaN and Inf as null
                if _has_non_finite(body.model_dump()):
                    raise ValueError("Out of range float values are not JSON compliant")
                return body.model_dump_json(by_alias=True).encode("utf-8")
            return json.dumps(body, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError, PydanticSerializationError) as exc:
            raise SerializationError(f"failed to encode request body: {exc}") from exc

    def _build_headers(self, method: str, path: str, has_body: bool) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        headers.update(self.auth_provider.get_headers(method, path))
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        into: Any = None,
    ) -> Any:
        """Send one request and return the decoded response.

        Args:
            method: HTTP method, e.g. ``"GET"``.
            path: Path appended verbatim to the base URL, query included.
            body: Optional JSON body (pydantic model or JSON-compatible value).
            into: Type to decode a successful response into (a model class,
                ``List[Model]``, ``Page[Model]``...).  When omitted the body
                is read and discarded and ``None`` is returned.

        Raises:
            SerializationError: ``body`` cannot be encoded as JSON.
            TransportError: no response was obtained, including when a
                caller-supplied session has already been closed.
            ApiError: the server answered with status >= 400.
            DecodeError: the response body does not fit ``into``.
        """
        method = method.upper()
        data = self._encode_body(body)
        headers = self._build_headers(method, path, data is not None)
        # The query suffix is already percent-encoded; yarl must not requote it
        url = URL(f"{self.base_url}{path}", encoded=True)
        session = self._get_session()
        if session.closed:
            raise TransportError(f"{method} {path} failed: session is closed")
        started = time.monotonic()
        try:
            async with session.request(method, url, data=data, headers=headers) as resp:
                elapsed = time.monotonic() - started
                observe_request(method, str(resp.status), elapsed)
                logger.debug("%s %s -> %s in %.3fs", method, path, resp.status, elapsed)
                return await self._handle_response(resp, into)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            observe_request(method, "error", time.monotonic() - started)
            logger.debug("%s %s failed: %r", method, path, exc)
            raise TransportError(f"{method} {path} failed: {exc!r}") from exc

    @staticmethod
    async def _handle_response(resp: ClientResponse, into: Any) -> Any:
        if resp.status >= 400:
            text = await resp.text(errors="replace")
            # Truncate to keep log lines bounded; the exception keeps the full body
            logger.warning("Trading 212 API error %s: %s", resp.status, text[:200])
            raise ApiError(resp.status, text)
        raw = await resp.read()
        if into is None:
            return None
        try:
            return _adapter(into).validate_json(raw)
        except ValidationError as exc:
            text = raw.decode("utf-8", errors="replace")
            raise DecodeError(f"failed to decode response: {exc}", body=text) from exc

    async def get(self, path: str, into: Any = None) -> Any:
        return await self.request("GET", path, into=into)

    async def post(self, path: str, body: Any, into: Any = None) -> Any:
        return await self.request("POST", path, body=body, into=into)

    async def delete(self, path: str, into: Any = None) -> Any:
        return await self.request("DELETE", path, into=into)

    async def get_page(self, path: str, item_type: Any) -> Page:
        """Fetch a single page of a paginated listing."""
        return await self.get(path, into=Page[item_type])

    async def paginate(self, path: str, item_type: Any) -> AsyncIterator[Any]:
        """Yield items from ``path`` and every page linked by ``nextPagePath``."""
        next_path: Optional[str] = path
        while next_path:
            page = await self.get_page(next_path, item_type)
            for item in page.items:
                yield item
            next_path = page.next_page_path
