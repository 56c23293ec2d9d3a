"""
Authentication provider abstractions for the Trading 212 API.

These classes encapsulate the construction of authentication headers.
Keeping auth out of the HTTP client lets tests and callers plug in a
different scheme without touching the request pipeline.
"""
from __future__ import annotations

import base64
from typing import Dict


class AuthProvider:
    """Abstract base class for authentication providers."""

    def get_headers(self, method: str, path: str) -> Dict[str, str]:
        """Return authentication headers for the given request.

        Subclasses must implement this method.
        """
        raise NotImplementedError


class BasicAuthProvider(AuthProvider):
    """HTTP Basic authentication from an API key and secret.

    The header value is derived from the two immutable strings on every
    call; nothing is cached.
    """

    def __init__(self, api_key: str, api_secret: str) -> None:
        self._api_key = api_key
        self._api_secret = api_secret

    def __repr__(self) -> str:
        return "BasicAuthProvider(api_key='***', api_secret='***')"

    def authorization(self) -> str:
        """Return ``"Basic " + base64(key:secret)``."""
        raw = f"{self._api_key}:{self._api_secret}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")

    def get_headers(self, method: str, path: str) -> Dict[str, str]:
        return {"Authorization": self.authorization()}
