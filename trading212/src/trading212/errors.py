"""
Exception hierarchy for the Trading 212 client.

Every failure the client can surface derives from :class:`Trading212Error`
so callers can catch the whole family at once, while each concrete kind
stays distinct so retry decisions can be made per kind.  The client
itself never retries.
"""

from __future__ import annotations

from typing import Optional


class Trading212Error(Exception):
    """
    Base exception for all client errors.
    """
    pass


class ConfigError(Trading212Error):
    """
    Raised when client configuration (credentials, base URL, timeout)
    is missing or invalid.
    """
    pass


class SerializationError(Trading212Error):
    """
    Raised when a request body cannot be encoded as JSON.

    Nothing has been sent to the server when this is raised.
    """
    pass


class TransportError(Trading212Error):
    """
    Raised when no HTTP response could be obtained: DNS failures,
    refused connections, transport timeouts or a broken response stream.

    The underlying aiohttp exception is available as ``__cause__``.
    """
    pass


class ApiError(Trading212Error):
    """
    Raised when the server answers with a status code of 400 or above.

    The response body is kept verbatim in ``body``; it is not parsed,
    because error payloads are not guaranteed to be JSON.
    """

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"API error {status}: {body}")
        self.status = status
        self.body = body


class DecodeError(Trading212Error):
    """
    Raised when a successful response body is not valid JSON or does not
    match the expected model.
    """

    def __init__(self, message: str, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.body = body
