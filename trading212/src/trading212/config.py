# trading212/config.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import ConfigError
from .secrets_manager import BaseSecretsManager, get_default_secrets_manager

API_PREFIX = "/api/v0"
DEFAULT_TIMEOUT = 30.0


class Environment(str, Enum):
    """Known Trading 212 API hosts."""

    DEMO = "https://demo.trading212.com"  # paper trading
    LIVE = "https://live.trading212.com"  # real money


def resolve_base_url(env: Union[Environment, str]) -> str:
    """
    Return the URL prefix for ``env``.

    Either an :class:`Environment` member, its short name (``"demo"`` /
    ``"live"``) or any other string, which is used verbatim as an
    override (for example the address of a local stand-in server).
    """
    if isinstance(env, Environment):
        return env.value
    lowered = env.strip().lower()
    if lowered in ("demo", "paper"):
        return Environment.DEMO.value
    if lowered == "live":
        return Environment.LIVE.value
    return env


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for a :class:`~trading212.client.Trading212Client`.

    Instances are immutable; the credentials stay fixed for the lifetime
    of the client that uses them.
    """
    api_key: str
    api_secret: str
    base_url: str = Environment.DEMO.value
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout!r}")

    def __repr__(self) -> str:
        # Never leak credentials into logs or tracebacks
        return (
            f"ClientConfig(api_key={_mask(self.api_key)!r}, api_secret='***', "
            f"base_url={self.base_url!r}, timeout={self.timeout})"
        )

    @classmethod
    def from_env(
        cls,
        prefix: str = "TRADING212_",
        secrets: Optional[BaseSecretsManager] = None,
    ) -> "ClientConfig":
        """
        Build a ClientConfig from environment variables.

        Expected variables (shown with the default prefix):
          - TRADING212_API_KEY      (or TRADING212_API_KEY_FILE)
          - TRADING212_API_SECRET   (or TRADING212_API_SECRET_FILE)
          - TRADING212_ENV          (default: "demo"; "demo" or "live")
          - TRADING212_BASE_URL     (optional override, wins over TRADING212_ENV)
          - TRADING212_TIMEOUT      (default: "30", seconds)

        Example (environment):
            export TRADING212_API_KEY=...
            export TRADING212_API_SECRET_FILE=/run/secrets/t212_secret
            export TRADING212_ENV=demo
        """
        secrets = secrets or get_default_secrets_manager()
        api_key = secrets.get_secret(f"{prefix}API_KEY")
        api_secret = secrets.get_secret(f"{prefix}API_SECRET")

        missing = []
        if not (api_key or "").strip():
            missing.append(f"{prefix}API_KEY")
        if not (api_secret or "").strip():
            missing.append(f"{prefix}API_SECRET")
        if missing:
            raise ConfigError("Missing Trading 212 credentials: " + ", ".join(missing))

        base_url = secrets.get_secret(f"{prefix}BASE_URL")
        if not base_url:
            base_url = resolve_base_url(secrets.get_secret(f"{prefix}ENV") or "demo")

        timeout_str = secrets.get_secret(f"{prefix}TIMEOUT")
        try:
            timeout = float(timeout_str) if timeout_str else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ConfigError(f"{prefix}TIMEOUT must be a number, got {timeout_str!r}") from exc

        return cls(api_key=api_key, api_secret=api_secret, base_url=base_url, timeout=timeout)


def _mask(value: str) -> str:
    if len(value) <= 4:
        return "***"
    return value[:4] + "***"
