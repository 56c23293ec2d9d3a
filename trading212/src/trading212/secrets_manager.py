"""
secrets_manager
================

Loading of API credentials without hard-coding them.  A secret is read
from the environment, or from a file whose path is given by the
``{name}_FILE`` environment variable.  Mounting credentials as files
(Docker / Kubernetes secrets) keeps them out of the process environment.
To pull credentials from another store, subclass ``BaseSecretsManager``
and override ``get_secret``.

Example usage::

    from trading212.secrets_manager import get_default_secrets_manager

    secrets = get_default_secrets_manager()
    api_key = secrets.get_secret("TRADING212_API_KEY")
    api_secret = secrets.get_secret("TRADING212_API_SECRET")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class BaseSecretsManager:
    """Abstract base class for secrets managers."""

    def get_secret(self, name: str) -> Optional[str]:  # pragma: no cover - override
        """Return the secret value for ``name`` or ``None`` if unavailable."""
        raise NotImplementedError


class EnvFileSecretsManager(BaseSecretsManager):
    """
    Loads secrets from environment variables and optional ``*_FILE`` paths.

    If ``{name}_FILE`` is set, the secret is read from that file and
    surrounding whitespace is stripped.  When both ``{name}`` and
    ``{name}_FILE`` are set, the file takes precedence.  An unreadable
    file yields ``None``.
    """

    def __init__(self, base_path: Optional[Path] = None) -> None:
        #: Optional base directory to resolve relative file paths.
        self.base_path = base_path
        self._cache: Dict[str, Optional[str]] = {}

    def get_secret(self, name: str) -> Optional[str]:
        if name in self._cache:
            return self._cache[name]

        file_path = os.getenv(f"{name}_FILE")
        if file_path:
            path = Path(file_path)
            if not path.is_absolute() and self.base_path is not None:
                path = self.base_path / path
            try:
                value: Optional[str] = path.read_text(encoding="utf-8").strip()
                logger.debug("Loaded %s from file", name)
            except OSError as exc:
                logger.warning("Failed to read secret file for %s: %s", name, exc)
                value = None
        else:
            value = os.getenv(name)

        self._cache[name] = value
        return value


def get_default_secrets_manager() -> BaseSecretsManager:
    """
    Return the default secrets manager: environment variables and
    ``*_FILE`` paths, with relative paths resolved against
    ``SECRETS_BASE_PATH`` when it is set.
    """
    base = os.getenv("SECRETS_BASE_PATH")
    return EnvFileSecretsManager(base_path=Path(base) if base else None)


__all__ = [
    "BaseSecretsManager",
    "EnvFileSecretsManager",
    "get_default_secrets_manager",
]
