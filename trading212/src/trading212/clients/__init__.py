"""
Transport-level clients for the Trading 212 API.

``HttpClient`` is the authenticated request pipeline every service goes
through; ``auth_providers`` holds the header builders it delegates to.
"""

from .auth_providers import AuthProvider, BasicAuthProvider  # noqa: F401
from .http_client import HttpClient  # noqa: F401
