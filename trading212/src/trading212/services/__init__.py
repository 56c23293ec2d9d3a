"""
Endpoint groups of the Trading 212 equity API.

Each service wraps a shared :class:`~trading212.clients.HttpClient` and
maps one endpoint family onto typed coroutines.
"""

from .account import AccountService  # noqa: F401
from .history import HistoryService  # noqa: F401
from .instruments import InstrumentsService  # noqa: F401
from .orders import OrdersService  # noqa: F401
from .portfolio import PortfolioService  # noqa: F401
from .reports import ReportsService  # noqa: F401
