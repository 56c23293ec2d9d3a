"""
Domain models for Trading 212 entities using Pydantic.  These models
validate the JSON returned by the API and serialise order and report
requests.  Field names are snake_case in Python and camelCase on the
wire; models accept either form on input and ignore unknown keys so
that additions on the server side do not break decoding.

Enumerated fields on responses accept values outside the known set as
plain strings for the same reason.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from .query import format_timestamp


class T212Model(BaseModel):
    """Base model: camelCase aliases, population by name, unknown keys ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class OrderStatus(str, Enum):
    LOCAL = "LOCAL"
    UNCONFIRMED = "UNCONFIRMED"
    CONFIRMED = "CONFIRMED"
    NEW = "NEW"
    CANCELLING = "CANCELLING"
    CANCELLED = "CANCELLED"
    PARTIALLY_FILLED = "PARTIALLY_FILLED"
    FILLED = "FILLED"
    REJECTED = "REJECTED"
    REPLACING = "REPLACING"
    REPLACED = "REPLACED"


class OrderStrategy(str, Enum):
    QUANTITY = "QUANTITY"
    VALUE = "VALUE"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    STOP = "STOP"
    MARKET = "MARKET"
    STOP_LIMIT = "STOP_LIMIT"


class TimeValidity(str, Enum):
    """Order lifetime: expires at the end of the trading day, or stays until cancelled."""

    DAY = "DAY"
    GOOD_TILL_CANCEL = "GOOD_TILL_CANCEL"


class InstrumentType(str, Enum):
    CRYPTOCURRENCY = "CRYPTOCURRENCY"
    ETF = "ETF"
    FOREX = "FOREX"
    FUTURES = "FUTURES"
    INDEX = "INDEX"
    STOCK = "STOCK"
    WARRANT = "WARRANT"
    CRYPTO = "CRYPTO"
    CVR = "CVR"
    CORPACT = "CORPACT"


class TimeEventType(str, Enum):
    OPEN = "OPEN"
    CLOSE = "CLOSE"
    BREAK_START = "BREAK_START"
    BREAK_END = "BREAK_END"
    PRE_MARKET_OPEN = "PRE_MARKET_OPEN"
    AFTER_HOURS_OPEN = "AFTER_HOURS_OPEN"
    AFTER_HOURS_CLOSE = "AFTER_HOURS_CLOSE"
    OVERNIGHT_OPEN = "OVERNIGHT_OPEN"


class ReportStatus(str, Enum):
    QUEUED = "Queued"
    PROCESSING = "Processing"
    RUNNING = "Running"
    CANCELED = "Canceled"
    FAILED = "Failed"
    FINISHED = "Finished"


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


class AccountInfo(T212Model):
    """Account metadata."""

    id: int
    currency_code: str = Field(..., description="Account currency, e.g. GBP")


class AccountCash(T212Model):
    """Cash balances in the account currency."""

    free: float = 0.0
    invested: float = 0.0
    result: float = 0.0
    total: float = 0.0


class AccountSummary(AccountInfo):
    """Account metadata and cash balances in one snapshot."""

    cash: Optional[AccountCash] = None


# ---------------------------------------------------------------------------
# Orders and positions
# ---------------------------------------------------------------------------


class Instrument(T212Model):
    ticker: str
    name: Optional[str] = None
    isin: Optional[str] = None
    currency: Optional[str] = None


class Order(T212Model):
    """A pending or historical order as reported by the broker."""

    id: int
    ticker: Optional[str] = None
    type: Optional[Union[OrderType, str]] = None
    side: Optional[Union[OrderSide, str]] = None
    status: Optional[Union[OrderStatus, str]] = None
    strategy: Optional[Union[OrderStrategy, str]] = None
    quantity: Optional[float] = None
    value: Optional[float] = None
    filled_quantity: Optional[float] = None
    filled_value: Optional[float] = None
    limit_price: Optional[float] = None
    stop_price: Optional[float] = None
    time_in_force: Optional[Union[TimeValidity, str]] = None
    extended_hours: bool = False
    currency: Optional[str] = None
    initiated_from: Optional[str] = None
    instrument: Optional[Instrument] = None
    created_at: Optional[datetime] = None


class Position(T212Model):
    """An open position."""

    ticker: str
    quantity: float
    average_price: Optional[float] = None
    current_price: Optional[float] = None
    ppl: Optional[float] = None
    fx_ppl: Optional[float] = None
    pie_quantity: Optional[float] = None
    max_buy: Optional[float] = None
    max_sell: Optional[float] = None
    frontend: Optional[str] = None
    initial_fill_date: Optional[datetime] = None


class MarketOrderRequest(T212Model):
    """Market order.  Positive quantity buys, negative quantity sells."""

    ticker: str = Field(..., description="Instrument ticker, e.g. AAPL_US_EQ")
    quantity: float
    extended_hours: bool = False


class LimitOrderRequest(T212Model):
    ticker: str
    quantity: float
    limit_price: float = Field(..., gt=0)
    time_validity: TimeValidity = TimeValidity.DAY


class StopOrderRequest(T212Model):
    ticker: str
    quantity: float
    stop_price: float = Field(..., gt=0)
    time_validity: TimeValidity = TimeValidity.DAY


class StopLimitOrderRequest(T212Model):
    ticker: str
    quantity: float
    limit_price: float = Field(..., gt=0)
    stop_price: float = Field(..., gt=0)
    time_validity: TimeValidity = TimeValidity.DAY


# ---------------------------------------------------------------------------
# Instrument metadata
# ---------------------------------------------------------------------------


class TradableInstrument(T212Model):
    ticker: str
    name: Optional[str] = None
    short_name: Optional[str] = None
    isin: Optional[str] = None
    currency_code: Optional[str] = None
    type: Optional[Union[InstrumentType, str]] = None
    extended_hours: bool = False
    max_open_quantity: Optional[float] = None
    working_schedule_id: Optional[int] = None
    added_on: Optional[datetime] = None


class TimeEvent(T212Model):
    date: datetime
    type: Union[TimeEventType, str]


class WorkingSchedule(T212Model):
    id: int
    time_events: List[TimeEvent] = Field(default_factory=list)


class Exchange(T212Model):
    id: int
    name: str
    working_schedules: List[WorkingSchedule] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------

ItemT = TypeVar("ItemT")


class Page(T212Model, Generic[ItemT]):
    """
    One page of a cursor-paginated listing.

    ``next_page_path`` is a request path (query included) for the next
    page, or ``None`` on the last page.
    """

    items: List[ItemT] = Field(default_factory=list)
    next_page_path: Optional[str] = None


class Tax(T212Model):
    name: Optional[str] = None
    currency: Optional[str] = None
    quantity: Optional[float] = None
    charged_at: Optional[datetime] = None


class FillWalletImpact(T212Model):
    currency: Optional[str] = None
    fx_rate: Optional[float] = None
    net_value: Optional[float] = None
    realised_profit_loss: Optional[float] = None
    taxes: List[Tax] = Field(default_factory=list)


class Fill(T212Model):
    id: int
    price: Optional[float] = None
    quantity: Optional[float] = None
    filled_at: Optional[datetime] = None
    trading_method: Optional[str] = None
    type: Optional[str] = None
    wallet_impact: Optional[FillWalletImpact] = None


class HistoricalOrder(T212Model):
    order: Order
    fill: Optional[Fill] = None


class HistoryDividendItem(T212Model):
    ticker: str
    amount: float
    amount_in_euro: Optional[float] = None
    currency: Optional[str] = None
    ticker_currency: Optional[str] = None
    gross_amount_per_share: Optional[float] = None
    quantity: Optional[float] = None
    reference: Optional[str] = None
    type: Optional[str] = None
    paid_on: Optional[datetime] = None
    instrument: Optional[Instrument] = None


class HistoryTransactionItem(T212Model):
    amount: float
    currency: Optional[str] = None
    date_time: Optional[datetime] = None
    reference: Optional[str] = None
    type: Optional[str] = None


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


class ReportDataIncluded(T212Model):
    include_dividends: bool = True
    include_interest: bool = True
    include_orders: bool = True
    include_transactions: bool = True


class ReportRequest(T212Model):
    """Request for a CSV export covering ``[time_from, time_to]``."""

    data_included: ReportDataIncluded = Field(default_factory=ReportDataIncluded)
    time_from: datetime
    time_to: datetime

    @field_serializer("time_from", "time_to")
    def serialize_bound(self, value: datetime) -> str:
        # Naive bounds are UTC, as in query parameters
        return format_timestamp(value)


class EnqueuedReport(T212Model):
    report_id: int


class Report(T212Model):
    report_id: int
    status: Union[ReportStatus, str]
    data_included: Optional[ReportDataIncluded] = None
    download_link: Optional[str] = None
    time_from: Optional[datetime] = None
    time_to: Optional[datetime] = None
