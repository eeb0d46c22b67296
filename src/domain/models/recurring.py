"""Domain models for standing orders, direct debits and their projections."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import ACTIVE_STATUS


@dataclass(frozen=True)
class StandingOrder:
    """Customer-instructed recurring payment.

    Attributes:
        standing_order_id: Identifier of the standing order.
        account_id: Account the payments leave from.
        frequency: Open Finance frequency code (Monthly, IntervalDay:7, ...).
        status: StandingOrderStatusCode (Active, Inactive).
        first_payment_date_time: Instant of the first payment.
        next_payment_date_time: Instant of the next payment, when reported.
        amount: Unsigned amount of each payment.
        currency: Currency of the amount.
    """

    standing_order_id: str
    account_id: str
    frequency: str
    status: str
    first_payment_date_time: datetime
    next_payment_date_time: datetime | None
    amount: Decimal
    currency: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS

    @property
    def display_name(self) -> str:
        return f"Standing Order #{self.standing_order_id[:8]}"


@dataclass(frozen=True)
class DirectDebit:
    """Merchant-initiated recurring collection."""

    direct_debit_id: str
    account_id: str
    name: str
    frequency: str
    status: str
    previous_payment_date_time: datetime | None
    previous_payment_amount: Decimal
    currency: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS


@dataclass(frozen=True)
class UpcomingPayment:
    """One projected payment date of a recurring instruction."""

    payment_id: str
    name: str
    account_id: str
    day: date
    amount: Decimal
    currency: str
    kind: str
    frequency: str


@dataclass(frozen=True)
class RecurringPaymentsOverview:
    """Recurring instructions with their active counts and projections.

    Attributes:
        direct_debits: Direct debits after the status filter, active first.
        standing_orders: Standing orders after the status filter, active first.
        active_direct_debits: Active direct debits before filtering.
        total_direct_debits: All direct debits before filtering.
        active_standing_orders: Active standing orders before filtering.
        total_standing_orders: All standing orders before filtering.
        upcoming: Projected payments from today on, earliest first.
    """

    direct_debits: list[DirectDebit]
    standing_orders: list[StandingOrder]
    active_direct_debits: int
    total_direct_debits: int
    active_standing_orders: int
    total_standing_orders: int
    upcoming: list[UpcomingPayment]


__all__ = [
    "DirectDebit",
    "RecurringPaymentsOverview",
    "StandingOrder",
    "UpcomingPayment",
]
