"""Domain models package."""

from .finance import (
    AccountBalance,
    AccountDayBalance,
    CashflowHistory,
    CategoryAmount,
    CategoryBreakdown,
    MonthlyCashflow,
    NetWorthPoint,
    NetWorthSummary,
)
from .open_finance import Account, BalanceSnapshot, Transaction
from .recurring import (
    DirectDebit,
    RecurringPaymentsOverview,
    StandingOrder,
    UpcomingPayment,
)

__all__ = [
    "Account",
    "AccountBalance",
    "AccountDayBalance",
    "BalanceSnapshot",
    "CashflowHistory",
    "CategoryAmount",
    "CategoryBreakdown",
    "DirectDebit",
    "MonthlyCashflow",
    "NetWorthPoint",
    "NetWorthSummary",
    "RecurringPaymentsOverview",
    "StandingOrder",
    "Transaction",
    "UpcomingPayment",
]
