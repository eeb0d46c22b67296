"""Application use cases package."""

from .get_account_history import AccountDayBalance, GetAccountHistoryUseCase
from .get_cashflow import CashflowHistory, GetCashflowUseCase
from .get_category_breakdown import (
    CategoryBreakdown,
    GetCategoryBreakdownUseCase,
)
from .get_net_worth_history import GetNetWorthHistoryUseCase, NetWorthPoint
from .get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummary,
)
from .get_recurring_payments import (
    GetRecurringPaymentsUseCase,
    RecurringPaymentsOverview,
)

__all__ = [
    "AccountDayBalance",
    "CashflowHistory",
    "CategoryBreakdown",
    "GetAccountHistoryUseCase",
    "GetCashflowUseCase",
    "GetCategoryBreakdownUseCase",
    "GetNetWorthHistoryUseCase",
    "GetNetWorthSummaryUseCase",
    "GetRecurringPaymentsUseCase",
    "NetWorthPoint",
    "NetWorthSummary",
    "RecurringPaymentsOverview",
]
