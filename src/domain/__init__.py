"""Domain package for business rules and core models."""

from .constants import BALANCE_TYPE_PRIORITY, DEFAULT_NET_WORTH_WINDOW_MONTHS
from .errors import FixtureNotFoundError, InvalidRecordError
from .models import (
    Account,
    AccountBalance,
    AccountDayBalance,
    BalanceSnapshot,
    CashflowHistory,
    MonthlyCashflow,
    NetWorthPoint,
    NetWorthSummary,
    Transaction,
)
from .policies import build_transaction_predicate, is_qualifying_transaction
from .services import (
    aggregate_net_worth,
    compute_monthly_cashflow,
    compute_net_worth_summary,
    reconstruct_history,
    resolve_balance,
    select_balance_snapshot,
    validate_balance_sign,
)

__all__ = [
    "Account",
    "AccountBalance",
    "AccountDayBalance",
    "BalanceSnapshot",
    "CashflowHistory",
    "MonthlyCashflow",
    "NetWorthPoint",
    "NetWorthSummary",
    "Transaction",
    "BALANCE_TYPE_PRIORITY",
    "DEFAULT_NET_WORTH_WINDOW_MONTHS",
    "FixtureNotFoundError",
    "InvalidRecordError",
    "aggregate_net_worth",
    "build_transaction_predicate",
    "compute_monthly_cashflow",
    "compute_net_worth_summary",
    "is_qualifying_transaction",
    "reconstruct_history",
    "resolve_balance",
    "select_balance_snapshot",
    "validate_balance_sign",
]
