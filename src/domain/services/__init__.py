"""Domain services package."""

from .balances import resolve_balance, select_balance_snapshot
from .finance import (
    aggregate_net_worth,
    compute_category_breakdown,
    compute_monthly_cashflow,
    compute_net_worth_summary,
)
from .history import group_daily_deltas, reconstruct_history
from .recurring import (
    build_upcoming_payments,
    filter_by_status,
    order_active_first,
    parse_frequency,
    project_next_payments,
    summarize_recurring_payments,
)
from .validation import validate_balance_sign

__all__ = [
    "aggregate_net_worth",
    "build_upcoming_payments",
    "compute_category_breakdown",
    "compute_monthly_cashflow",
    "compute_net_worth_summary",
    "filter_by_status",
    "group_daily_deltas",
    "order_active_first",
    "parse_frequency",
    "project_next_payments",
    "reconstruct_history",
    "resolve_balance",
    "select_balance_snapshot",
    "summarize_recurring_payments",
    "validate_balance_sign",
]
