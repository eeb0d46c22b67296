"""Domain models for derived balance and net worth views."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AccountDayBalance:
    """Signed balance of one account at the end of a calendar day."""

    day: date
    balance: Decimal


@dataclass(frozen=True)
class NetWorthPoint:
    """Aggregated net worth figures for a calendar day.

    Attributes:
        day: Calendar day of the point.
        net_worth: Assets minus debt.
        assets: Sum of positive account balances.
        debt: Sum of absolute values of non-positive account balances.
    """

    day: date
    net_worth: Decimal
    assets: Decimal
    debt: Decimal


@dataclass(frozen=True)
class AccountBalance:
    """Current resolved balance of an account."""

    account_id: str
    name: str
    balance: Decimal
    currency_code: str


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of current net worth figures.

    Attributes:
        asset_total: Sum of positive account balances.
        liability_total: Sum of absolute non-positive account balances.
        net_worth: Assets minus liabilities.
        currency_code: Currency the totals are reported in.
        accounts: Per-account balances that contributed to the totals.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str
    accounts: list[AccountBalance]


@dataclass(frozen=True)
class MonthlyCashflow:
    """Income and expense totals for a calendar month."""

    month: date
    income: Decimal
    expense: Decimal

    @property
    def net(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class CashflowHistory:
    """Monthly cashflow series with totals over the whole window."""

    months: list[MonthlyCashflow]
    total_income: Decimal
    total_expense: Decimal
    savings_rate: Decimal

    @property
    def net_savings(self) -> Decimal:
        """Return total income minus total expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class CategoryAmount:
    """Total and share of one spending or income category."""

    name: str
    amount: Decimal
    count: int
    percentage: Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """Per-category expense and income totals for one calendar month.

    Attributes:
        month: First day of the month covered.
        expenses: Expense categories, largest amount first.
        income: Income categories, largest amount first.
        total_expense: Sum of all expenses in the month.
        total_income: Sum of all income in the month.
    """

    month: date
    expenses: list[CategoryAmount]
    income: list[CategoryAmount]
    total_expense: Decimal
    total_income: Decimal


__all__ = [
    "AccountBalance",
    "AccountDayBalance",
    "CashflowHistory",
    "CategoryAmount",
    "CategoryBreakdown",
    "MonthlyCashflow",
    "NetWorthPoint",
    "NetWorthSummary",
]
