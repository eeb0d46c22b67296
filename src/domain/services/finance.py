"""Domain services for net worth, cashflow and category aggregates."""

from collections.abc import Collection, Iterable, Mapping
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    BOOKED_STATUS,
    CREDIT,
    DEFAULT_NET_WORTH_WINDOW_MONTHS,
    UNCATEGORIZED,
)
from src.domain.models import (
    Account,
    AccountBalance,
    AccountDayBalance,
    BalanceSnapshot,
    CashflowHistory,
    CategoryAmount,
    CategoryBreakdown,
    MonthlyCashflow,
    NetWorthPoint,
    NetWorthSummary,
    Transaction,
)
from src.domain.services.balances import resolve_balance
from src.domain.services.validation import validate_balance_sign
from src.utils.date_utils import month_start, subtract_months, utc_today
from src.utils.decimal_utils import round_money


def aggregate_net_worth(
    histories: Mapping[str, list[AccountDayBalance]],
    *,
    account_ids: Collection[str] | None = None,
    today: date | None = None,
    window_months: int = DEFAULT_NET_WORTH_WINDOW_MONTHS,
) -> list[NetWorthPoint]:
    """Merge per-account histories into a daily net worth series.

    Args:
        histories: Reconstructed history keyed by account id.
        account_ids: Accounts included in net worth; all when omitted.
        today: Reference day for the trailing window.
        window_months: Number of calendar months kept before ``today``.

    Returns:
        list[NetWorthPoint]: Points sorted by day, one per day, restricted to
        the trailing window.
    """
    included = {
        account_id: history
        for account_id, history in histories.items()
        if account_ids is None or account_id in account_ids
    }
    by_day = {
        account_id: {entry.day: entry.balance for entry in history}
        for account_id, history in included.items()
    }
    all_days = sorted({day for balances in by_day.values() for day in balances})

    cutoff = subtract_months(today or utc_today(), window_months)
    points: list[NetWorthPoint] = []
    for day in all_days:
        if day < cutoff:
            continue
        assets = Decimal("0")
        debt = Decimal("0")
        for balances in by_day.values():
            balance = balances.get(day)
            if balance is None:
                continue
            if balance > 0:
                assets += balance
            else:
                debt += abs(balance)
        assets = round_money(assets)
        debt = round_money(debt)
        points.append(
            NetWorthPoint(
                day=day,
                net_worth=assets - debt,
                assets=assets,
                debt=debt,
            )
        )
    return points


def compute_net_worth_summary(
    accounts: Iterable[Account],
    snapshots: Iterable[BalanceSnapshot],
    *,
    currency_code: str,
    included_account_ids: Collection[str] | None = None,
    logger: Logger | None = None,
) -> NetWorthSummary:
    """Compute current net worth totals from resolved balances.

    Args:
        accounts: Accounts known to the dashboard.
        snapshots: Balance snapshots for all accounts.
        currency_code: Currency the totals are reported in.
        included_account_ids: Accounts included in net worth; all if omitted.
        logger: Optional logger used for data warnings.

    Returns:
        NetWorthSummary: Asset, liability and net worth totals.
    """
    snapshot_list = list(snapshots)
    asset_total = Decimal("0")
    liability_total = Decimal("0")
    balances: list[AccountBalance] = []
    for account in accounts:
        if (
            included_account_ids is not None
            and account.account_id not in included_account_ids
        ):
            continue
        balance = round_money(
            resolve_balance(account.account_id, snapshot_list, logger=logger)
        )
        if logger is not None:
            validate_balance_sign(account, balance, logger)
        if balance > 0:
            asset_total += balance
        else:
            liability_total += abs(balance)
        balances.append(
            AccountBalance(
                account_id=account.account_id,
                name=account.display_name,
                balance=balance,
                currency_code=account.currency,
            )
        )

    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        currency_code=currency_code,
        accounts=balances,
    )


def compute_monthly_cashflow(
    transactions: Iterable[Transaction],
    *,
    account_ids: Collection[str] | None = None,
    today: date | None = None,
    months: int = DEFAULT_NET_WORTH_WINDOW_MONTHS,
) -> CashflowHistory:
    """Compute income and expense per month over a trailing window.

    Credits of Booked transactions count as income and debits as expense.
    Every month of the window is reported, including months without
    activity.

    Args:
        transactions: Ledger entries for all accounts.
        account_ids: Accounts to include; all when omitted.
        today: Reference day; its month is the last month of the window.
        months: Number of months in the window.

    Returns:
        CashflowHistory: Months oldest first, with totals and savings rate.
    """
    last_month = month_start(today or utc_today())
    month_keys = [
        subtract_months(last_month, offset)
        for offset in range(months - 1, -1, -1)
    ]
    income = {month: Decimal("0") for month in month_keys}
    expense = {month: Decimal("0") for month in month_keys}

    for transaction in transactions:
        if transaction.status != BOOKED_STATUS:
            continue
        if account_ids is not None and transaction.account_id not in account_ids:
            continue
        month = month_start(transaction.booking_day)
        if month not in income:
            continue
        if transaction.credit_debit_indicator == CREDIT:
            income[month] += transaction.amount
        else:
            expense[month] += transaction.amount

    series = [
        MonthlyCashflow(
            month=month,
            income=round_money(income[month]),
            expense=round_money(expense[month]),
        )
        for month in month_keys
    ]
    total_income = sum((item.income for item in series), Decimal("0"))
    total_expense = sum((item.expense for item in series), Decimal("0"))
    savings_rate = Decimal("0")
    if total_income > 0:
        savings_rate = round_money(
            (total_income - total_expense) / total_income * 100
        )
    return CashflowHistory(
        months=series,
        total_income=total_income,
        total_expense=total_expense,
        savings_rate=savings_rate,
    )


def _category_key(transaction: Transaction) -> str:
    return (
        transaction.category
        or transaction.sub_transaction_type
        or transaction.transaction_type
        or UNCATEGORIZED
    )


def _rank_categories(
    totals: Mapping[str, Decimal],
    counts: Mapping[str, int],
    grand_total: Decimal,
) -> list[CategoryAmount]:
    ranked = [
        CategoryAmount(
            name=name,
            amount=round_money(amount),
            count=counts[name],
            percentage=(
                round_money(amount / grand_total * 100)
                if grand_total > 0
                else Decimal("0")
            ),
        )
        for name, amount in totals.items()
    ]
    ranked.sort(key=lambda item: (-item.amount, item.name))
    return ranked


def compute_category_breakdown(
    transactions: Iterable[Transaction],
    *,
    month: date,
    account_ids: Collection[str] | None = None,
) -> CategoryBreakdown:
    """Group one month of booked transactions by category.

    The category is the transaction's own category, then its sub
    transaction type, then its transaction type, and ``Uncategorized`` when
    none is set. Credits are income and debits are expenses.

    Args:
        transactions: Ledger entries for all accounts.
        month: Any day of the month to break down.
        account_ids: Accounts to include; all when omitted.

    Returns:
        CategoryBreakdown: Categories per side, largest amount first, with
        each category's share of its side's total.
    """
    target = month_start(month)
    totals: dict[str, dict[str, Decimal]] = {"income": {}, "expense": {}}
    counts: dict[str, dict[str, int]] = {"income": {}, "expense": {}}

    for transaction in transactions:
        if transaction.status != BOOKED_STATUS:
            continue
        if account_ids is not None and transaction.account_id not in account_ids:
            continue
        if month_start(transaction.booking_day) != target:
            continue
        side = "expense"
        if transaction.credit_debit_indicator == CREDIT:
            side = "income"
        key = _category_key(transaction)
        totals[side][key] = (
            totals[side].get(key, Decimal("0")) + transaction.amount
        )
        counts[side][key] = counts[side].get(key, 0) + 1

    total_income = sum(totals["income"].values(), Decimal("0"))
    total_expense = sum(totals["expense"].values(), Decimal("0"))
    return CategoryBreakdown(
        month=target,
        expenses=_rank_categories(
            totals["expense"], counts["expense"], total_expense
        ),
        income=_rank_categories(
            totals["income"], counts["income"], total_income
        ),
        total_expense=round_money(total_expense),
        total_income=round_money(total_income),
    )


__all__ = [
    "aggregate_net_worth",
    "compute_category_breakdown",
    "compute_monthly_cashflow",
    "compute_net_worth_summary",
]
