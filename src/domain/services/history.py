"""Domain services reconstructing per-account balance history."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.models import AccountDayBalance, Transaction
from src.domain.policies import (
    TransactionPredicate,
    is_qualifying_transaction,
)
from src.utils.date_utils import iter_days_descending, utc_today
from src.utils.decimal_utils import round_money


def group_daily_deltas(
    transactions: Iterable[Transaction],
) -> dict[date, Decimal]:
    """Return the net signed amount of the transactions for each UTC day."""
    deltas: dict[date, Decimal] = {}
    for transaction in transactions:
        day = transaction.booking_day
        deltas[day] = deltas.get(day, Decimal("0")) + transaction.signed_amount
    return deltas


def reconstruct_history(
    account_id: str,
    current_balance: Decimal,
    transactions: Iterable[Transaction],
    *,
    today: date | None = None,
    predicate: TransactionPredicate = is_qualifying_transaction,
) -> list[AccountDayBalance]:
    """Rebuild the day-by-day balance of an account from today backwards.

    The current balance already reflects every transaction up to today, so
    walking backwards and subtracting each day's net amount yields the
    balance as it stood before that day.

    Args:
        account_id: Account to reconstruct.
        current_balance: Signed balance as of today.
        transactions: Ledger entries, possibly for other accounts too.
        today: Last day of the series; defaults to the current UTC day.
        predicate: Policy selecting the transactions that move the balance.

    Returns:
        list[AccountDayBalance]: One entry per day from the earliest
        qualifying transaction to today, oldest first.
    """
    end = today or utc_today()
    qualifying = [
        transaction
        for transaction in transactions
        if transaction.account_id == account_id and predicate(transaction)
    ]
    if not qualifying:
        return [AccountDayBalance(day=end, balance=round_money(current_balance))]

    deltas = group_daily_deltas(qualifying)
    start = min(deltas)
    if start > end:
        return [AccountDayBalance(day=end, balance=round_money(current_balance))]

    history: list[AccountDayBalance] = []
    balance = current_balance
    for day in iter_days_descending(end, start):
        history.append(AccountDayBalance(day=day, balance=round_money(balance)))
        balance -= deltas.get(day, Decimal("0"))

    history.reverse()
    return history


__all__ = ["group_daily_deltas", "reconstruct_history"]
