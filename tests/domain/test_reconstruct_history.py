"""Tests for the backward balance history reconstruction."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from src.domain.models import AccountDayBalance, Transaction
from src.domain.policies import build_transaction_predicate
from src.domain.services.history import (
    group_daily_deltas,
    reconstruct_history,
)

TODAY = date(2025, 11, 13)


def _tx(
    day: date,
    amount: str,
    indicator: str,
    *,
    sub_type: str = "Purchase",
    status: str = "Booked",
    account_id: str = "acc-x",
    hour: int = 10,
    tx_id: str = "tx",
) -> Transaction:
    return Transaction(
        transaction_id=tx_id,
        account_id=account_id,
        date_time=datetime(
            day.year, day.month, day.day, hour, 0, tzinfo=timezone.utc
        ),
        amount=Decimal(amount),
        credit_debit_indicator=indicator,
        status=status,
        transaction_type="POS",
        sub_transaction_type=sub_type,
    )


def test_walks_backwards_from_current_balance() -> None:
    """Each day records its closing balance before the day is undone."""
    transactions = [
        _tx(TODAY - timedelta(days=2), "200", "Credit", sub_type="Deposit"),
        _tx(TODAY - timedelta(days=1), "50", "Debit"),
    ]

    history = reconstruct_history(
        "acc-x", Decimal("5000.00"), transactions, today=TODAY
    )

    assert history == [
        AccountDayBalance(TODAY - timedelta(days=2), Decimal("5050.00")),
        AccountDayBalance(TODAY - timedelta(days=1), Decimal("5000.00")),
        AccountDayBalance(TODAY, Decimal("5000.00")),
    ]


def test_single_deposit_is_undone_before_its_day() -> None:
    """The day before a deposit shows the balance minus the deposit."""
    deposit_day = TODAY - timedelta(days=5)
    transactions = [
        _tx(deposit_day, "100", "Credit", sub_type="Deposit"),
        _tx(deposit_day - timedelta(days=3), "20", "Debit"),
    ]

    history = reconstruct_history(
        "acc-x", Decimal("250.00"), transactions, today=TODAY
    )
    by_day = {entry.day: entry.balance for entry in history}

    assert by_day[deposit_day] == Decimal("250.00")
    assert by_day[deposit_day - timedelta(days=1)] == Decimal("150.00")
    assert history[0] == AccountDayBalance(
        deposit_day - timedelta(days=3), Decimal("150.00")
    )


def test_deposit_as_only_transaction_starts_the_window() -> None:
    """The window opens on the earliest qualifying day."""
    deposit_day = TODAY - timedelta(days=5)
    transactions = [_tx(deposit_day, "100", "Credit", sub_type="Deposit")]

    history = reconstruct_history(
        "acc-x", Decimal("250.00"), transactions, today=TODAY
    )

    assert history[0].day == deposit_day
    assert len(history) == 6
    assert all(entry.balance == Decimal("250.00") for entry in history)


def test_series_covers_every_day_without_gaps() -> None:
    """One entry per day from earliest transaction to today, ascending."""
    start = TODAY - timedelta(days=40)
    transactions = [
        _tx(start, "10", "Debit"),
        _tx(TODAY - timedelta(days=3), "15", "Debit"),
    ]

    history = reconstruct_history(
        "acc-x", Decimal("100"), transactions, today=TODAY
    )

    assert len(history) == 41
    assert [entry.day for entry in history] == [
        start + timedelta(days=offset) for offset in range(41)
    ]
    assert history[-1].balance == Decimal("100.00")


def test_same_day_transactions_are_netted() -> None:
    """Multiple transactions on one day are summed before subtraction."""
    day = TODAY - timedelta(days=1)
    transactions = [
        _tx(day, "30.10", "Debit", hour=8),
        _tx(day, "100.00", "Credit", sub_type="Deposit", hour=9),
        _tx(day, "19.90", "Debit", hour=20),
    ]

    history = reconstruct_history(
        "acc-x", Decimal("1000"), transactions, today=TODAY
    )

    assert [entry.balance for entry in history] == [
        Decimal("1000.00"),
        Decimal("1000.00"),
    ]
    assert group_daily_deltas(transactions) == {day: Decimal("50.00")}


def test_non_qualifying_transactions_are_ignored() -> None:
    """Pending, other sub types and other accounts do not move the balance."""
    transactions = [
        _tx(TODAY - timedelta(days=3), "500", "Debit", status="Pending"),
        _tx(TODAY - timedelta(days=4), "500", "Debit", sub_type="MoneyTransfer"),
        _tx(TODAY - timedelta(days=5), "500", "Debit", account_id="acc-y"),
    ]

    history = reconstruct_history(
        "acc-x", Decimal("12.345"), transactions, today=TODAY
    )

    assert history == [AccountDayBalance(TODAY, Decimal("12.35"))]


def test_custom_predicate_widens_the_ledger() -> None:
    """A collaborator policy can admit more sub types."""
    predicate = build_transaction_predicate(
        sub_types=("Purchase", "Deposit", "MoneyTransfer"),
    )
    transactions = [
        _tx(TODAY - timedelta(days=1), "40", "Debit", sub_type="MoneyTransfer"),
        _tx(TODAY, "40", "Debit", sub_type="MoneyTransfer"),
    ]

    history = reconstruct_history(
        "acc-x",
        Decimal("60"),
        transactions,
        today=TODAY,
        predicate=predicate,
    )
    default_history = reconstruct_history(
        "acc-x", Decimal("60"), transactions, today=TODAY
    )

    assert [entry.balance for entry in history] == [
        Decimal("100.00"),
        Decimal("60.00"),
    ]
    assert default_history == [AccountDayBalance(TODAY, Decimal("60.00"))]


def test_future_transactions_leave_a_single_point() -> None:
    """Transactions after today cannot open a window."""
    transactions = [_tx(TODAY + timedelta(days=2), "5", "Debit")]

    history = reconstruct_history(
        "acc-x", Decimal("7"), transactions, today=TODAY
    )

    assert history == [AccountDayBalance(TODAY, Decimal("7.00"))]


def test_rounding_is_applied_per_point_not_compounded() -> None:
    """The running balance keeps full precision between recorded days."""
    transactions = [
        _tx(TODAY - timedelta(days=1), "0.004", "Debit"),
        _tx(TODAY - timedelta(days=2), "0.004", "Debit"),
        _tx(TODAY - timedelta(days=3), "0.004", "Debit"),
    ]

    history = reconstruct_history(
        "acc-x", Decimal("1.000"), transactions, today=TODAY
    )

    # Unrounded closing balances: 1.008, 1.004, 1.000, 1.000.
    assert [entry.balance for entry in history] == [
        Decimal("1.01"),
        Decimal("1.00"),
        Decimal("1.00"),
        Decimal("1.00"),
    ]


def test_balance_near_zero_is_not_reported_as_negative_zero() -> None:
    """A sub-cent negative balance is recorded as 0.00."""
    transactions = [
        _tx(TODAY - timedelta(days=1), "0.01", "Credit", sub_type="Deposit"),
        _tx(TODAY - timedelta(days=2), "0.01", "Debit"),
    ]

    history = reconstruct_history(
        "acc-x", Decimal("0.006"), transactions, today=TODAY
    )

    # Unrounded closing balances: -0.004, 0.006, 0.006.
    assert [str(entry.balance) for entry in history] == ["0.00", "0.01", "0.01"]
    single = reconstruct_history("acc-x", Decimal("-0.001"), [], today=TODAY)
    assert str(single[0].balance) == "0.00"


def test_days_follow_utc_calendar() -> None:
    """An instant late in a UTC+4 evening belongs to the UTC day."""
    local = timezone(timedelta(hours=4))
    transaction = Transaction(
        transaction_id="tz",
        account_id="acc-x",
        date_time=datetime(2025, 11, 13, 2, 30, tzinfo=local),
        amount=Decimal("10"),
        credit_debit_indicator="Debit",
        status="Booked",
        sub_transaction_type="Purchase",
    )

    history = reconstruct_history(
        "acc-x", Decimal("90"), [transaction], today=TODAY
    )

    assert [entry.day for entry in history] == [date(2025, 11, 12), TODAY]
    assert [entry.balance for entry in history] == [
        Decimal("90.00"),
        Decimal("90.00"),
    ]
