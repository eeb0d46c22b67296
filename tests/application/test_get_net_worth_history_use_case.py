"""Tests for the GetNetWorthHistoryUseCase."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_net_worth_history import (
    GetNetWorthHistoryUseCase,
)
from src.domain.models import Account, BalanceSnapshot, Transaction

TODAY = date(2025, 11, 13)


def _account(account_id: str) -> Account:
    return Account(
        account_id=account_id,
        currency="AED",
        account_type="Retail",
        account_sub_type="CurrentAccount",
    )


def _balance(account_id: str, amount: str, indicator: str) -> BalanceSnapshot:
    return BalanceSnapshot(
        account_id=account_id,
        balance_type="InterimAvailable",
        date_time=datetime(2025, 11, 13, tzinfo=timezone.utc),
        amount=Decimal(amount),
        credit_debit_indicator=indicator,
    )


def _purchase(account_id: str, day: date, amount: str) -> Transaction:
    return Transaction(
        transaction_id=f"{account_id}-{day.isoformat()}",
        account_id=account_id,
        date_time=datetime(day.year, day.month, day.day, 12, tzinfo=timezone.utc),
        amount=Decimal(amount),
        credit_debit_indicator="Debit",
        status="Booked",
        sub_transaction_type="Purchase",
    )


def _build_repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_accounts.return_value = [
        _account("checking"),
        _account("card"),
    ]
    repository.fetch_balances.return_value = [
        _balance("checking", "2000.00", "Credit"),
        _balance("card", "300.00", "Debit"),
    ]
    repository.fetch_transactions.return_value = [
        _purchase("checking", date(2025, 11, 12), "150.00"),
        _purchase("card", date(2025, 11, 11), "80.00"),
    ]
    return repository


def test_execute_aggregates_all_accounts_by_default() -> None:
    """Every account contributes on the days it has history."""
    use_case = GetNetWorthHistoryUseCase(_build_repository(), logger=MagicMock())

    points = use_case.execute(today=TODAY)

    assert [point.day for point in points] == [
        date(2025, 11, 11),
        date(2025, 11, 12),
        TODAY,
    ]
    # Card history starts on the 11th, checking on the 12th.
    assert points[0].assets == Decimal("0.00")
    assert points[0].debt == Decimal("300.00")
    assert points[1].assets == Decimal("2000.00")
    assert points[-1].net_worth == Decimal("1700.00")


def test_execute_respects_inclusion_set() -> None:
    """Excluded accounts do not contribute to any point."""
    use_case = GetNetWorthHistoryUseCase(_build_repository(), logger=MagicMock())

    points = use_case.execute(included_account_ids=["checking"], today=TODAY)

    assert [point.day for point in points] == [date(2025, 11, 12), TODAY]
    assert all(point.debt == Decimal("0.00") for point in points)
    assert points[-1].net_worth == Decimal("2000.00")


def test_execute_applies_window_months() -> None:
    """Points outside the configured window are dropped."""
    repository = _build_repository()
    repository.fetch_transactions.return_value = [
        _purchase("checking", date(2025, 1, 2), "1.00"),
    ]
    use_case = GetNetWorthHistoryUseCase(
        repository,
        logger=MagicMock(),
        window_months=2,
    )

    points = use_case.execute(today=TODAY)

    assert points[0].day == date(2025, 9, 13)
    assert points[-1].day == TODAY
