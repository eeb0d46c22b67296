"""Tests for the JSON fixture repository."""

from datetime import datetime, timezone
from decimal import Decimal
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.domain.errors import FixtureNotFoundError, InvalidRecordError
from src.infrastructure.json_fixture_repository import JsonFixtureRepository


def _write(path: Path, name: str, payload) -> None:
    (path / name).write_text(json.dumps(payload), encoding="utf-8")


def _transaction(**overrides) -> dict:
    record = {
        "TransactionId": "tx-1",
        "AccountId": "acc-1",
        "TransactionDateTime": "2025-11-12T08:30:00Z",
        "CreditDebitIndicator": "Debit",
        "Status": "Booked",
        "TransactionType": "POS",
        "SubTransactionType": "Purchase",
        "Amount": {"Amount": "45.50", "Currency": "AED"},
    }
    record.update(overrides)
    return record


def test_reads_open_finance_envelopes(tmp_path: Path) -> None:
    """Data envelopes and bare keys are both accepted."""
    _write(
        tmp_path,
        "accounts.json",
        {
            "Data": {
                "Account": [
                    {
                        "AccountId": "acc-1",
                        "Currency": "AED",
                        "AccountType": "Retail",
                        "AccountSubType": "CurrentAccount",
                        "Nickname": "Salary",
                    }
                ]
            }
        },
    )
    _write(
        tmp_path,
        "balances.json",
        {
            "Balance": [
                {
                    "AccountId": "acc-1",
                    "Type": "ClosingAvailable",
                    "DateTime": "2025-11-13T00:00:00+04:00",
                    "CreditDebitIndicator": "Credit",
                    "Amount": {"Amount": "5000.00", "Currency": "AED"},
                }
            ]
        },
    )
    _write(tmp_path, "transactions.json", {"Transaction": [_transaction()]})
    repository = JsonFixtureRepository(tmp_path, logger=MagicMock())

    accounts = repository.fetch_accounts()
    balances = repository.fetch_balances()
    transactions = repository.fetch_transactions()

    assert accounts[0].account_id == "acc-1"
    assert accounts[0].display_name == "Salary"
    assert balances[0].amount == Decimal("5000.00")
    assert balances[0].date_time == datetime(
        2025, 11, 12, 20, 0, tzinfo=timezone.utc
    )
    assert transactions[0].signed_amount == Decimal("-45.50")
    assert transactions[0].sub_transaction_type == "Purchase"
    assert transactions[0].currency == "AED"


def test_files_are_parsed_once(tmp_path: Path) -> None:
    """Repeated fetches reuse the parsed records."""
    _write(tmp_path, "transactions.json", {"Transaction": [_transaction()]})
    logger = MagicMock()
    repository = JsonFixtureRepository(tmp_path, logger=logger)

    first = repository.fetch_transactions()
    second = repository.fetch_transactions()

    assert first == second
    assert first is not second
    logger.info.assert_called_once()


def test_missing_fixture_raises(tmp_path: Path) -> None:
    """A missing file raises FixtureNotFoundError."""
    repository = JsonFixtureRepository(tmp_path, logger=MagicMock())

    with pytest.raises(FixtureNotFoundError):
        repository.fetch_accounts()


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"Amount": {"Amount": "12,5O"}}, "Amount"),
        ({"Amount": {"Amount": "-3.00"}}, "Amount"),
        ({"TransactionDateTime": "12/11/2025"}, "TransactionDateTime"),
        ({"CreditDebitIndicator": "Both"}, "CreditDebitIndicator"),
        ({"Status": ""}, "Status"),
    ],
)
def test_malformed_records_fail_fast(
    tmp_path: Path,
    overrides: dict,
    field: str,
) -> None:
    """Bad values raise InvalidRecordError naming the record and field."""
    _write(
        tmp_path,
        "transactions.json",
        {"Data": {"Transaction": [_transaction(**overrides)]}},
    )
    repository = JsonFixtureRepository(tmp_path, logger=MagicMock())

    with pytest.raises(InvalidRecordError) as excinfo:
        repository.fetch_transactions()

    assert excinfo.value.record_kind == "transaction"
    assert excinfo.value.record_id == "tx-1"
    assert excinfo.value.field == field


def test_non_list_collection_is_rejected(tmp_path: Path) -> None:
    """A collection that is not a list is an invalid record."""
    _write(tmp_path, "balances.json", {"Balance": {"AccountId": "acc-1"}})
    repository = JsonFixtureRepository(tmp_path, logger=MagicMock())

    with pytest.raises(InvalidRecordError):
        repository.fetch_balances()


def test_non_object_record_is_rejected(tmp_path: Path) -> None:
    """A collection entry that is not an object is an invalid record."""
    _write(tmp_path, "transactions.json", {"Transaction": ["oops"]})
    repository = JsonFixtureRepository(tmp_path, logger=MagicMock())

    with pytest.raises(InvalidRecordError) as excinfo:
        repository.fetch_transactions()

    assert excinfo.value.record_kind == "transaction"
    assert excinfo.value.record_id is None
    assert excinfo.value.field == "<record>"


def test_invalid_json_is_rejected(tmp_path: Path) -> None:
    """A file that is not JSON raises InvalidRecordError, not a parser error."""
    (tmp_path / "accounts.json").write_text("{not json", encoding="utf-8")
    repository = JsonFixtureRepository(tmp_path, logger=MagicMock())

    with pytest.raises(InvalidRecordError) as excinfo:
        repository.fetch_accounts()

    assert excinfo.value.record_kind == "accounts.json"
    assert excinfo.value.field == "<file>"
    assert "is not valid JSON" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_transaction_category_is_read(tmp_path: Path) -> None:
    """Categories may be given as a name or as an object with a Name."""
    _write(
        tmp_path,
        "transactions.json",
        {
            "Transaction": [
                _transaction(Category={"Name": "Groceries"}),
                _transaction(TransactionId="tx-2", Category=" Dining "),
                _transaction(TransactionId="tx-3"),
            ]
        },
    )
    repository = JsonFixtureRepository(tmp_path, logger=MagicMock())

    categories = [item.category for item in repository.fetch_transactions()]

    assert categories == ["Groceries", "Dining", None]


def test_reads_standing_orders_and_direct_debits(tmp_path: Path) -> None:
    """Recurring instructions are parsed with optional dates and amounts."""
    _write(
        tmp_path,
        "standing-orders.json",
        {
            "Data": {
                "StandingOrder": [
                    {
                        "StandingOrderId": "so-1",
                        "AccountId": "acc-1",
                        "Frequency": "IntervalMonthDay:1:01",
                        "StandingOrderStatusCode": "Active",
                        "FirstPaymentDateTime": "2025-01-01T06:00:00Z",
                        "NextPaymentDateTime": "2025-12-01T06:00:00Z",
                        "FirstPaymentAmount": {
                            "Amount": "6500.00",
                            "Currency": "AED",
                        },
                    }
                ]
            }
        },
    )
    _write(
        tmp_path,
        "direct-debits.json",
        {
            "DirectDebit": [
                {
                    "DirectDebitId": "dd-1",
                    "AccountId": "acc-1",
                    "Name": "Utilities",
                    "Frequency": "Monthly",
                    "DirectDebitStatusCode": "Inactive",
                }
            ]
        },
    )
    repository = JsonFixtureRepository(tmp_path, logger=MagicMock())

    order = repository.fetch_standing_orders()[0]
    debit = repository.fetch_direct_debits()[0]

    assert order.amount == Decimal("6500.00")
    assert order.currency == "AED"
    assert order.is_active
    assert order.next_payment_date_time == datetime(
        2025, 12, 1, 6, 0, tzinfo=timezone.utc
    )
    assert debit.name == "Utilities"
    assert not debit.is_active
    assert debit.previous_payment_date_time is None
    assert debit.previous_payment_amount == Decimal("0")


def test_standing_order_without_frequency_fails_fast(tmp_path: Path) -> None:
    """Recurring records are validated like ledger records."""
    _write(
        tmp_path,
        "standing-orders.json",
        {
            "StandingOrder": [
                {
                    "StandingOrderId": "so-1",
                    "AccountId": "acc-1",
                    "StandingOrderStatusCode": "Active",
                    "FirstPaymentDateTime": "2025-01-01T06:00:00Z",
                    "FirstPaymentAmount": {"Amount": "10.00"},
                }
            ]
        },
    )
    repository = JsonFixtureRepository(tmp_path, logger=MagicMock())

    with pytest.raises(InvalidRecordError) as excinfo:
        repository.fetch_standing_orders()

    assert excinfo.value.record_kind == "standing order"
    assert excinfo.value.record_id == "so-1"
    assert excinfo.value.field == "Frequency"
