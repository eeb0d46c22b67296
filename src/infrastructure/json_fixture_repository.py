"""Repository reading Open Finance JSON fixtures from disk.

Fixture files hold one collection each and may use the Open Finance
envelope (``{"Data": {"Transaction": [...]}}``) or a bare top-level key
(``{"Transaction": [...]}``). Records are validated and parsed into domain
records here so the domain services never see raw strings.
"""

from datetime import datetime
from decimal import Decimal
import json
from pathlib import Path
from typing import Any

from src.application.ports.open_finance_repository import (
    OpenFinanceRepositoryPort,
)
from src.domain.constants import CREDIT_DEBIT_INDICATORS
from src.domain.errors import FixtureNotFoundError, InvalidRecordError
from src.domain.models import (
    Account,
    BalanceSnapshot,
    DirectDebit,
    StandingOrder,
    Transaction,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import parse_instant
from src.utils.decimal_utils import coerce_decimal

ACCOUNTS_FILE = "accounts.json"
BALANCES_FILE = "balances.json"
TRANSACTIONS_FILE = "transactions.json"
STANDING_ORDERS_FILE = "standing-orders.json"
DIRECT_DEBITS_FILE = "direct-debits.json"


class JsonFixtureRepository(OpenFinanceRepositoryPort):
    """Repository backed by bundled Open Finance JSON files."""

    def __init__(self, fixtures_dir: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            fixtures_dir: Directory containing the fixture files.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._fixtures_dir = Path(fixtures_dir)
        self._logger = logger or get_app_logger()
        self._accounts: list[Account] | None = None
        self._balances: list[BalanceSnapshot] | None = None
        self._transactions: list[Transaction] | None = None
        self._standing_orders: list[StandingOrder] | None = None
        self._direct_debits: list[DirectDebit] | None = None

    def fetch_accounts(self) -> list[Account]:
        if self._accounts is None:
            records = self._load_collection(ACCOUNTS_FILE, "Account", "account")
            self._accounts = [self._parse_account(record) for record in records]
            self._logger.info(f"Loaded {len(self._accounts)} accounts")
        return list(self._accounts)

    def fetch_balances(self) -> list[BalanceSnapshot]:
        if self._balances is None:
            records = self._load_collection(BALANCES_FILE, "Balance", "balance")
            self._balances = [self._parse_balance(record) for record in records]
            self._logger.info(f"Loaded {len(self._balances)} balances")
        return list(self._balances)

    def fetch_transactions(self) -> list[Transaction]:
        if self._transactions is None:
            records = self._load_collection(
                TRANSACTIONS_FILE, "Transaction", "transaction"
            )
            self._transactions = [
                self._parse_transaction(record) for record in records
            ]
            self._logger.info(
                f"Loaded {len(self._transactions)} transactions"
            )
        return list(self._transactions)

    def fetch_standing_orders(self) -> list[StandingOrder]:
        if self._standing_orders is None:
            records = self._load_collection(
                STANDING_ORDERS_FILE, "StandingOrder", "standing order"
            )
            self._standing_orders = [
                self._parse_standing_order(record) for record in records
            ]
            self._logger.info(
                f"Loaded {len(self._standing_orders)} standing orders"
            )
        return list(self._standing_orders)

    def fetch_direct_debits(self) -> list[DirectDebit]:
        if self._direct_debits is None:
            records = self._load_collection(
                DIRECT_DEBITS_FILE, "DirectDebit", "direct debit"
            )
            self._direct_debits = [
                self._parse_direct_debit(record) for record in records
            ]
            self._logger.info(
                f"Loaded {len(self._direct_debits)} direct debits"
            )
        return list(self._direct_debits)

    def _load_collection(self, filename: str, key: str, kind: str) -> list[dict]:
        path = self._fixtures_dir / filename
        if not path.exists():
            raise FixtureNotFoundError(f"Missing fixture file: {path}")
        with path.open(encoding="utf-8") as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise InvalidRecordError(
                    filename, None, "<file>", f"is not valid JSON: {exc.msg}"
                ) from exc
        if isinstance(payload, dict) and isinstance(payload.get("Data"), dict):
            payload = payload["Data"]
        if isinstance(payload, dict):
            payload = payload.get(key, [])
        if not isinstance(payload, list):
            raise InvalidRecordError(
                filename, None, key, "must be a list of records"
            )
        for record in payload:
            if not isinstance(record, dict):
                raise InvalidRecordError(
                    kind, None, "<record>", "must be an object"
                )
        return payload

    @staticmethod
    def _parse_account(record: dict) -> Account:
        account_id = _required_str(record, "AccountId", "account", None)
        return Account(
            account_id=account_id,
            currency=_required_str(record, "Currency", "account", account_id),
            account_type=str(record.get("AccountType") or ""),
            account_sub_type=str(record.get("AccountSubType") or ""),
            nickname=record.get("Nickname"),
            description=record.get("Description"),
            status=record.get("Status"),
        )

    @staticmethod
    def _parse_balance(record: dict) -> BalanceSnapshot:
        account_id = _required_str(record, "AccountId", "balance", None)
        amount, currency = _parse_amount(record, "balance", account_id)
        return BalanceSnapshot(
            account_id=account_id,
            balance_type=_required_str(record, "Type", "balance", account_id),
            date_time=_parse_timestamp(
                record, "DateTime", "balance", account_id
            ),
            amount=amount,
            credit_debit_indicator=_parse_indicator(
                record, "balance", account_id
            ),
            currency=currency,
        )

    @staticmethod
    def _parse_transaction(record: dict) -> Transaction:
        transaction_id = _required_str(
            record, "TransactionId", "transaction", None
        )
        amount, currency = _parse_amount(record, "transaction", transaction_id)
        return Transaction(
            transaction_id=transaction_id,
            account_id=_required_str(
                record, "AccountId", "transaction", transaction_id
            ),
            date_time=_parse_timestamp(
                record, "TransactionDateTime", "transaction", transaction_id
            ),
            amount=amount,
            credit_debit_indicator=_parse_indicator(
                record, "transaction", transaction_id
            ),
            status=_required_str(record, "Status", "transaction", transaction_id),
            transaction_type=record.get("TransactionType"),
            sub_transaction_type=record.get("SubTransactionType"),
            currency=currency,
            category=_parse_category(record),
        )

    @staticmethod
    def _parse_standing_order(record: dict) -> StandingOrder:
        kind = "standing order"
        order_id = _required_str(record, "StandingOrderId", kind, None)
        amount, currency = _parse_amount(
            record, kind, order_id, field="FirstPaymentAmount"
        )
        return StandingOrder(
            standing_order_id=order_id,
            account_id=_required_str(record, "AccountId", kind, order_id),
            frequency=_required_str(record, "Frequency", kind, order_id),
            status=_required_str(
                record, "StandingOrderStatusCode", kind, order_id
            ),
            first_payment_date_time=_parse_timestamp(
                record, "FirstPaymentDateTime", kind, order_id
            ),
            next_payment_date_time=_parse_optional_timestamp(
                record, "NextPaymentDateTime", kind, order_id
            ),
            amount=amount,
            currency=currency,
        )

    @staticmethod
    def _parse_direct_debit(record: dict) -> DirectDebit:
        kind = "direct debit"
        debit_id = _required_str(record, "DirectDebitId", kind, None)
        amount = Decimal("0")
        currency = None
        if record.get("PreviousPaymentAmount") is not None:
            amount, currency = _parse_amount(
                record, kind, debit_id, field="PreviousPaymentAmount"
            )
        return DirectDebit(
            direct_debit_id=debit_id,
            account_id=_required_str(record, "AccountId", kind, debit_id),
            name=str(record.get("Name") or debit_id),
            frequency=_required_str(record, "Frequency", kind, debit_id),
            status=_required_str(
                record, "DirectDebitStatusCode", kind, debit_id
            ),
            previous_payment_date_time=_parse_optional_timestamp(
                record, "PreviousPaymentDateTime", kind, debit_id
            ),
            previous_payment_amount=amount,
            currency=currency,
        )


def _required_str(
    record: dict,
    field: str,
    kind: str,
    record_id: str | None,
) -> str:
    value = record.get(field)
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecordError(kind, record_id, field, "is missing or empty")
    return value.strip()


def _parse_amount(
    record: dict,
    kind: str,
    record_id: str,
    field: str = "Amount",
) -> tuple[Decimal, str | None]:
    raw: Any = record.get(field)
    currency = None
    if isinstance(raw, dict):
        currency = raw.get("Currency")
        raw = raw.get("Amount")
    if raw is None:
        raise InvalidRecordError(kind, record_id, field, "is missing")
    try:
        amount = coerce_decimal(raw)
    except ValueError as exc:
        raise InvalidRecordError(
            kind, record_id, field, f"is not a number: {raw!r}"
        ) from exc
    if amount < 0:
        raise InvalidRecordError(
            kind, record_id, field, f"must be unsigned, got {raw!r}"
        )
    return amount, currency


def _parse_indicator(record: dict, kind: str, record_id: str) -> str:
    value = record.get("CreditDebitIndicator")
    if value not in CREDIT_DEBIT_INDICATORS:
        raise InvalidRecordError(
            kind,
            record_id,
            "CreditDebitIndicator",
            f"must be Credit or Debit, got {value!r}",
        )
    return value


def _parse_timestamp(record: dict, field: str, kind: str, record_id: str):
    raw = record.get(field)
    try:
        return parse_instant(raw)
    except ValueError as exc:
        raise InvalidRecordError(
            kind, record_id, field, f"is not an ISO timestamp: {raw!r}"
        ) from exc


def _parse_optional_timestamp(
    record: dict,
    field: str,
    kind: str,
    record_id: str,
) -> datetime | None:
    if record.get(field) in (None, ""):
        return None
    return _parse_timestamp(record, field, kind, record_id)


def _parse_category(record: dict) -> str | None:
    # Accepts "Category": "Groceries" or "Category": {"Name": "Groceries"}.
    raw = record.get("Category")
    if isinstance(raw, dict):
        raw = raw.get("Name")
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return None


__all__ = ["JsonFixtureRepository"]
