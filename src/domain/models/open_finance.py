"""Domain models for Open Finance accounts, balances and transactions."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import DEBIT
from src.utils.date_utils import utc_day


@dataclass(frozen=True)
class Account:
    """Account known to the dashboard."""

    account_id: str
    currency: str
    account_type: str
    account_sub_type: str
    nickname: str | None = None
    description: str | None = None
    status: str | None = None

    @property
    def display_name(self) -> str:
        """Return the nickname, falling back to the description or id."""
        return self.nickname or self.description or self.account_id


@dataclass(frozen=True)
class BalanceSnapshot:
    """One reported balance fact for an account.

    Attributes:
        account_id: Account the balance belongs to.
        balance_type: Open Finance balance type (ClosingAvailable, ...).
        date_time: Instant the balance was reported, in UTC.
        amount: Unsigned magnitude.
        credit_debit_indicator: Credit or Debit.
        currency: Currency of the amount when reported.
    """

    account_id: str
    balance_type: str
    date_time: datetime
    amount: Decimal
    credit_debit_indicator: str
    currency: str | None = None

    @property
    def signed_amount(self) -> Decimal:
        """Return the amount negated for Debit balances."""
        if self.credit_debit_indicator == DEBIT:
            return -self.amount
        return self.amount


@dataclass(frozen=True)
class Transaction:
    """Ledger entry affecting an account balance."""

    transaction_id: str
    account_id: str
    date_time: datetime
    amount: Decimal
    credit_debit_indicator: str
    status: str
    transaction_type: str | None = None
    sub_transaction_type: str | None = None
    currency: str | None = None
    category: str | None = None

    @property
    def signed_amount(self) -> Decimal:
        """Return +amount for Credit entries and -amount for Debit entries."""
        if self.credit_debit_indicator == DEBIT:
            return -self.amount
        return self.amount

    @property
    def booking_day(self) -> date:
        """Return the UTC calendar day of the transaction."""
        return utc_day(self.date_time)


__all__ = ["Account", "BalanceSnapshot", "Transaction"]
