"""Application port for Open Finance fixture data."""

from typing import Protocol

from src.domain.models import (
    Account,
    BalanceSnapshot,
    DirectDebit,
    StandingOrder,
    Transaction,
)


class OpenFinanceRepositoryPort(Protocol):
    """Port exposing accounts, balances, transactions and recurring payments."""

    def fetch_accounts(self) -> list[Account]:
        """Return every account known to the dashboard."""

    def fetch_balances(self) -> list[BalanceSnapshot]:
        """Return every reported balance snapshot."""

    def fetch_transactions(self) -> list[Transaction]:
        """Return every ledger transaction."""

    def fetch_standing_orders(self) -> list[StandingOrder]:
        """Return every standing order, whatever its status."""

    def fetch_direct_debits(self) -> list[DirectDebit]:
        """Return every direct debit mandate, whatever its status."""


__all__ = ["OpenFinanceRepositoryPort"]
