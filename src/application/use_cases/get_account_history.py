"""Use case to reconstruct the daily balance history of one account."""

from datetime import date

from src.application.ports.open_finance_repository import (
    OpenFinanceRepositoryPort,
)
from src.domain.models import AccountDayBalance
from src.domain.policies import TransactionPredicate, is_qualifying_transaction
from src.domain.services.balances import resolve_balance
from src.domain.services.history import reconstruct_history
from src.infrastructure.logging.logger import get_app_logger


class GetAccountHistoryUseCase:
    """Rebuild an account's balance history from its current balance."""

    def __init__(
        self,
        repository: OpenFinanceRepositoryPort,
        logger=None,
        predicate: TransactionPredicate = is_qualifying_transaction,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing accounts, balances and transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            predicate: Policy selecting transactions that move the balance.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._predicate = predicate

    def execute(
        self,
        account_id: str,
        today: date | None = None,
    ) -> list[AccountDayBalance]:
        """Return the reconstructed history of the account.

        Args:
            account_id: Account to reconstruct.
            today: Optional last day of the series.

        Returns:
            list[AccountDayBalance]: Daily balances, oldest first.
        """
        current_balance = resolve_balance(
            account_id,
            self._repository.fetch_balances(),
            logger=self._logger,
        )
        history = reconstruct_history(
            account_id,
            current_balance,
            self._repository.fetch_transactions(),
            today=today,
            predicate=self._predicate,
        )
        self._logger.info(
            f"Reconstructed {len(history)} days for account {account_id} "
            f"from balance {current_balance}"
        )
        return history


__all__ = ["GetAccountHistoryUseCase", "AccountDayBalance"]
