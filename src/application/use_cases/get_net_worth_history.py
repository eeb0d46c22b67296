"""Use case to compute the daily net worth series of included accounts."""

from collections.abc import Iterable
from datetime import date

from src.application.ports.open_finance_repository import (
    OpenFinanceRepositoryPort,
)
from src.application.use_cases.account_filters import (
    resolve_included_account_ids,
)
from src.domain.constants import DEFAULT_NET_WORTH_WINDOW_MONTHS
from src.domain.models import AccountDayBalance, NetWorthPoint
from src.domain.policies import TransactionPredicate, is_qualifying_transaction
from src.domain.services.balances import resolve_balance
from src.domain.services.finance import aggregate_net_worth
from src.domain.services.history import reconstruct_history
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import utc_today


class GetNetWorthHistoryUseCase:
    """Aggregate reconstructed account histories into net worth points."""

    def __init__(
        self,
        repository: OpenFinanceRepositoryPort,
        logger=None,
        window_months: int = DEFAULT_NET_WORTH_WINDOW_MONTHS,
        predicate: TransactionPredicate = is_qualifying_transaction,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing accounts, balances and transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            window_months: Trailing window kept in the series.
            predicate: Policy selecting transactions that move balances.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._window_months = window_months
        self._predicate = predicate

    def execute(
        self,
        included_account_ids: Iterable[str] | None = None,
        today: date | None = None,
    ) -> list[NetWorthPoint]:
        """Return the net worth series for the included accounts.

        Args:
            included_account_ids: Accounts included in net worth; all if None.
            today: Optional reference day for the series and its window.

        Returns:
            list[NetWorthPoint]: Daily points, oldest first.
        """
        reference_day = today or utc_today()
        account_ids = resolve_included_account_ids(
            self._repository.fetch_accounts(),
            included_account_ids,
        )
        snapshots = self._repository.fetch_balances()
        transactions = self._repository.fetch_transactions()

        histories: dict[str, list[AccountDayBalance]] = {}
        for account_id in account_ids:
            current_balance = resolve_balance(
                account_id,
                snapshots,
                logger=self._logger,
            )
            histories[account_id] = reconstruct_history(
                account_id,
                current_balance,
                transactions,
                today=reference_day,
                predicate=self._predicate,
            )

        points = aggregate_net_worth(
            histories,
            today=reference_day,
            window_months=self._window_months,
        )
        self._logger.info(
            f"Net worth history computed: accounts={len(histories)}, "
            f"points={len(points)}"
        )
        return points


__all__ = ["GetNetWorthHistoryUseCase", "NetWorthPoint"]
