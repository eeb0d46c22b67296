"""Use case to compute current net worth from resolved balances."""

from collections.abc import Iterable

from src.application.ports.open_finance_repository import (
    OpenFinanceRepositoryPort,
)
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import NetWorthSummary
from src.domain.services.finance import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute current assets, liabilities and net worth."""

    def __init__(
        self,
        repository: OpenFinanceRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing accounts and balances.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency the totals are reported in.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(
        self,
        included_account_ids: Iterable[str] | None = None,
    ) -> NetWorthSummary:
        """Return the net worth summary.

        Args:
            included_account_ids: Accounts included in net worth; all if None.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        included = (
            None if included_account_ids is None else set(included_account_ids)
        )
        summary = compute_net_worth_summary(
            self._repository.fetch_accounts(),
            self._repository.fetch_balances(),
            currency_code=self._currency_code,
            included_account_ids=included,
            logger=self._logger,
        )
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
