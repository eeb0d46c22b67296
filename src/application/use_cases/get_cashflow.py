"""Use case to compute monthly income and expenses."""

from collections.abc import Iterable
from datetime import date

from src.application.ports.open_finance_repository import (
    OpenFinanceRepositoryPort,
)
from src.application.use_cases.account_filters import (
    resolve_included_account_ids,
)
from src.domain.models import CashflowHistory
from src.domain.services.finance import compute_monthly_cashflow
from src.infrastructure.logging.logger import get_app_logger


class GetCashflowUseCase:
    """Compute monthly cashflow from booked transactions."""

    def __init__(
        self,
        repository: OpenFinanceRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing accounts and transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        included_account_ids: Iterable[str] | None = None,
        today: date | None = None,
        months: int = 6,
    ) -> CashflowHistory:
        """Return income and expense per month for the trailing window.

        Args:
            included_account_ids: Accounts to include; all when None.
            today: Optional reference day closing the window.
            months: Number of months in the window.

        Returns:
            CashflowHistory: Monthly totals with savings rate.
        """
        account_ids = resolve_included_account_ids(
            self._repository.fetch_accounts(),
            included_account_ids,
        )
        cashflow = compute_monthly_cashflow(
            self._repository.fetch_transactions(),
            account_ids=set(account_ids),
            today=today,
            months=months,
        )
        self._logger.info(
            f"Cashflow totals computed: in={cashflow.total_income}, "
            f"out={cashflow.total_expense}, months={len(cashflow.months)}"
        )
        return cashflow


__all__ = ["GetCashflowUseCase", "CashflowHistory"]
