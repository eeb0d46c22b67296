"""Use case to break one month of spending and income down by category."""

from collections.abc import Iterable
from datetime import date

from src.application.ports.open_finance_repository import (
    OpenFinanceRepositoryPort,
)
from src.application.use_cases.account_filters import (
    resolve_included_account_ids,
)
from src.domain.models import CategoryBreakdown
from src.domain.services.finance import compute_category_breakdown
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import utc_today


class GetCategoryBreakdownUseCase:
    """Compute per-category totals for a calendar month."""

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
        month: date | None = None,
        included_account_ids: Iterable[str] | None = None,
    ) -> CategoryBreakdown:
        """Return expense and income categories for the month.

        Args:
            month: Any day of the month to report; the current month if None.
            included_account_ids: Accounts to include; all when None.

        Returns:
            CategoryBreakdown: Categories sorted by amount, largest first.
        """
        account_ids = resolve_included_account_ids(
            self._repository.fetch_accounts(),
            included_account_ids,
        )
        breakdown = compute_category_breakdown(
            self._repository.fetch_transactions(),
            month=month or utc_today(),
            account_ids=set(account_ids),
        )
        self._logger.info(
            f"Category breakdown for {breakdown.month:%Y-%m}: "
            f"{len(breakdown.expenses)} expense and "
            f"{len(breakdown.income)} income categories"
        )
        return breakdown


__all__ = ["CategoryBreakdown", "GetCategoryBreakdownUseCase"]
