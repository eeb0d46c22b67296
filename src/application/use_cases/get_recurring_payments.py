"""Use case to list recurring payments and project their next dates."""

from datetime import date

from src.application.ports.open_finance_repository import (
    OpenFinanceRepositoryPort,
)
from src.domain.constants import DEFAULT_PROJECTION_COUNT
from src.domain.models import RecurringPaymentsOverview
from src.domain.services.recurring import summarize_recurring_payments
from src.infrastructure.logging.logger import get_app_logger


class GetRecurringPaymentsUseCase:
    """Summarize standing orders and direct debits."""

    def __init__(
        self,
        repository: OpenFinanceRepositoryPort,
        logger=None,
        projection_count: int = DEFAULT_PROJECTION_COUNT,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing standing orders and direct debits.
            logger: Optional logger compatible with logging.Logger-like API.
            projection_count: Payment days projected per instruction.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._projection_count = projection_count

    def execute(
        self,
        status_filter: str = "all",
        today: date | None = None,
    ) -> RecurringPaymentsOverview:
        """Return filtered instructions, active counts and upcoming payments.

        Args:
            status_filter: ``all``, ``active`` or ``inactive``.
            today: Optional reference day for the projections.

        Returns:
            RecurringPaymentsOverview: Instructions and projected payments.
        """
        overview = summarize_recurring_payments(
            self._repository.fetch_direct_debits(),
            self._repository.fetch_standing_orders(),
            status_filter=status_filter,
            today=today,
            count=self._projection_count,
        )
        self._logger.info(
            f"Recurring payments: "
            f"{overview.active_direct_debits}/{overview.total_direct_debits} "
            f"direct debits and "
            f"{overview.active_standing_orders}/"
            f"{overview.total_standing_orders} standing orders active, "
            f"{len(overview.upcoming)} upcoming payments"
        )
        return overview


__all__ = ["GetRecurringPaymentsUseCase", "RecurringPaymentsOverview"]
