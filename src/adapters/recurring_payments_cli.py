"""CLI adapter listing recurring payments and their upcoming dates.

``RECURRING_STATUS_FILTER`` selects which instructions are listed
(``all``, ``active`` or ``inactive``; defaults to ``all``).
"""

import os
import sys

from src.application.use_cases.get_recurring_payments import (
    GetRecurringPaymentsUseCase,
)
from src.domain.constants import RECURRING_STATUS_FILTERS
from src.domain.errors import FixtureNotFoundError, InvalidRecordError
from src.infrastructure.container import (
    build_open_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> int:
    """Print direct debits, standing orders and the payment calendar."""
    logger = get_app_logger()
    status_filter = os.getenv("RECURRING_STATUS_FILTER", "all").strip().lower()
    if status_filter not in RECURRING_STATUS_FILTERS:
        logger.warning(
            f"Invalid RECURRING_STATUS_FILTER {status_filter!r}; "
            f"expected one of {', '.join(RECURRING_STATUS_FILTERS)}"
        )
        return 2
    get_usage_logger().info(
        f"recurring_payments_cli invoked with filter {status_filter}"
    )

    settings = build_settings()
    repository = build_open_finance_repository(settings)
    try:
        overview = GetRecurringPaymentsUseCase(
            repository=repository,
            logger=logger,
        ).execute(status_filter=status_filter, today=settings.today)
    except (FixtureNotFoundError, InvalidRecordError) as exc:
        logger.error(str(exc))
        return 1

    print(
        f"Direct debits ({overview.active_direct_debits}/"
        f"{overview.total_direct_debits} active)"
    )
    for debit in overview.direct_debits:
        print(f"  {debit.name}  {debit.frequency}  {debit.status}")
    print(
        f"Standing orders ({overview.active_standing_orders}/"
        f"{overview.total_standing_orders} active)"
    )
    for order in overview.standing_orders:
        print(f"  {order.display_name}  {order.frequency}  {order.status}")
    print("Upcoming payments")
    for payment in overview.upcoming:
        print(
            f"{payment.day.isoformat()}  {payment.name}  "
            f"{payment.amount} {payment.currency}"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
