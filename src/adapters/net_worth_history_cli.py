"""CLI adapter printing the net worth history and current summary.

Accounts listed in ``NET_WORTH_EXCLUDED_ACCOUNTS`` (comma separated) are left
out of both the history and the summary, mirroring the dashboard's
"include in net worth" toggle.
"""

import os
import sys

from src.application.use_cases.account_filters import parse_account_ids
from src.application.use_cases.get_net_worth_history import (
    GetNetWorthHistoryUseCase,
)
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from src.domain.errors import FixtureNotFoundError, InvalidRecordError
from src.infrastructure.container import (
    build_open_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> int:
    """Run the net worth use cases and print their results."""
    logger = get_app_logger()
    settings = build_settings()
    repository = build_open_finance_repository(settings)
    excluded = set(parse_account_ids(os.getenv("NET_WORTH_EXCLUDED_ACCOUNTS")))
    get_usage_logger().info(
        f"net_worth_history_cli invoked with {len(excluded)} excluded accounts"
    )

    try:
        included = [
            account.account_id
            for account in repository.fetch_accounts()
            if account.account_id not in excluded
        ]
        history = GetNetWorthHistoryUseCase(
            repository=repository,
            logger=logger,
            window_months=settings.window_months,
        ).execute(included_account_ids=included, today=settings.today)
        summary = GetNetWorthSummaryUseCase(
            repository=repository,
            logger=logger,
            currency_code=settings.currency_code,
        ).execute(included_account_ids=included)
    except (FixtureNotFoundError, InvalidRecordError) as exc:
        logger.error(str(exc))
        return 1

    print(f"Net worth history ({settings.currency_code})")
    for point in history:
        print(
            f"{point.day.isoformat()}  net_worth={point.net_worth}  "
            f"assets={point.assets}  debt={point.debt}"
        )
    print(
        f"Current: assets={summary.asset_total}, "
        f"liabilities={summary.liability_total}, "
        f"net_worth={summary.net_worth}"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
