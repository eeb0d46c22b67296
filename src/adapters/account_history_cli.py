"""CLI adapter printing the reconstructed balance history of one account."""

import sys

from src.application.use_cases.get_account_history import (
    GetAccountHistoryUseCase,
)
from src.domain.errors import FixtureNotFoundError, InvalidRecordError
from src.infrastructure.container import (
    build_open_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main(argv: list[str] | None = None) -> int:
    """Print the daily balances of the account given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    logger = get_app_logger()
    if len(args) != 1:
        logger.warning("Usage: account_history_cli <ACCOUNT_ID>")
        return 2
    account_id = args[0]
    get_usage_logger().info(f"account_history_cli invoked for {account_id}")

    settings = build_settings()
    repository = build_open_finance_repository(settings)
    use_case = GetAccountHistoryUseCase(repository=repository, logger=logger)
    try:
        history = use_case.execute(account_id, today=settings.today)
    except (FixtureNotFoundError, InvalidRecordError) as exc:
        logger.error(str(exc))
        return 1

    print(f"Balance history for {account_id}")
    for entry in history:
        print(f"{entry.day.isoformat()}  {entry.balance}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
