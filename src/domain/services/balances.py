"""Domain services resolving the current balance of an account."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import BALANCE_TYPE_PRIORITY
from src.domain.models import BalanceSnapshot


def select_balance_snapshot(
    account_id: str,
    snapshots: Iterable[BalanceSnapshot],
    logger: Logger | None = None,
) -> BalanceSnapshot | None:
    """Return the most authoritative balance snapshot for an account.

    The first balance type of ``BALANCE_TYPE_PRIORITY`` that has snapshots
    wins, and within that type the most recent snapshot is selected. Ties on
    ``date_time`` keep the snapshot that appears first in ``snapshots``.

    Args:
        account_id: Account to resolve.
        snapshots: Full snapshot collection, not pre-filtered.
        logger: Optional logger used for data warnings.

    Returns:
        BalanceSnapshot | None: Selected snapshot, or None when the account
        has no snapshots.
    """
    account_snapshots = [
        snapshot for snapshot in snapshots if snapshot.account_id == account_id
    ]
    if not account_snapshots:
        return None

    for balance_type in BALANCE_TYPE_PRIORITY:
        candidates = [
            snapshot
            for snapshot in account_snapshots
            if snapshot.balance_type == balance_type
        ]
        if candidates:
            return _most_recent(candidates)

    if logger is not None:
        unknown_types = sorted(
            {snapshot.balance_type for snapshot in account_snapshots}
        )
        logger.warning(
            f"No prioritized balance type for account {account_id}; "
            f"falling back to most recent of {unknown_types}"
        )
    return _most_recent(account_snapshots)


def resolve_balance(
    account_id: str,
    snapshots: Iterable[BalanceSnapshot],
    logger: Logger | None = None,
) -> Decimal:
    """Return the signed current balance of an account.

    Args:
        account_id: Account to resolve.
        snapshots: Full snapshot collection, not pre-filtered.
        logger: Optional logger used for data warnings.

    Returns:
        Decimal: Signed balance (Debit negated), or zero without snapshots.
    """
    snapshot = select_balance_snapshot(account_id, snapshots, logger=logger)
    if snapshot is None:
        return Decimal("0")
    return snapshot.signed_amount


def _most_recent(snapshots: list[BalanceSnapshot]) -> BalanceSnapshot:
    # sorted() is stable, so equal timestamps keep their input order.
    return sorted(snapshots, key=lambda item: item.date_time, reverse=True)[0]


__all__ = ["resolve_balance", "select_balance_snapshot"]
