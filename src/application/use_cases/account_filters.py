"""Shared account filtering helpers for application use cases."""

from collections.abc import Iterable

from src.domain.models import Account


def resolve_included_account_ids(
    accounts: Iterable[Account],
    included_account_ids: Iterable[str] | None = None,
) -> list[str]:
    """Return the ids of known accounts that take part in net worth.

    Args:
        accounts: Accounts known to the dashboard.
        included_account_ids: Optional inclusion set; all accounts when None.

    Returns:
        list[str]: Included account ids in account order, without unknown ids.
    """
    known = [account.account_id for account in accounts]
    if included_account_ids is None:
        return known
    wanted = set(included_account_ids)
    return [account_id for account_id in known if account_id in wanted]


def parse_account_ids(raw: str | None) -> list[str]:
    """Split a comma separated list of account ids.

    Args:
        raw: Raw value such as ``"acc-1, acc-2"``.

    Returns:
        list[str]: Non-empty stripped ids.
    """
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


__all__ = ["parse_account_ids", "resolve_included_account_ids"]
