"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import LIABILITY_ACCOUNT_SUB_TYPES
from src.domain.models import Account


def validate_balance_sign(
    account: Account,
    balance: Decimal,
    logger: Logger,
    liability_sub_types: Iterable[str] = LIABILITY_ACCOUNT_SUB_TYPES,
) -> None:
    """Warn when balances violate expected sign conventions.

    Args:
        account: Account the balance was resolved for.
        balance: Signed resolved balance.
        logger: Logger used for warnings.
        liability_sub_types: Account sub types expected to carry debt.
    """
    is_liability = account.account_sub_type in tuple(liability_sub_types)
    if is_liability and balance > 0:
        logger.warning(
            f"Liability balance is positive for account {account.account_id} "
            f"({account.account_sub_type}): {balance}"
        )
    if not is_liability and balance < 0:
        logger.warning(
            f"Asset balance is negative for account {account.account_id} "
            f"({account.account_sub_type}): {balance}"
        )


__all__ = ["validate_balance_sign"]
