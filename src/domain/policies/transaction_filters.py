"""Policies deciding which transactions feed the balance history."""

from collections.abc import Callable, Iterable

from src.domain.constants import (
    DEFAULT_QUALIFYING_STATUSES,
    DEFAULT_QUALIFYING_SUB_TYPES,
)
from src.domain.models import Transaction

TransactionPredicate = Callable[[Transaction], bool]


def build_transaction_predicate(
    statuses: Iterable[str] = DEFAULT_QUALIFYING_STATUSES,
    sub_types: Iterable[str] = DEFAULT_QUALIFYING_SUB_TYPES,
) -> TransactionPredicate:
    """Return a predicate accepting the given statuses and sub types.

    Args:
        statuses: Transaction statuses that count towards the balance.
        sub_types: Sub transaction types that count towards the balance.

    Returns:
        TransactionPredicate: Callable returning True for qualifying entries.
    """
    allowed_statuses = frozenset(statuses)
    allowed_sub_types = frozenset(sub_types)

    def _predicate(transaction: Transaction) -> bool:
        return (
            transaction.status in allowed_statuses
            and transaction.sub_transaction_type in allowed_sub_types
        )

    return _predicate


def is_qualifying_transaction(transaction: Transaction) -> bool:
    """Return True for Booked Purchase and Deposit transactions."""
    return (
        transaction.status in DEFAULT_QUALIFYING_STATUSES
        and transaction.sub_transaction_type in DEFAULT_QUALIFYING_SUB_TYPES
    )


__all__ = [
    "TransactionPredicate",
    "build_transaction_predicate",
    "is_qualifying_transaction",
]
