"""Domain policies package."""

from .transaction_filters import (
    TransactionPredicate,
    build_transaction_predicate,
    is_qualifying_transaction,
)

__all__ = [
    "TransactionPredicate",
    "build_transaction_predicate",
    "is_qualifying_transaction",
]
