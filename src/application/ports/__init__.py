"""Application ports package."""

from .open_finance_repository import OpenFinanceRepositoryPort

__all__ = ["OpenFinanceRepositoryPort"]
