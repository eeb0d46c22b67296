"""Composition root for wiring infrastructure adapters."""

from src.application.ports.open_finance_repository import (
    OpenFinanceRepositoryPort,
)
from src.infrastructure.json_fixture_repository import JsonFixtureRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def build_settings() -> DashboardSettings:
    """Return settings sourced from the environment."""
    return DashboardSettings.from_env()


def build_open_finance_repository(
    settings: DashboardSettings | None = None,
) -> OpenFinanceRepositoryPort:
    """Return the fixture-backed Open Finance repository."""
    resolved = settings or build_settings()
    return JsonFixtureRepository(
        resolved.fixtures_dir,
        logger=get_app_logger(),
    )


__all__ = ["build_open_finance_repository", "build_settings"]
