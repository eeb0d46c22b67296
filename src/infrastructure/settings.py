"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import date
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.domain.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_NET_WORTH_WINDOW_MONTHS,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for loading fixtures and computing dashboard views.

    Attributes:
        fixtures_dir: Directory holding the Open Finance JSON fixtures.
        window_months: Trailing window of the net worth series.
        currency_code: Currency used to report totals.
        today: Optional pinned reference day.
    """

    fixtures_dir: Path
    window_months: int = DEFAULT_NET_WORTH_WINDOW_MONTHS
    currency_code: str = DEFAULT_CURRENCY
    today: Optional[date] = None

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_dir = os.getenv("OPEN_FINANCE_FIXTURES_DIR")
        if raw_dir:
            fixtures_dir = cls._normalize_path(raw_dir, logger=logger)
        else:
            fixtures_dir = get_project_root() / "data"
        window_months = cls._parse_window(
            os.getenv("NET_WORTH_WINDOW_MONTHS"),
            logger=logger,
        )
        currency_code = (
            os.getenv("DASHBOARD_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        today = cls._parse_today(os.getenv("DASHBOARD_TODAY"), logger=logger)
        return cls(
            fixtures_dir=fixtures_dir,
            window_months=window_months,
            currency_code=currency_code,
            today=today,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the fixtures directory path or file URI.

        Args:
            raw_path: Raw directory path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute directory path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.is_dir():
            logger.warning(f"Fixtures directory does not exist at {path}")
        return path

    @staticmethod
    def _parse_window(raw_value: str | None, logger) -> int:
        if not raw_value:
            return DEFAULT_NET_WORTH_WINDOW_MONTHS
        try:
            months = int(raw_value)
        except ValueError:
            months = 0
        if months <= 0:
            logger.warning(
                f"Invalid NET_WORTH_WINDOW_MONTHS '{raw_value}'. "
                f"Using {DEFAULT_NET_WORTH_WINDOW_MONTHS}."
            )
            return DEFAULT_NET_WORTH_WINDOW_MONTHS
        return months

    @staticmethod
    def _parse_today(raw_value: str | None, logger) -> date | None:
        if not raw_value:
            return None
        try:
            return date.fromisoformat(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid DASHBOARD_TODAY '{raw_value}'. Expected format YYYY-MM-DD."
            )
            return None


__all__ = ["DashboardSettings"]
