"""Tests for the composition root."""

from pathlib import Path

from src.infrastructure import container
from src.infrastructure.json_fixture_repository import JsonFixtureRepository
from src.infrastructure.settings import DashboardSettings


def test_build_repository_uses_settings_directory(tmp_path: Path) -> None:
    """The fixture repository reads from the configured directory."""
    settings = DashboardSettings(fixtures_dir=tmp_path)

    repository = container.build_open_finance_repository(settings)

    assert isinstance(repository, JsonFixtureRepository)
    assert repository._fixtures_dir == tmp_path


def test_build_repository_defaults_to_env_settings(monkeypatch, tmp_path):
    """Without explicit settings the environment is consulted."""
    monkeypatch.setattr(
        container,
        "build_settings",
        lambda: DashboardSettings(fixtures_dir=tmp_path / "data"),
    )

    repository = container.build_open_finance_repository()

    assert repository._fixtures_dir == tmp_path / "data"
