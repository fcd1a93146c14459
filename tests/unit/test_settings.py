"""
Test suite for pydantic-settings configuration.

System role: Verification of environment mapping and defaults
"""

from pathlib import Path

import pytest

from picvoter.configs import DatabaseSettings, ScoringSettings, Settings
from picvoter.core.scoring import Z_95


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove picvoter variables inherited from the host environment."""
    for name in (
        "DATABASE_URL",
        "PICVOTER_DB_URL",
        "PICVOTER_STORAGE_DIR",
        "PICVOTER_LOG_LEVEL",
        "PICVOTER_LOG",
        "PICVOTER_DB_POOL_SIZE",
        "PICVOTER_DB_RETRY_ATTEMPTS",
        "PICVOTER_SCORING_Z",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    """Test suite for default configuration."""

    def test_database_url_should_default_to_sqlite_in_storage_dir(self) -> None:
        settings = Settings()

        assert settings.database.url.startswith("sqlite+aiosqlite:///")
        assert settings.database.url.endswith("storage/picvoter.db")
        assert settings.database.is_sqlite

    def test_scoring_should_default_to_95_percent(self) -> None:
        assert ScoringSettings().z == pytest.approx(Z_95)

    def test_log_level_should_default_to_info(self) -> None:
        assert Settings().log_level == "INFO"


class TestSettingsEnvironment:
    """Test suite for environment variable overrides."""

    def test_storage_dir_should_move_default_database(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("PICVOTER_STORAGE_DIR", str(tmp_path))

        settings = Settings()

        assert settings.storage_dir == tmp_path
        assert settings.database.url.endswith(f"{tmp_path.as_posix()}/picvoter.db")

    def test_database_url_should_read_plain_database_url(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/picvoter")

        assert Settings().database.url == "postgresql+asyncpg://u:p@db:5432/picvoter"
        assert not Settings().database.is_sqlite

    def test_prefixed_database_url_should_be_accepted(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PICVOTER_DB_URL", "sqlite+aiosqlite:///:memory:")

        assert DatabaseSettings().url == "sqlite+aiosqlite:///:memory:"

    def test_db_prefix_should_override_pool_and_retry(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PICVOTER_DB_POOL_SIZE", "3")
        monkeypatch.setenv("PICVOTER_DB_RETRY_ATTEMPTS", "7")

        db = DatabaseSettings()

        assert db.pool_size == 3
        assert db.retry_attempts == 7

    def test_scoring_prefix_should_override_z(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PICVOTER_SCORING_Z", "2.576")

        assert Settings().scoring.z == pytest.approx(2.576)

    def test_log_level_should_read_prefixed_variable(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PICVOTER_LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("warn", "WARNING"),
            ("picvoter=debug", "DEBUG"),
            ("info,alembic=warn", "INFO"),
            ("trace", "DEBUG"),
        ],
    )
    def test_log_level_should_accept_short_variable_and_filters(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: str
    ) -> None:
        monkeypatch.setenv("PICVOTER_LOG", value)

        assert Settings().log_level == expected

    def test_log_level_variable_should_win_over_short_variable(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PICVOTER_LOG", "error")
        monkeypatch.setenv("PICVOTER_LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_log_level_should_accept_keyword(self) -> None:
        assert Settings(log_level="error").log_level == "ERROR"
