"""Tests for config.py and logging_setup.py."""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))
from foodview.config import Settings
from foodview.logging_setup import setup_logging


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "FOODFACTS_BASE_URL",
        "FOODFACTS_TIMEOUT",
        "FOODFACTS_USER_AGENT",
        "FOODFACTS_PAGE_SIZE",
        "FOODFACTS_POLL_INTERVAL",
        "FOODFACTS_FENCE_STALE",
        "FOODFACTS_LOG_FILE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings.from_env()

        assert settings.base_url == "https://world.openfoodfacts.org"
        assert settings.request_timeout == 20.0
        assert settings.page_size == 24
        assert settings.poll_interval == 0.1
        assert settings.fence_stale_messages is True
        assert settings.log_level == "INFO"
        assert settings.log_file == ""
        assert "FoodFactsViewer" in settings.user_agent

    def test_environment_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("FOODFACTS_BASE_URL", "http://localhost:8080/")
        clean_env.setenv("FOODFACTS_TIMEOUT", "2.5")
        clean_env.setenv("FOODFACTS_PAGE_SIZE", "10")
        clean_env.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings.from_env()

        assert settings.base_url == "http://localhost:8080"
        assert settings.request_timeout == 2.5
        assert settings.page_size == 10
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("1", True), ("YES", True), ("false", False), ("0", False)],
    )
    def test_fence_flag(
        self, clean_env: pytest.MonkeyPatch, raw: str, expected: bool
    ) -> None:
        clean_env.setenv("FOODFACTS_FENCE_STALE", raw)
        assert Settings.from_env().fence_stale_messages is expected

    def test_is_frozen(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings.from_env()
        with pytest.raises(AttributeError):
            settings.page_size = 1  # type: ignore[misc]


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_logs_to_file(
        self, clean_env: pytest.MonkeyPatch, tmp_path: Path, restore_root_logger
    ) -> None:
        log_file = tmp_path / "viewer.log"
        clean_env.setenv("FOODFACTS_LOG_FILE", str(log_file))
        clean_env.setenv("LOG_LEVEL", "debug")

        setup_logging(Settings.from_env())
        logging.getLogger("foodview.test").debug("hello from test")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert restore_root_logger.level == logging.DEBUG
        assert logging.getLogger("foodview").level == logging.NOTSET
        assert logging.getLogger("foodview").getEffectiveLevel() == logging.DEBUG
        assert "hello from test" in log_file.read_text()

    def test_tui_defaults_to_file(
        self,
        clean_env: pytest.MonkeyPatch,
        tmp_path: Path,
        restore_root_logger,
    ) -> None:
        clean_env.chdir(tmp_path)

        setup_logging(Settings.from_env(), tui=True)

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.FileHandler)
        assert Path(handlers[0].baseFilename).name == "foodfacts.log"
