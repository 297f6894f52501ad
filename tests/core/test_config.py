"""Unit tests for settings and logging helpers."""

import io
import logging
from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from addrspec.core.config import Settings, configure_logging, get_settings
from addrspec.core.logging import PACKAGE_LOGGER, get_logger, setup_logging
from addrspec.grammar.domain.options import Options


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    """Clear the cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings."""

    def test_defaults_match_options(self) -> None:
        """Test that unset variables give the default policy."""
        settings = Settings()

        assert settings.to_options() == Options()
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that ADDRSPEC_* variables override the defaults."""
        monkeypatch.setenv("ADDRSPEC_MINIMUM_SUB_DOMAINS", "2")
        monkeypatch.setenv("ADDRSPEC_ALLOW_DOMAIN_LITERAL", "false")

        settings = get_settings()
        options = settings.to_options()

        assert options.minimum_sub_domains == 2
        assert options.allow_domain_literal is False

    def test_log_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the log level can be set for setup_logging."""
        monkeypatch.setenv("ADDRSPEC_LOG_LEVEL", "DEBUG")

        assert Settings().log_level == "DEBUG"

    def test_rejects_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that only standard level names are accepted."""
        monkeypatch.setenv("ADDRSPEC_LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_negative_minimum(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that invalid environment values fail loudly."""
        monkeypatch.setenv("ADDRSPEC_MINIMUM_SUB_DOMAINS", "-1")

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self) -> None:
        """Test that get_settings returns one shared instance."""
        assert get_settings() is get_settings()


class TestLogging:
    """Tests for logging helpers."""

    def test_get_logger_is_named(self) -> None:
        """Test that loggers are looked up by name."""
        logger = get_logger("addrspec.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "addrspec.test"

    def test_setup_logging_writes_package_records(self) -> None:
        """Test that package records reach the configured stream."""
        stream = io.StringIO()
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        previous_level = package_logger.level

        setup_logging("DEBUG", stream=stream)
        setup_logging("DEBUG", stream=stream)
        try:
            get_logger("addrspec.test").debug("checked %d addresses", 3)
        finally:
            for handler in list(package_logger.handlers):
                if not isinstance(handler, logging.NullHandler):
                    package_logger.removeHandler(handler)
            package_logger.setLevel(previous_level)

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert "| DEBUG    | addrspec.test | checked 3 addresses" in lines[0]

    def test_configure_logging_uses_settings_level(self) -> None:
        """Test that configure_logging applies Settings.log_level."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        previous_level = package_logger.level
        previous_handlers = list(package_logger.handlers)

        configure_logging(Settings(log_level="WARNING"))
        try:
            assert package_logger.level == logging.WARNING
            assert len(package_logger.handlers) == len(previous_handlers) + 1
        finally:
            for handler in list(package_logger.handlers):
                if handler not in previous_handlers:
                    package_logger.removeHandler(handler)
            package_logger.setLevel(previous_level)
