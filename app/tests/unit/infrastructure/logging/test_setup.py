"""Tests for infrastructure.logging.setup module."""

import logging

import pytest
import structlog

from infrastructure.logging.setup import SILENT_LEVEL, build_processors, configure_logging, get_module_logger

pytestmark = pytest.mark.unit


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING"])
    @pytest.mark.parametrize("json_output", [True, False])
    def test_records_are_dropped_under_pytest(self, level, json_output):
        """Explicit levels do not re-enable output in tests."""
        configure_logging(level=level, json_output=json_output)

        assert logging.getLogger().level == SILENT_LEVEL

    def test_does_not_read_settings_under_pytest(self, monkeypatch):
        """Settings are left alone while tests run."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        configure_logging()

        assert logging.getLogger().level == SILENT_LEVEL

    def test_exceptions_log_without_raising(self):
        """exception() works on the configured logger."""
        logger = configure_logging()
        try:
            raise ValueError("broken catalog")
        except ValueError:
            logger.exception("translation_failed", key="greeting")


class TestBuildProcessors:
    """Tests for build_processors."""

    def test_json_renderer_last(self):
        """JSON output ends the chain with the JSON renderer."""
        assert isinstance(build_processors(json_output=True)[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_last(self):
        """Console output ends the chain with the console renderer."""
        assert isinstance(build_processors(json_output=False)[-1], structlog.dev.ConsoleRenderer)


class TestGetModuleLogger:
    """Tests for get_module_logger."""

    def test_binds_calling_module(self):
        """The calling module is bound as component and module_path."""
        context = structlog.get_context(get_module_logger())

        assert context["module_path"] == __name__
        assert context["component"] == "test_setup"

    def test_engine_module_loggers(self):
        """Engine modules carry their own component name."""
        from infrastructure.i18n import backends, translator

        assert structlog.get_context(translator.logger)["component"] == "translator"
        assert structlog.get_context(backends.logger)["module_path"] == "infrastructure.i18n.backends"
