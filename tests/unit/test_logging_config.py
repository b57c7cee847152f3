"""Unit Tests for structlog configuration."""

import logging

import pytest
import structlog

from example_data_extractor.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_renderer(self) -> None:
        configure_logging("info", "json")
        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.stdlib.filter_by_level in processors

    def test_console_renderer(self) -> None:
        configure_logging("debug", "console")
        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_stdlib_logger_factory(self) -> None:
        configure_logging("warning", "console")
        config = structlog.get_config()

        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)

    def test_noisy_loggers_quieted(self) -> None:
        configure_logging("debug", "console")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("gradio").level == logging.WARNING
