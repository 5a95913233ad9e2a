"""Unit tests for structured logging configuration.

Tests the structlog configuration and logging output format.
"""

import json
import logging
import os
from collections.abc import Iterator
from io import StringIO
from unittest.mock import patch

import pytest
import structlog

from audit_catalog.infrastructure.observability.logging import (
    _get_log_level,
    configure_structlog,
    get_logger_for_service,
)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestConfigureStructlog:
    """Tests for configure_structlog function."""

    def test_configure_production_mode(self) -> None:
        """Production mode renders JSON."""
        configure_structlog(environment="production")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_development_mode(self) -> None:
        """Development mode renders to the console."""
        configure_structlog(environment="development")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_defaults_to_production(self) -> None:
        configure_structlog()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_json_entry_written_to_stream(self) -> None:
        """A production log line is one JSON object with level and timestamp."""
        stream = StringIO()
        configure_structlog(environment="production", stream=stream)

        structlog.get_logger().info("catalog_settled", records=3)

        entry = json.loads(stream.getvalue().strip())
        assert entry["event"] == "catalog_settled"
        assert entry["records"] == 3
        assert entry["level"] == "info"
        assert "timestamp" in entry


class TestLogLevel:
    """Tests for LOG_LEVEL handling."""

    def test_default_level_is_info(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _get_log_level() == logging.INFO

    def test_level_from_env(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert _get_log_level() == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}):
            assert _get_log_level() == logging.INFO

    def test_filtered_below_level(self) -> None:
        stream = StringIO()
        with patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}):
            configure_structlog(environment="production", stream=stream)

        structlog.get_logger().info("remote_listing_fetched")
        structlog.get_logger().warning("remote_listing_failed", kind="status")

        lines = stream.getvalue().strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["event"] == "remote_listing_failed"


class TestGetLoggerForService:
    """Tests for get_logger_for_service."""

    def test_binds_service_and_component(self) -> None:
        stream = StringIO()
        configure_structlog(environment="production", stream=stream)

        get_logger_for_service("show_audit_catalog", component="cli").info("started")

        entry = json.loads(stream.getvalue().strip())
        assert entry["service"] == "show_audit_catalog"
        assert entry["component"] == "cli"

    def test_default_component(self) -> None:
        stream = StringIO()
        configure_structlog(environment="production", stream=stream)

        get_logger_for_service("CatalogAggregatorService").info("started")

        assert json.loads(stream.getvalue().strip())["component"] == "catalog"
