"""Tests for logging configuration."""

import logging

import pytest
import structlog

from storefront.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_configure_logging_filters_below_level(capsys):
    configure_logging("WARNING")
    logger = structlog.get_logger("storefront.test")

    logger.info("hidden.event")
    logger.warning("shown.event", order_id=1)

    out = capsys.readouterr().out
    assert "hidden.event" not in out
    assert "shown.event" in out
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_unknown_level_falls_back_to_info(capsys):
    configure_logging("chatty", json_logs=True)
    structlog.get_logger("storefront.test").info("info.event")

    assert '"event": "info.event"' in capsys.readouterr().out
