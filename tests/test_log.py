"""Tests for package logging."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from taxjar.client.sync_client import Client
from taxjar.log import enable_debug_logging, logger


@pytest.fixture
def debug_handler():
    handler = enable_debug_logging()
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestLogging:
    def test_null_handler_installed(self) -> None:
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_enable_debug_logging(self, debug_handler) -> None:
        assert isinstance(debug_handler, RichHandler)
        assert debug_handler in logger.handlers
        assert logger.level == logging.DEBUG

    def test_request_logged_without_key(self, stub, caplog: pytest.LogCaptureFixture) -> None:
        transport = stub(200, {"categories": []})
        with caplog.at_level(logging.DEBUG, logger="taxjar"):
            with Client(api_key="secret-key", http_client=transport.sync_client()) as client:
                client.categories()

        messages = [record.getMessage() for record in caplog.records]
        assert "GET categories" in messages
        assert "GET categories -> HTTP 200" in messages
        assert not any("secret-key" in m for m in messages)
