"""Pytest configuration and shared fixtures for all tests."""

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
from loguru import logger

from chaincmd.bootstrap import build_chain_registry, create_application
from chaincmd.console import BufferedOutput
from chaincmd.testing import ApplicationTester


class LogCapture:
    """Collects loguru records emitted while a test runs."""

    def __init__(self):
        self.records: List[Dict[str, Any]] = []

    def sink(self, message) -> None:
        self.records.append(message.record)

    def messages(self, level: Optional[str] = None) -> List[str]:
        """Get captured messages, optionally only those of one level."""
        return [
            r["message"] for r in self.records
            if level is None or r["level"].name == level
        ]

    def count(self, text: str) -> int:
        return sum(1 for message in self.messages() if text in message)


@pytest.fixture
def logs() -> LogCapture:
    """Capture loguru output for the duration of a test."""
    capture = LogCapture()
    handler_id = logger.add(capture.sink, level="DEBUG", format="{message}")
    yield capture
    logger.remove(handler_id)


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def output() -> BufferedOutput:
    return BufferedOutput()


@pytest.fixture
def registry():
    """Registry holding the default foo:hello -> bar:hi chain."""
    return build_chain_registry()


@pytest.fixture
def application(registry):
    return create_application(registry=registry, catch_exceptions=False)


@pytest.fixture
def tester(application) -> ApplicationTester:
    return ApplicationTester(application)
