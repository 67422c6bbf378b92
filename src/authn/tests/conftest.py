# ABOUTME: pytest configuration for authn tests
# ABOUTME: Configures timeouts and provides builders for v4 and v5 token documents

import base64
import json
from typing import Any, Callable

import pytest
from loguru import logger


def pytest_configure(config):
    """Configure pytest for authn tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "contract: Contract tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract"]):
            item.add_marker(pytest.mark.timeout(60))


def encode_payload(claims: dict[str, Any]) -> str:
    """Encode claims the way the authentication service does: standard, padded base64 JSON."""
    return base64.b64encode(json.dumps(claims).encode("utf-8")).decode("ascii")


@pytest.fixture
def make_v5_token() -> Callable[..., bytes]:
    """Build raw v5 token bytes from claims, or from an already encoded payload string."""

    def _make(claims: dict[str, Any] | None = None, *, payload: str | None = None, **extra: Any) -> bytes:
        if payload is None:
            payload = encode_payload(claims if claims is not None else {"sub": "admin", "iat": 1000})
        document = {
            "protected": "eyJhbGciOiJjb25qdXIub3JnL3Nsb3NpbG8vdjIiLCJraWQiOiI5M2VjNTEwODRmZTM3Zjc3M2I1ODhlNTYyYWVjZGMxMSJ9",
            "payload": payload,
            "signature": "raCufKOf7sKzciZInQTphu1mBbLhAdIJM72ChLB4m5wK",
        }
        document.update(extra)
        return json.dumps(document).encode("utf-8")

    return _make


@pytest.fixture
def make_v4_token() -> Callable[..., bytes]:
    """Build raw v4 token bytes with the given timestamp string."""

    def _make(timestamp: str = "2020-01-01 00:00:00 UTC", **extra: Any) -> bytes:
        document = {
            "data": "admin",
            "timestamp": timestamp,
            "signature": "c2lnbmF0dXJl",
            "key": "93ec51084fe37f773b588e562aecdc11",
        }
        document.update(extra)
        return json.dumps(document).encode("utf-8")

    return _make


@pytest.fixture
def log_records():
    """Capture authn log messages emitted through loguru."""
    records: list[dict[str, Any]] = []
    logger.enable("authn")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
    logger.disable("authn")
