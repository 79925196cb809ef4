"""
Tests for Sentry initialization
"""
from unittest.mock import patch

import pytest

from core.config import Settings
from core.observability import init_sentry

pytestmark = pytest.mark.unit

DSN = "https://public@o0.ingest.sentry.io/1"


def test_disabled_without_dsn():
    """No DSN means Sentry stays off"""
    with patch("core.observability.sentry_sdk") as mock_sentry:
        assert init_sentry(Settings(environment="production", sentry_dsn=None, _env_file=None)) is False

    mock_sentry.init.assert_not_called()


def test_disabled_in_tests():
    """Sentry never initializes in the test environment"""
    with patch("core.observability.sentry_sdk") as mock_sentry:
        assert init_sentry(Settings(environment="test", sentry_dsn=DSN, _env_file=None)) is False

    mock_sentry.init.assert_not_called()


def test_enabled_with_dsn():
    """A DSN outside tests initializes Sentry with the configured settings"""
    config = Settings(environment="production", sentry_dsn=DSN, sentry_trace_rate=0.5, _env_file=None)

    with patch("core.observability.sentry_sdk") as mock_sentry:
        assert init_sentry(config) is True

    kwargs = mock_sentry.init.call_args.kwargs
    assert kwargs["dsn"] == DSN
    assert kwargs["environment"] == "production"
    assert kwargs["traces_sample_rate"] == 0.5
    assert kwargs["release"] == config.app_version
