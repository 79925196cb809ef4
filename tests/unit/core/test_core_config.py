"""
Tests for settings
"""
import pytest
from pydantic import ValidationError

from core.config import PROJECT_ROOT, Settings, get_settings

pytestmark = pytest.mark.unit


def test_defaults():
    """Defaults point at the packaged benchmarks file"""
    settings = Settings(_env_file=None)

    assert settings.app_name == "SEO Audit Service"
    assert settings.default_industry == "healthcare"
    assert settings.audit_rate_limit == "60/minute"
    assert settings.sentry_dsn is None
    assert settings.industry_benchmarks_path == PROJECT_ROOT / "seo_audit" / "industry_benchmarks.yaml"
    assert settings.industry_benchmarks_path.exists()


def test_test_environment_is_active():
    """The test run uses the test environment with rate limiting off"""
    settings = get_settings()

    assert settings.environment == "test"
    assert settings.rate_limit_enabled is False
    assert not settings.is_production
    assert not settings.is_development


def test_environment_validation():
    """Unknown environments are rejected"""
    with pytest.raises(ValidationError):
        Settings(environment="qa", _env_file=None)


def test_log_level_is_uppercased():
    """Log levels are normalised to upper case and validated"""
    assert Settings(log_level="debug", _env_file=None).log_level == "DEBUG"

    with pytest.raises(ValidationError):
        Settings(log_level="verbose", _env_file=None)


def test_log_format_validation():
    """Only json and text log formats are accepted"""
    with pytest.raises(ValidationError):
        Settings(log_format="xml", _env_file=None)


def test_sentry_trace_rate_bounds():
    """Trace sample rate must be between 0 and 1"""
    with pytest.raises(ValidationError):
        Settings(sentry_trace_rate=1.5, _env_file=None)


def test_env_override(monkeypatch):
    """Environment variables override defaults"""
    monkeypatch.setenv("DEFAULT_INDUSTRY", "legal")
    monkeypatch.setenv("AUDIT_RATE_LIMIT", "5/second")

    settings = Settings(_env_file=None)

    assert settings.default_industry == "legal"
    assert settings.audit_rate_limit == "5/second"


def test_summary():
    """The summary reports a disabled rate limit"""
    summary = Settings(rate_limit_enabled=False, _env_file=None).summary()

    assert summary["rate_limit"] == "disabled"
    assert summary["default_industry"] == "healthcare"
