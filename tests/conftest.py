"""
Root conftest.py for all tests
Provides common fixtures and configuration
"""
import os
import sys

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Must be set before core.config is imported anywhere
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_FORMAT"] = "text"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("SENTRY_DSN", None)

import pytest  # noqa: E402

from seo_audit.models import Issue  # noqa: E402
from seo_audit.types import AuditCategory, ImpactLevel, IssueSeverity  # noqa: E402


@pytest.fixture
def make_issue():
    """Factory for issues with sensible defaults"""
    counter = {"n": 0}

    def _make(
        severity=IssueSeverity.WARNING,
        category=AuditCategory.TECHNICAL,
        auto_fix_available=False,
        impact=ImpactLevel.MEDIUM,
        effort=ImpactLevel.MEDIUM,
        issue_id=None,
    ):
        counter["n"] += 1
        return Issue(
            id=issue_id or f"{category.value}-{counter['n']}",
            severity=severity,
            category=category,
            code="TEST_ISSUE",
            title="Test issue",
            description="An issue created for tests",
            affected_pages=("/",),
            auto_fix_available=auto_fix_available,
            impact=impact,
            effort=effort,
        )

    return _make
