"""
Tests for the SEO audit HTTP endpoint
"""
from unittest.mock import patch

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from core.exceptions import ScoringError
from main import app, rate_limit_exceeded_handler

pytestmark = pytest.mark.integration

AUDIT_URL = "/api/healthcare/seo-audit"


@pytest.fixture
def client():
    return TestClient(app)


class TestSuccess:
    @pytest.mark.critical
    def test_success_envelope(self, client):
        """A valid request returns the audit inside {success, data}"""
        response = client.get(AUDIT_URL, params={"projectId": "proj_123"})

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"success", "data"}
        assert body["success"] is True

        data = body["data"]
        assert data["projectId"] == "proj_123"
        assert data["scope"] == "full"
        assert data["score"] == 92
        assert data["grade"] == "A"
        assert data["timestamp"]

    def test_breakdown_uses_camel_case_keys(self, client):
        """Breakdown keys are camelCase, including localSeo"""
        data = client.get(AUDIT_URL, params={"projectId": "proj_123"}).json()["data"]

        assert set(data["breakdown"]) == {"technical", "content", "localSeo", "schema", "eeat"}
        local = data["breakdown"]["localSeo"]
        assert local == {
            "score": 85,
            "weight": 0.25,
            "passed": 9,
            "failed": 1,
            "warnings": 1,
            "issues": local["issues"],
        }
        assert [i["id"] for i in local["issues"]] == ["local-1", "local-2"]

    def test_issue_fields(self, client):
        """Issues are serialized with camelCase field names"""
        data = client.get(AUDIT_URL, params={"projectId": "proj_123"}).json()["data"]

        assert len(data["issues"]) == 10
        issue = data["issues"][0]
        assert issue["id"] == "tech-1"
        assert issue["severity"] == "warning"
        assert issue["category"] == "technical"
        assert issue["autoFixAvailable"] is True
        assert "affectedPages" in issue
        assert "howToFix" in issue

    def test_recommendations(self, client):
        """Recommendations are ordered by priority"""
        data = client.get(AUDIT_URL, params={"projectId": "proj_123"}).json()["data"]

        recommendations = data["recommendations"]
        assert [r["priority"] for r in recommendations] == [1, 2, 3]
        assert recommendations[0]["relatedIssues"] == ["local-1"]
        assert recommendations[2]["relatedIssues"] == ["local-1", "eeat-1"]
        assert "expectedImpact" in recommendations[0]

    def test_stats_and_benchmarks(self, client):
        """Stats and the default industry benchmark are included"""
        data = client.get(AUDIT_URL, params={"projectId": "proj_123"}).json()["data"]

        assert data["stats"] == {
            "totalIssues": 10,
            "criticalIssues": 1,
            "warningIssues": 5,
            "infoIssues": 4,
            "autoFixableIssues": 6,
            "quickWins": 2,
        }
        assert data["benchmarks"]["industry"] == "healthcare"
        assert data["benchmarks"]["vsIndustry"] == "above"
        assert data["benchmarks"]["percentile"] == 100

    def test_industry_parameter(self, client):
        """The industry parameter selects the benchmark"""
        data = client.get(AUDIT_URL, params={"projectId": "proj_123", "industry": "technology"}).json()["data"]

        assert data["benchmarks"]["industry"] == "technology"
        assert data["benchmarks"]["industryAverage"] == 70

    def test_scope_is_echoed(self, client):
        """The requested scope is echoed in the result"""
        response = client.get(AUDIT_URL, params={"projectId": "proj_123", "scope": "local"})

        assert response.status_code == 200
        assert response.json()["data"]["scope"] == "local"


class TestErrors:
    def test_missing_project_id(self, client):
        """No projectId gives a 400 with exactly code and message"""
        response = client.get(AUDIT_URL)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": {"code": "MISSING_PROJECT_ID", "message": "Project ID is required"},
        }

    def test_blank_project_id(self, client):
        """A blank projectId is treated as missing"""
        response = client.get(AUDIT_URL, params={"projectId": "  "})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": {"code": "MISSING_PROJECT_ID", "message": "Project ID is required"},
        }

    def test_invalid_scope(self, client):
        """An unknown scope gives a 400 without extra error fields"""
        response = client.get(AUDIT_URL, params={"projectId": "proj_123", "scope": "everything"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert set(body["error"]) == {"code", "message"}
        assert body["error"]["code"] == "INVALID_SCOPE"

    def test_unexpected_failure_is_audit_error(self, client):
        """Unexpected exceptions become a 500 AUDIT_ERROR"""
        with patch("seo_audit.api.run_audit", side_effect=RuntimeError("boom")):
            response = client.get(AUDIT_URL, params={"projectId": "proj_123"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": {"code": "AUDIT_ERROR", "message": "boom"}}

    def test_failure_without_message_uses_default(self, client):
        """An exception without a message uses the default text"""
        with patch("seo_audit.api.run_audit", side_effect=RuntimeError()):
            response = client.get(AUDIT_URL, params={"projectId": "proj_123"})

        assert response.status_code == 500
        assert response.json()["error"]["message"] == "Failed to run SEO audit"

    def test_service_errors_keep_their_code(self, client):
        """Service errors keep their own code and do not leak details"""
        with patch("seo_audit.api.run_audit", side_effect=ScoringError("Missing categories", missing=["eeat"])):
            response = client.get(AUDIT_URL, params={"projectId": "proj_123"})

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {"code": "SCORING_ERROR", "message": "Missing categories"},
        }


def test_rate_limited_requests_use_error_envelope():
    """Requests over the limit get a 429 RATE_LIMITED envelope"""
    limiter = Limiter(key_func=get_remote_address)
    limited_app = FastAPI()
    limited_app.state.limiter = limiter
    limited_app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @limited_app.get("/limited")
    @limiter.limit("1/minute")
    async def limited(request: Request):
        return {"ok": True}

    client = TestClient(limited_app)
    assert client.get("/limited").status_code == 200

    response = client.get("/limited")

    assert response.status_code == 429
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "RATE_LIMITED"
    assert body["error"]["message"].startswith("Rate limit exceeded")


def test_health(client):
    """Health check reports status and environment"""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["environment"] == "test"


def test_metrics_endpoint(client):
    """Prometheus metrics include audit and request counters"""
    client.get(AUDIT_URL, params={"projectId": "proj_123"})
    response = client.get("/metrics")

    assert response.status_code == 200
    assert "seoaudit_audits_total" in response.text
    assert "seoaudit_http_requests_total" in response.text
