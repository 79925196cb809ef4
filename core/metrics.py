"""
Core metrics collection for the SEO audit service using Prometheus
"""
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, Info, generate_latest

from core.config import settings

# Create a global registry for the application
REGISTRY = CollectorRegistry()

# Application info
app_info = Info("seoaudit_app", "SEO audit service information", registry=REGISTRY)

# Request metrics
request_count = Counter(
    "seoaudit_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
    registry=REGISTRY,
)

request_duration = Histogram(
    "seoaudit_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0),
    registry=REGISTRY,
)

# Audit metrics
audits_run = Counter(
    "seoaudit_audits_total",
    "Total number of audits run",
    ["scope", "status"],
    registry=REGISTRY,
)

audit_duration = Histogram(
    "seoaudit_audit_duration_seconds",
    "Time taken to complete an audit",
    ["scope"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
    registry=REGISTRY,
)

audit_score = Histogram(
    "seoaudit_overall_score",
    "Distribution of overall audit scores",
    buckets=(30, 50, 60, 70, 80, 90, 95, 100),
    registry=REGISTRY,
)

# Error metrics
error_count = Counter(
    "seoaudit_errors_total",
    "Total number of errors",
    ["error_type", "domain"],
    registry=REGISTRY,
)


class MetricsCollector:
    """Thin facade over the module-level Prometheus metrics"""

    def __init__(self):
        app_info.info({"version": settings.app_version, "environment": settings.environment})

    def track_request(self, method: str, endpoint: str, status: int, duration: float):
        """Track HTTP request metrics"""
        request_count.labels(method=method, endpoint=endpoint, status=str(status)).inc()
        request_duration.labels(method=method, endpoint=endpoint).observe(duration)

    def track_audit(self, scope: str, duration: float, score: int = None, status: str = "success"):
        """Track a completed (or failed) audit run"""
        audits_run.labels(scope=scope, status=status).inc()
        audit_duration.labels(scope=scope).observe(duration)
        if score is not None:
            audit_score.observe(score)

    def track_error(self, error_type: str, domain: str):
        """Track errors"""
        error_count.labels(error_type=error_type, domain=domain).inc()

    def get_metrics(self) -> bytes:
        """Get current metrics in Prometheus format"""
        return generate_latest(REGISTRY)


# Global metrics collector instance
metrics = MetricsCollector()


def get_metrics_response() -> tuple[bytes, str]:
    """Get metrics response for Prometheus endpoint"""
    return metrics.get_metrics(), CONTENT_TYPE_LATEST
