"""Constants for audit scoring."""

from .types import AuditCategory, IssueSeverity

# Category weights for the overall score; must sum to 1.0
CATEGORY_WEIGHTS = {
    AuditCategory.TECHNICAL: 0.25,
    AuditCategory.CONTENT: 0.25,
    AuditCategory.LOCAL_SEO: 0.25,
    AuditCategory.SCHEMA: 0.15,
    AuditCategory.EEAT: 0.10,
}

# Points deducted from the 100-point baseline per issue
SEVERITY_DEDUCTIONS = {
    IssueSeverity.CRITICAL: 10,
    IssueSeverity.WARNING: 5,
    IssueSeverity.INFO: 1,
}

MAX_SCORE = 100
MIN_SCORE = 0

# Letter grades used in API responses (score >= threshold)
GRADE_THRESHOLDS = [
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
]
FAILING_GRADE = "F"

# Benchmark comparison band around the industry average
BENCHMARK_BAND = 5
# Assumed floor for percentile estimation
BENCHMARK_FLOOR = 30
