"""
SEO Audit - Scoring and recommendations for healthcare websites

Scores five audit categories by issue severity, combines them into a
weighted overall score and ranks recommendations from the issues found.
"""

from .models import AuditResult, AuditStats, CategoryResult, CheckRun, Issue, Recommendation
from .recommendations import generate_recommendations
from .runner import run_audit
from .scoring import calculate_category_result, calculate_category_score, calculate_overall_score
from .types import AuditCategory, AuditScope, ImpactLevel, IssueSeverity

__all__ = [
    # Models
    "AuditResult",
    "AuditStats",
    "CategoryResult",
    "CheckRun",
    "Issue",
    "Recommendation",
    # Types
    "AuditCategory",
    "AuditScope",
    "ImpactLevel",
    "IssueSeverity",
    # Operations
    "calculate_category_score",
    "calculate_category_result",
    "calculate_overall_score",
    "generate_recommendations",
    "run_audit",
]
