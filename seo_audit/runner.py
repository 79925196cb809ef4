"""
SEO Audit Runner

Runs every category check, scores the categories, combines them into the
overall score and ranks recommendations. Shared by the HTTP route and CLI.
"""
import time
from datetime import datetime, timezone
from typing import Optional

from core.exceptions import ValidationError
from core.logging import get_logger
from core.metrics import metrics

from .checks import CATEGORY_CHECKS
from .constants import CATEGORY_WEIGHTS
from .models import AuditResult
from .recommendations import generate_recommendations
from .scoring import calculate_category_result, calculate_overall_score
from .types import AuditScope

logger = get_logger(__name__, domain="seo_audit")


def validate_project_id(project_id: Optional[str]) -> str:
    """Return the stripped project id or raise ValidationError"""
    if project_id is None or not project_id.strip():
        raise ValidationError("Project ID is required", field="projectId", error_code="MISSING_PROJECT_ID")
    return project_id.strip()


def parse_scope(scope: Optional[str]) -> AuditScope:
    """Parse a scope string, defaulting to a full audit"""
    if not scope:
        return AuditScope.FULL
    try:
        return AuditScope(scope.lower())
    except ValueError:
        raise ValidationError(
            f"Scope must be one of: {AuditScope.values()}",
            field="scope",
            error_code="INVALID_SCOPE",
        )


def run_audit(project_id: Optional[str], scope: Optional[str] = None) -> AuditResult:
    """
    Run an SEO audit for a project.

    All five categories are always checked because the overall score is
    defined over all of them; the scope is recorded on the result.

    Args:
        project_id: Project identifier
        scope: Audit scope (see AuditScope), defaults to "full"

    Returns:
        AuditResult

    Raises:
        ValidationError: if the project id is missing or the scope is unknown
    """
    project_id = validate_project_id(project_id)
    audit_scope = parse_scope(scope)
    audit_logger = logger.with_context(project_id=project_id, scope=audit_scope.value)

    start_time = time.time()
    try:
        breakdown = {}
        for category, check in CATEGORY_CHECKS.items():
            run = check()
            breakdown[category] = calculate_category_result(run.issues, run.total_checks, CATEGORY_WEIGHTS[category])
            audit_logger.debug(f"Scored {category.value}: {breakdown[category].score}")

        issues = tuple(issue for result in breakdown.values() for issue in result.issues)
        result = AuditResult(
            project_id=project_id,
            score=calculate_overall_score(breakdown),
            breakdown=breakdown,
            issues=issues,
            recommendations=tuple(generate_recommendations(issues)),
            timestamp=datetime.now(timezone.utc),
            scope=audit_scope,
        )
    except Exception:
        metrics.track_audit(audit_scope.value, time.time() - start_time, status="failed")
        raise

    metrics.track_audit(audit_scope.value, time.time() - start_time, score=result.score)
    audit_logger.info(f"Audit complete: score={result.score}, issues={len(result.issues)}")
    return result
