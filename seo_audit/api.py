"""
SEO Audit API Endpoints

GET /api/healthcare/seo-audit runs an audit for a project and returns the
scored result in a {success, data} envelope. Errors are raised as service
exceptions and rendered as {success: false, error: {code, message}} by the
application's exception handlers.
"""
from typing import Optional

from fastapi import APIRouter, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from core.config import settings
from core.exceptions import AuditError, AuditServiceError
from core.logging import get_logger
from core.metrics import metrics

from .grading import compare_to_benchmarks, get_score_grade
from .runner import run_audit
from .schemas import AuditResponse, AuditResultSchema, ErrorResponse
from .stats import calculate_audit_stats

logger = get_logger("seo_audit_api", domain="seo_audit")

# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

router = APIRouter(prefix="/api/healthcare", tags=["seo-audit"])


@router.get(
    "/seo-audit",
    response_model=AuditResponse,
    response_model_by_alias=True,
    summary="Run SEO Audit",
    description="Run an SEO audit on a project and return scores, issues and prioritized recommendations",
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@limiter.limit(settings.audit_rate_limit)
async def seo_audit(
    request: Request,
    project_id: Optional[str] = Query(None, alias="projectId", description="Project identifier"),
    scope: Optional[str] = Query("full", description="Audit scope"),
    industry: Optional[str] = Query(None, description="Industry for benchmark comparison"),
) -> AuditResponse:
    """Run an SEO audit on a project"""
    try:
        result = run_audit(project_id, scope)
        data = AuditResultSchema.build(
            result,
            grade=get_score_grade(result.score),
            stats=calculate_audit_stats(result),
            benchmarks=compare_to_benchmarks(result.score, industry or settings.default_industry),
        )
        return AuditResponse(data=data)

    except AuditServiceError as e:
        metrics.track_error(error_type=e.error_code, domain="seo_audit")
        raise
    except Exception as e:
        logger.exception(f"Error running SEO audit for project {project_id}")
        metrics.track_error(error_type="AUDIT_ERROR", domain="seo_audit")
        raise AuditError(str(e) or "Failed to run SEO audit", project_id=project_id) from e
