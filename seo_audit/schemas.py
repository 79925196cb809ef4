"""
SEO Audit API Schemas

Pydantic response models for the audit endpoint. Field names are snake_case
in Python and camelCase on the wire.
"""

from dataclasses import asdict
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import AuditResult, AuditStats, BenchmarkComparison, CategoryResult, Issue, Recommendation


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IssueSchema(CamelModel):
    """A single audit issue"""

    id: str
    severity: str
    category: str
    code: str
    title: str
    description: str
    affected_pages: list[str]
    how_to_fix: str
    auto_fix_available: bool
    auto_fix_action: str | None = None
    impact: str
    effort: str
    learn_more_url: str | None = None

    @classmethod
    def from_issue(cls, issue: Issue) -> "IssueSchema":
        return cls(
            id=issue.id,
            severity=issue.severity.value,
            category=issue.category.value,
            code=issue.code,
            title=issue.title,
            description=issue.description,
            affected_pages=list(issue.affected_pages),
            how_to_fix=issue.how_to_fix,
            auto_fix_available=issue.auto_fix_available,
            auto_fix_action=issue.auto_fix_action,
            impact=issue.impact.value,
            effort=issue.effort.value,
            learn_more_url=issue.learn_more_url,
        )


class CategoryResultSchema(CamelModel):
    """Score and counts for one category"""

    score: int = Field(..., ge=0, le=100)
    weight: float
    passed: int
    failed: int
    warnings: int
    issues: list[IssueSchema]

    @classmethod
    def from_result(cls, result: CategoryResult) -> "CategoryResultSchema":
        return cls(
            score=result.score,
            weight=result.weight,
            passed=result.passed,
            failed=result.failed,
            warnings=result.warnings,
            issues=[IssueSchema.from_issue(i) for i in result.issues],
        )


class RecommendationSchema(CamelModel):
    """A prioritized recommendation"""

    priority: int
    title: str
    description: str
    expected_impact: str
    related_issues: list[str]

    @classmethod
    def from_recommendation(cls, recommendation: Recommendation) -> "RecommendationSchema":
        return cls(
            priority=recommendation.priority,
            title=recommendation.title,
            description=recommendation.description,
            expected_impact=recommendation.expected_impact,
            related_issues=list(recommendation.related_issues),
        )


class BenchmarkSchema(CamelModel):
    industry: str
    industry_average: int
    vs_industry: str
    percentile: int
    top_performers: int


class StatsSchema(CamelModel):
    total_issues: int
    critical_issues: int
    warning_issues: int
    info_issues: int
    auto_fixable_issues: int
    quick_wins: int


class AuditResultSchema(CamelModel):
    """Complete audit result"""

    project_id: str
    scope: str
    score: int = Field(..., ge=0, le=100)
    grade: str
    timestamp: datetime
    breakdown: dict[str, CategoryResultSchema]
    issues: list[IssueSchema]
    recommendations: list[RecommendationSchema]
    stats: StatsSchema
    benchmarks: BenchmarkSchema

    @classmethod
    def build(
        cls, result: AuditResult, grade: str, stats: AuditStats, benchmarks: BenchmarkComparison
    ) -> "AuditResultSchema":
        return cls(
            project_id=result.project_id,
            scope=result.scope.value,
            score=result.score,
            grade=grade,
            timestamp=result.timestamp,
            breakdown={
                to_camel(category.value): CategoryResultSchema.from_result(category_result)
                for category, category_result in result.breakdown.items()
            },
            issues=[IssueSchema.from_issue(i) for i in result.issues],
            recommendations=[RecommendationSchema.from_recommendation(r) for r in result.recommendations],
            stats=StatsSchema(**asdict(stats)),
            benchmarks=BenchmarkSchema(**asdict(benchmarks)),
        )


class AuditResponse(CamelModel):
    """Success envelope"""

    success: bool = True
    data: AuditResultSchema

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "success": True,
                "data": {
                    "projectId": "proj_123",
                    "scope": "full",
                    "score": 92,
                    "grade": "A",
                    "timestamp": "2025-06-09T03:00:00Z",
                    "breakdown": {"localSeo": {"score": 85, "weight": 0.25, "passed": 9, "failed": 1, "warnings": 1}},
                    "recommendations": [
                        {
                            "priority": 1,
                            "title": "Fix critical SEO issues",
                            "relatedIssues": ["local-1"],
                        }
                    ],
                },
            }
        },
    )


class ErrorBody(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Failure envelope"""

    success: bool = False
    error: ErrorBody
