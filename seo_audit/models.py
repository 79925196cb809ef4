"""
SEO Audit Models

Immutable records produced by the category checks and consumed by the
scorers, the recommendation ranker and the HTTP layer. Nothing here is
persisted: an audit runs fresh on each call.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .types import AuditCategory, AuditScope, ImpactLevel, IssueSeverity


@dataclass(frozen=True)
class Issue:
    """A single problem found by a category check"""

    id: str
    severity: IssueSeverity
    category: AuditCategory
    code: str
    title: str
    description: str
    affected_pages: tuple[str, ...] = ()
    how_to_fix: str = ""
    auto_fix_available: bool = False
    auto_fix_action: Optional[str] = None
    impact: ImpactLevel = ImpactLevel.MEDIUM
    effort: ImpactLevel = ImpactLevel.MEDIUM
    learn_more_url: Optional[str] = None

    @property
    def is_quick_win(self) -> bool:
        """High impact for low effort"""
        return self.impact is ImpactLevel.HIGH and self.effort is ImpactLevel.LOW


@dataclass(frozen=True)
class CategoryResult:
    """Score and check counts for one audit category"""

    score: int
    weight: float
    passed: int
    failed: int
    warnings: int
    issues: tuple[Issue, ...] = ()


@dataclass(frozen=True)
class Recommendation:
    """A prioritized action derived from a group of issues"""

    priority: int
    title: str
    description: str
    expected_impact: str
    related_issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class AuditResult:
    """Outcome of one audit invocation"""

    project_id: str
    score: int
    breakdown: dict[AuditCategory, CategoryResult]
    issues: tuple[Issue, ...]
    recommendations: tuple[Recommendation, ...]
    timestamp: datetime
    scope: AuditScope = AuditScope.FULL


@dataclass(frozen=True)
class ScoreInterpretation:
    """Letter grade and human-readable label for a score"""

    score: int
    grade: str
    label: str
    color: str
    description: str


@dataclass(frozen=True)
class BenchmarkComparison:
    """How a score compares to an industry"""

    industry: str
    industry_average: int
    vs_industry: str
    percentile: int
    top_performers: int


@dataclass(frozen=True)
class ScoreTrend:
    """Change between two audit scores"""

    direction: str
    change: int
    label: str


@dataclass(frozen=True)
class AuditStats:
    """Issue counts used for dashboard summaries"""

    total_issues: int = 0
    critical_issues: int = 0
    warning_issues: int = 0
    info_issues: int = 0
    auto_fixable_issues: int = 0
    quick_wins: int = 0


@dataclass(frozen=True)
class CheckRun:
    """Issues produced by one category's checks, with the number of checks run"""

    category: AuditCategory
    total_checks: int
    issues: tuple[Issue, ...] = field(default_factory=tuple)
