"""Issue counts and filters over an audit result."""
from typing import Iterable

from .models import AuditResult, AuditStats, Issue
from .types import AuditCategory, IssueSeverity


def calculate_audit_stats(result: AuditResult, dismissed: Iterable[str] = ()) -> AuditStats:
    """Count the result's issues, ignoring any whose id is in `dismissed`"""
    dismissed = set(dismissed)
    active = [i for i in result.issues if i.id not in dismissed]

    return AuditStats(
        total_issues=len(active),
        critical_issues=len(issues_by_severity(active, IssueSeverity.CRITICAL)),
        warning_issues=len(issues_by_severity(active, IssueSeverity.WARNING)),
        info_issues=len(issues_by_severity(active, IssueSeverity.INFO)),
        auto_fixable_issues=len(auto_fixable_issues(active)),
        quick_wins=sum(1 for i in active if i.is_quick_win),
    )


def issues_by_category(issues: Iterable[Issue], category: AuditCategory) -> list[Issue]:
    return [i for i in issues if i.category is category]


def issues_by_severity(issues: Iterable[Issue], severity: IssueSeverity) -> list[Issue]:
    return [i for i in issues if i.severity is severity]


def auto_fixable_issues(issues: Iterable[Issue]) -> list[Issue]:
    return [i for i in issues if i.auto_fix_available]
