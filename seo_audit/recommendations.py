"""Recommendation ranking for audit issues."""

from typing import Iterable

from .models import Issue, Recommendation
from .types import IssueSeverity

CRITICAL_PRIORITY = 1
AUTO_FIX_PRIORITY = 2
QUICK_WIN_PRIORITY = 3


def generate_recommendations(issues: Iterable[Issue]) -> list[Recommendation]:
    """
    Group issues into prioritized recommendations.

    Each bucket is an independent filter, so an issue may appear in more than
    one recommendation. Empty buckets produce no recommendation.
    """
    issues = list(issues)
    recommendations = []

    critical = [i for i in issues if i.severity is IssueSeverity.CRITICAL]
    if critical:
        recommendations.append(
            Recommendation(
                priority=CRITICAL_PRIORITY,
                title="Fix critical SEO issues",
                description=(
                    f"You have {len(critical)} critical issue(s) that need immediate attention. "
                    "These are severely impacting your search visibility."
                ),
                expected_impact="High - fixing these will significantly improve search rankings",
                related_issues=tuple(i.id for i in critical),
            )
        )

    auto_fixable = [i for i in issues if i.auto_fix_available]
    if auto_fixable:
        recommendations.append(
            Recommendation(
                priority=AUTO_FIX_PRIORITY,
                title="Apply automatic fixes",
                description=(
                    f"{len(auto_fixable)} issue(s) can be automatically fixed. "
                    "This is a quick win to improve your SEO score."
                ),
                expected_impact="Medium - quick improvements with minimal effort",
                related_issues=tuple(i.id for i in auto_fixable),
            )
        )

    quick_wins = [i for i in issues if i.is_quick_win]
    if quick_wins:
        recommendations.append(
            Recommendation(
                priority=QUICK_WIN_PRIORITY,
                title="Address quick wins",
                description=(
                    f"{len(quick_wins)} high-impact, low-effort improvement(s) available. "
                    "These provide the best ROI for your time."
                ),
                expected_impact="High - significant improvement with minimal time investment",
                related_issues=tuple(i.id for i in quick_wins),
            )
        )

    return recommendations
