"""
SEO Audit Scoring

Category scores deduct fixed points per issue severity from a 100-point
baseline. The overall score is the weighted sum of the five category scores.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Mapping

from core.exceptions import ScoringError

from .constants import CATEGORY_WEIGHTS, MAX_SCORE, MIN_SCORE, SEVERITY_DEDUCTIONS
from .models import CategoryResult, Issue
from .types import AuditCategory, IssueSeverity


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero"""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_category_score(issues: Iterable[Issue], total_checks: int = 0) -> int:
    """
    Calculate the score for a category from its issues.

    Args:
        issues: Issues found in the category
        total_checks: Number of checks run; does not affect the score

    Returns:
        int: Score between 0 and 100
    """
    score = MAX_SCORE
    for issue in issues:
        score -= SEVERITY_DEDUCTIONS[issue.severity]

    return max(MIN_SCORE, score)


def calculate_category_result(issues: Iterable[Issue], total_checks: int, weight: float) -> CategoryResult:
    """
    Build the CategoryResult for a category.

    Critical issues count as failed checks and warnings as warnings. Info
    issues reduce the score but are counted in neither bucket, so they still
    count as passed.
    """
    issues = tuple(issues)
    failed = sum(1 for i in issues if i.severity is IssueSeverity.CRITICAL)
    warnings = sum(1 for i in issues if i.severity is IssueSeverity.WARNING)

    return CategoryResult(
        score=calculate_category_score(issues, total_checks),
        weight=weight,
        passed=max(0, total_checks - failed - warnings),
        failed=failed,
        warnings=warnings,
        issues=issues,
    )


def calculate_overall_score(breakdown: Mapping[AuditCategory, CategoryResult]) -> int:
    """
    Calculate the weighted overall score.

    Weights come from CATEGORY_WEIGHTS, so the result does not depend on the
    order of the mapping or on the weight stored in each CategoryResult.

    Raises:
        ScoringError: if any of the five categories is missing
    """
    results = {AuditCategory(k) if isinstance(k, str) else k: v for k, v in breakdown.items()}

    missing = [c.value for c in CATEGORY_WEIGHTS if c not in results]
    if missing:
        raise ScoringError(f"Missing category results: {', '.join(missing)}", missing=missing)

    weighted = sum(
        (Decimal(results[category].score) * Decimal(str(weight)) for category, weight in CATEGORY_WEIGHTS.items()),
        Decimal(0),
    )
    return round_half_up(weighted)
