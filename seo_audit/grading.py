"""Grades, benchmarks and trend helpers for audit scores."""
import math
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

import yaml

from core.config import settings
from core.exceptions import ConfigurationError

from .constants import BENCHMARK_BAND, BENCHMARK_FLOOR, FAILING_GRADE, GRADE_THRESHOLDS, MAX_SCORE, MIN_SCORE
from .models import BenchmarkComparison, ScoreInterpretation, ScoreTrend

# (min score, grade, label, color, description)
INTERPRETATION_THRESHOLDS = [
    (95, "A+", "Excellent", "#10B981", "Outstanding SEO implementation"),
    (85, "A", "Great", "#22C55E", "Strong SEO with minor improvements possible"),
    (70, "B", "Good", "#84CC16", "Solid foundation with room for improvement"),
    (50, "C", "Fair", "#EAB308", "Basic SEO in place, significant improvements needed"),
    (30, "D", "Poor", "#F97316", "Major SEO issues affecting visibility"),
    (0, "F", "Critical", "#EF4444", "Critical SEO problems requiring immediate attention"),
]


def _round(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity"""
    return math.floor(value + 0.5)


@lru_cache(maxsize=4)
def _load_benchmarks(path: Path) -> Dict[str, Dict[str, int]]:
    """Load industry benchmarks from YAML."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigurationError(f"Industry benchmarks file not found: {path}", setting="industry_benchmarks_path")

    if "default" not in data:
        raise ConfigurationError("Industry benchmarks must define a 'default' entry", setting="industry_benchmarks_path")

    for industry, benchmark in data.items():
        if benchmark["top_performers"] <= BENCHMARK_FLOOR:
            raise ConfigurationError(
                f"Top performer score for '{industry}' must be above {BENCHMARK_FLOOR}",
                setting="industry_benchmarks_path",
            )
    return data


def get_score_grade(score: int) -> str:
    """Letter grade A-F for a score"""
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE


def get_grade_for_score(score: int) -> ScoreInterpretation:
    """Detailed interpretation (A+ to F) for a score"""
    for minimum, grade, label, color, description in INTERPRETATION_THRESHOLDS:
        if score >= minimum:
            break
    return ScoreInterpretation(score=score, grade=grade, label=label, color=color, description=description)


def compare_to_benchmarks(
    score: int, industry: Optional[str] = None, benchmarks_path: Optional[Path] = None
) -> BenchmarkComparison:
    """
    Compare a score against an industry's average and top performers.

    Args:
        score: Overall audit score
        industry: Industry key; unknown or missing industries use "default"
        benchmarks_path: YAML file to read, defaults to the configured path

    Returns:
        BenchmarkComparison
    """
    benchmarks = _load_benchmarks(Path(benchmarks_path or settings.industry_benchmarks_path))
    key = industry if industry in benchmarks else "default"
    benchmark = benchmarks[key]
    average = benchmark["average"]
    top = benchmark["top_performers"]

    vs_industry = "average"
    if score > average + BENCHMARK_BAND:
        vs_industry = "above"
    elif score < average - BENCHMARK_BAND:
        vs_industry = "below"

    position = (score - BENCHMARK_FLOOR) / (top - BENCHMARK_FLOOR) * 100
    percentile = _round(max(0, min(100, position)))

    return BenchmarkComparison(
        industry=key,
        industry_average=average,
        vs_industry=vs_industry,
        percentile=percentile,
        top_performers=top,
    )


def get_score_trend(current: int, previous: int) -> ScoreTrend:
    """Direction and size of the change between two scores"""
    change = current - previous
    if change > 0:
        return ScoreTrend(direction="up", change=change, label=f"+{change} points")
    if change < 0:
        return ScoreTrend(direction="down", change=abs(change), label=f"{change} points")
    return ScoreTrend(direction="same", change=0, label="No change")


def calculate_weighted_score(scores: Iterable[Tuple[float, float]]) -> int:
    """Weighted mean of (score, weight) pairs, normalised by total weight"""
    scores = list(scores)
    total_weight = sum(weight for _, weight in scores)
    if total_weight == 0:
        return 0
    return _round(sum(score * weight for score, weight in scores) / total_weight)


def normalize_score(value: float, minimum: float, maximum: float) -> int:
    """Map value from [minimum, maximum] onto 0-100"""
    if maximum == minimum:
        return MAX_SCORE
    scaled = (value - minimum) / (maximum - minimum) * 100
    return _round(max(MIN_SCORE, min(MAX_SCORE, scaled)))
