"""
Command-line interface for the SEO audit service
"""
import json
from dataclasses import asdict

import click

from core.config import settings
from core.exceptions import AuditServiceError
from seo_audit.grading import compare_to_benchmarks, get_grade_for_score, get_score_grade, get_score_trend
from seo_audit.runner import run_audit
from seo_audit.schemas import AuditResultSchema
from seo_audit.stats import calculate_audit_stats
from seo_audit.types import AuditScope


@click.group()
@click.version_option(version=settings.app_version)
def cli():
    """SEO audit CLI - scoring and recommendations for healthcare websites"""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to")
@click.option("--port", default=8000, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
def runserver(host: str, port: int, reload: bool):
    """Run the FastAPI development server"""
    import uvicorn

    click.echo(f"Starting {settings.app_name} on {host}:{port}")
    click.echo(f"Environment: {settings.environment}")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@cli.command()
@click.option("--project-id", required=True, help="Project to audit")
@click.option("--scope", type=click.Choice(AuditScope.values()), default="full", help="Audit scope")
@click.option("--industry", default=None, help="Industry for benchmark comparison")
@click.option("--previous-score", type=int, default=None, help="Score of the last audit, to show the trend")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text")
def audit(project_id: str, scope: str, industry: str, previous_score: int, output_format: str):
    """Run an SEO audit and print the result"""
    try:
        result = run_audit(project_id, scope)
    except AuditServiceError as e:
        raise click.ClickException(f"{e.error_code}: {e.message}")

    interpretation = get_grade_for_score(result.score)
    benchmarks = compare_to_benchmarks(result.score, industry or settings.default_industry)
    stats = calculate_audit_stats(result)

    if output_format == "json":
        data = AuditResultSchema.build(result, grade=get_score_grade(result.score), stats=stats, benchmarks=benchmarks)
        click.echo(json.dumps({"success": True, "data": data.model_dump(by_alias=True, mode="json")}, indent=2))
        return

    click.echo(f"Project: {result.project_id} (scope: {result.scope.value})")
    click.echo(f"Score: {result.score}/100 - {interpretation.grade} {interpretation.label}")
    if previous_score is not None:
        click.echo(f"Trend: {get_score_trend(result.score, previous_score).label}")
    click.echo(
        f"Benchmark ({benchmarks.industry}): {benchmarks.vs_industry} average of {benchmarks.industry_average}, "
        f"percentile {benchmarks.percentile}"
    )

    click.echo("\nCategories:")
    for category, category_result in result.breakdown.items():
        click.echo(
            f"  {category.display_name:<18} {category_result.score:>3}  "
            f"passed={category_result.passed} failed={category_result.failed} warnings={category_result.warnings}"
        )

    click.echo("\nIssues:")
    for key, value in asdict(stats).items():
        click.echo(f"  {key.replace('_', ' ')}: {value}")

    click.echo("\nRecommendations:")
    for recommendation in result.recommendations:
        click.echo(f"  {recommendation.priority}. {recommendation.title} ({', '.join(recommendation.related_issues)})")


@cli.command()
def env_info():
    """Display environment information"""
    for key, value in settings.summary().items():
        click.echo(f"{key}: {value}")


def main():
    """Main entry point"""
    cli()


if __name__ == "__main__":
    main()
