"""
SEO Audit Category Checks

One generator per audit category. No site is crawled yet: each generator
returns a fixed set of sample issues for a healthcare practice website along
with the number of checks the category covers.
"""

from .models import CheckRun, Issue
from .types import AuditCategory, ImpactLevel, IssueSeverity

AUTO_FIX_ACTION = "/api/healthcare/auto-fix"


def run_technical_checks() -> CheckRun:
    """Meta tags, canonicals and crawlability"""
    issues = (
        Issue(
            id="tech-1",
            severity=IssueSeverity.WARNING,
            category=AuditCategory.TECHNICAL,
            code="META_TITLE_LENGTH",
            title="Meta titles need optimization",
            description="3 pages have meta titles outside the optimal 50-60 character range.",
            affected_pages=("/treatments/ed", "/treatments/trt", "/about"),
            how_to_fix="Edit the meta titles to be between 50-60 characters for optimal display in search results.",
            auto_fix_available=True,
            auto_fix_action=AUTO_FIX_ACTION,
            impact=ImpactLevel.MEDIUM,
            effort=ImpactLevel.LOW,
        ),
        Issue(
            id="tech-2",
            severity=IssueSeverity.INFO,
            category=AuditCategory.TECHNICAL,
            code="MISSING_CANONICAL",
            title="Missing canonical URLs",
            description="2 pages are missing self-referencing canonical URLs.",
            affected_pages=("/health-library/article-1", "/health-library/article-2"),
            how_to_fix='Add <link rel="canonical" href="..."> to each page pointing to itself.',
            auto_fix_available=True,
            auto_fix_action=AUTO_FIX_ACTION,
            impact=ImpactLevel.LOW,
            effort=ImpactLevel.LOW,
        ),
    )
    return CheckRun(category=AuditCategory.TECHNICAL, total_checks=15, issues=issues)


def run_content_checks() -> CheckRun:
    """Content depth and image accessibility"""
    issues = (
        Issue(
            id="content-1",
            severity=IssueSeverity.WARNING,
            category=AuditCategory.CONTENT,
            code="THIN_CONTENT",
            title="Thin content detected",
            description="2 service pages have less than 500 words of content.",
            affected_pages=("/treatments/b12-injections", "/treatments/nutritional-counseling"),
            how_to_fix="Expand the content to at least 500 words with helpful, relevant information.",
            auto_fix_available=False,
            impact=ImpactLevel.MEDIUM,
            effort=ImpactLevel.MEDIUM,
        ),
        Issue(
            id="content-2",
            severity=IssueSeverity.INFO,
            category=AuditCategory.CONTENT,
            code="MISSING_ALT_TEXT",
            title="Images missing alt text",
            description="5 images are missing descriptive alt text.",
            affected_pages=("/treatments/ed", "/about", "/locations/green-bay"),
            how_to_fix="Add descriptive alt text to all images that describes the image content.",
            auto_fix_available=True,
            auto_fix_action=AUTO_FIX_ACTION,
            impact=ImpactLevel.LOW,
            effort=ImpactLevel.LOW,
        ),
    )
    return CheckRun(category=AuditCategory.CONTENT, total_checks=13, issues=issues)


def run_local_seo_checks() -> CheckRun:
    """NAP consistency and location coverage"""
    issues = (
        Issue(
            id="local-1",
            severity=IssueSeverity.CRITICAL,
            category=AuditCategory.LOCAL_SEO,
            code="MISSING_NAP",
            title="NAP not on all pages",
            description="Name, Address, and Phone number are not visible in the footer of 3 pages.",
            affected_pages=("/health-library/article-1", "/health-library/article-2", "/book-appointment"),
            how_to_fix="Add the business NAP information to the footer component on all pages.",
            auto_fix_available=False,
            impact=ImpactLevel.HIGH,
            effort=ImpactLevel.LOW,
        ),
        Issue(
            id="local-2",
            severity=IssueSeverity.WARNING,
            category=AuditCategory.LOCAL_SEO,
            code="MISSING_LOCATION_PAGES",
            title="Location×Service pages incomplete",
            description="4 location×service combinations are missing dedicated pages.",
            affected_pages=(),
            how_to_fix="Generate local SEO pages for all location and service combinations using the Quick Action.",
            auto_fix_available=True,
            auto_fix_action="/api/healthcare/generate-local-pages",
            impact=ImpactLevel.HIGH,
            effort=ImpactLevel.MEDIUM,
        ),
    )
    return CheckRun(category=AuditCategory.LOCAL_SEO, total_checks=11, issues=issues)


def run_schema_checks() -> CheckRun:
    """Structured data coverage"""
    issues = (
        Issue(
            id="schema-1",
            severity=IssueSeverity.WARNING,
            category=AuditCategory.SCHEMA,
            code="MISSING_FAQ_SCHEMA",
            title="Missing FAQPage schema",
            description="3 pages with FAQ sections are missing FAQPage structured data.",
            affected_pages=("/treatments/ed", "/treatments/trt", "/treatments/weight-loss"),
            how_to_fix="Add FAQPage schema markup to pages that contain FAQ sections.",
            auto_fix_available=True,
            auto_fix_action=AUTO_FIX_ACTION,
            impact=ImpactLevel.MEDIUM,
            effort=ImpactLevel.LOW,
        ),
        Issue(
            id="schema-2",
            severity=IssueSeverity.INFO,
            category=AuditCategory.SCHEMA,
            code="INCOMPLETE_PHYSICIAN_SCHEMA",
            title="Physician schema missing fields",
            description="Physician schema is missing education and certification fields.",
            affected_pages=("/team/dr-smith",),
            how_to_fix="Add alumniOf and hasCredential properties to Physician schema.",
            auto_fix_available=False,
            impact=ImpactLevel.LOW,
            effort=ImpactLevel.LOW,
        ),
    )
    return CheckRun(category=AuditCategory.SCHEMA, total_checks=11, issues=issues)


def run_eeat_checks() -> CheckRun:
    """Medical review attribution and content freshness"""
    issues = (
        Issue(
            id="eeat-1",
            severity=IssueSeverity.WARNING,
            category=AuditCategory.EEAT,
            code="MISSING_MEDICAL_REVIEWER",
            title="Articles missing medical reviewer",
            description="4 health articles are missing a medical reviewer attribution.",
            affected_pages=("/health-library/article-1", "/health-library/article-2"),
            how_to_fix="Add medical reviewer badge to all health articles using the MedicalReviewer component.",
            auto_fix_available=True,
            auto_fix_action=AUTO_FIX_ACTION,
            impact=ImpactLevel.HIGH,
            effort=ImpactLevel.LOW,
        ),
        Issue(
            id="eeat-2",
            severity=IssueSeverity.INFO,
            category=AuditCategory.EEAT,
            code="STALE_CONTENT",
            title="Content needs review",
            description="2 articles haven't been reviewed in over 12 months.",
            affected_pages=("/health-library/old-article-1", "/health-library/old-article-2"),
            how_to_fix="Review and update content, then update the lastReviewedAt date.",
            auto_fix_available=False,
            impact=ImpactLevel.MEDIUM,
            effort=ImpactLevel.MEDIUM,
        ),
    )
    return CheckRun(category=AuditCategory.EEAT, total_checks=8, issues=issues)


# Run order; also the order of the flattened issue list
CATEGORY_CHECKS = {
    AuditCategory.TECHNICAL: run_technical_checks,
    AuditCategory.CONTENT: run_content_checks,
    AuditCategory.LOCAL_SEO: run_local_seo_checks,
    AuditCategory.SCHEMA: run_schema_checks,
    AuditCategory.EEAT: run_eeat_checks,
}
