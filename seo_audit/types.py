"""
SEO Audit Types

Enums shared by the audit models, scorers and the HTTP layer.
"""

from enum import Enum


class IssueSeverity(Enum):
    """Severity of an audit issue"""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class AuditCategory(Enum):
    """The five scored audit categories"""

    TECHNICAL = "technical"
    CONTENT = "content"
    LOCAL_SEO = "local_seo"
    SCHEMA = "schema"
    EEAT = "eeat"

    @property
    def display_name(self) -> str:
        names = {
            AuditCategory.TECHNICAL: "Technical SEO",
            AuditCategory.CONTENT: "Content Quality",
            AuditCategory.LOCAL_SEO: "Local SEO",
            AuditCategory.SCHEMA: "Structured Data",
            AuditCategory.EEAT: "E-E-A-T Signals",
        }
        return names[self]


class ImpactLevel(Enum):
    """Impact or effort level of an issue"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AuditScope(Enum):
    """Requested audit scope"""

    FULL = "full"
    QUICK = "quick"
    TECHNICAL = "technical"
    CONTENT = "content"
    LOCAL = "local"
    SCHEMA = "schema"
    EEAT = "eeat"

    @classmethod
    def values(cls) -> list[str]:
        return [scope.value for scope in cls]
