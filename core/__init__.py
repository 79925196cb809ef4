"""Core utilities and configuration for the SEO audit service"""
from core.config import settings
from core.exceptions import AuditServiceError, ValidationError
from core.logging import get_logger

__all__ = [
    "settings",
    "get_logger",
    "AuditServiceError",
    "ValidationError",
]
