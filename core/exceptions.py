"""
Custom exceptions for the SEO audit service
Provides structured error handling across all domains
"""
from typing import Any, Dict, Optional


class AuditServiceError(Exception):
    """Base exception for all service errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the API error envelope; details stay server-side"""
        return {"success": False, "error": {"code": self.error_code, "message": self.message}}


class ValidationError(AuditServiceError):
    """Raised when input validation fails"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        error_code: str = "VALIDATION_ERROR",
        **details,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            details={"field": field, **details} if field else details,
            status_code=400,
        )


class ScoringError(AuditServiceError):
    """Raised when scores cannot be computed from the given results"""

    def __init__(self, message: str, **details):
        super().__init__(
            message=message,
            error_code="SCORING_ERROR",
            details=details,
            status_code=500,
        )


class AuditError(AuditServiceError):
    """Raised when an audit run fails unexpectedly"""

    def __init__(self, message: str, project_id: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="AUDIT_ERROR",
            status_code=500,
        )
        self.project_id = project_id


class ConfigurationError(AuditServiceError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details={"setting": setting} if setting else {},
            status_code=500,
        )
