"""
Configuration management using Pydantic Settings
Handles environment variables and validation
"""
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Environment
    environment: str = Field(default="development")

    # Application
    app_name: str = "SEO Audit Service"
    app_version: str = "0.1.0"
    base_url: str = Field(default="http://localhost:8000")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or text

    # Monitoring
    prometheus_enabled: bool = Field(default=True)
    sentry_dsn: Optional[str] = Field(default=None)
    sentry_trace_rate: float = Field(default=0.2, ge=0.0, le=1.0)

    # Rate limiting (slowapi limit string)
    rate_limit_enabled: bool = Field(default=True)
    audit_rate_limit: str = Field(default="60/minute")

    # Audit
    default_industry: str = Field(default="healthcare", description="Industry used for benchmark comparison")
    industry_benchmarks_path: Path = Field(default=PROJECT_ROOT / "seo_audit" / "industry_benchmarks.yaml")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        allowed = ["development", "test", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    def summary(self) -> Dict[str, str]:
        """Key settings for display in the CLI"""
        return {
            "app": f"{self.app_name} v{self.app_version}",
            "environment": self.environment,
            "log": f"{self.log_level} ({self.log_format})",
            "rate_limit": self.audit_rate_limit if self.rate_limit_enabled else "disabled",
            "default_industry": self.default_industry,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
