"""Configuration management for the pagination navigation service."""

from enum import Enum
from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from pagenav.models.pager import LinkStyle, RenderFailurePolicy


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings with pager display defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PAGENAV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Pagination Navigator"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    # API Configuration
    api_prefix: str = "/api/v1"
    allowed_origins: Annotated[List[str], NoDecode] = ["*"]

    # Paging
    default_page_size: int = Field(20, ge=1)
    max_page_size: int = Field(1000, ge=1)

    # Pager display defaults
    individual_pages_displayed_count: int = Field(5, ge=1)
    show_total_summary: bool = True
    show_pager_items: bool = True
    show_first: bool = True
    show_previous: bool = True
    show_individual_pages: bool = True
    show_next: bool = True
    show_last: bool = True
    link_style: LinkStyle = LinkStyle.ROUTE
    render_failure_policy: RenderFailurePolicy = RenderFailurePolicy.ABORT

    # Link construction
    base_path: str = "/items"
    page_query_param: str = "page"

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_json: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    # Health Check
    health_check_path: str = "/health"
    readiness_check_path: str = "/ready"

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_allowed_origins(cls, v):
        """Parse allowed origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("base_path")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Keep base paths free of a trailing slash so hrefs join cleanly."""
        if len(v) > 1:
            return v.rstrip("/")
        return v

    def pager_options(self) -> dict:
        """Display toggles and window width as PaginationState keyword arguments."""
        return {
            "individual_pages_displayed_count": self.individual_pages_displayed_count,
            "show_total_summary": self.show_total_summary,
            "show_pager_items": self.show_pager_items,
            "show_first": self.show_first,
            "show_previous": self.show_previous,
            "show_individual_pages": self.show_individual_pages,
            "show_next": self.show_next,
            "show_last": self.show_last,
            "link_style": self.link_style,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience function for getting settings
settings = get_settings()
