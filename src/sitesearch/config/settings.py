"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (SITESEARCH_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="127.0.0.1", description="Server bind address")
    port: int = Field(default=8080, description="Server port")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class SearchSettings(BaseModel):
    """Search behavior configuration."""

    default_limit: int = Field(default=10, ge=1, description="Results returned when no limit is given")
    max_limit: int = Field(default=100, ge=1, description="Upper bound accepted for the limit parameter")
    snippet_context_length: int = Field(
        default=100,
        ge=0,
        description="Characters of context around a matched term in description snippets",
    )
    corpus_path: Path | None = Field(default=None, description="JSON/YAML corpus file loaded at startup")

    @model_validator(mode="after")
    def _check_limits(self) -> SearchSettings:
        if self.default_limit > self.max_limit:
            raise ValueError(f"default_limit ({self.default_limit}) exceeds max_limit ({self.max_limit})")
        return self


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the SITESEARCH_ prefix.
    Nested settings use double underscores: SITESEARCH_SERVER__PORT=9090

    Example:
        SITESEARCH_SERVER__PORT=9090
        SITESEARCH_SEARCH__CORPUS_PATH=content.json
        SITESEARCH_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "SITESEARCH_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    app_name: str = Field(default="SiteSearch", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    server: ServerSettings = Field(default_factory=ServerSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are passed as init arguments, so they win
        over environment variables for the keys they set.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
