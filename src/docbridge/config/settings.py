"""Bridge settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (DOCBRIDGE_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_INDEX_NAME = "default"


class TransportSettings(BaseModel):
    """Connection settings for the search engine's HTTP API.

    Timeouts and retries are owned by the transport; the core never
    retries a failed call on its own.
    """

    hosts: list[str] = Field(default_factory=lambda: ["http://localhost:9200"], description="Engine base URLs")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    max_retries: int = Field(default=0, ge=0, description="Connection retries performed by the HTTP layer")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    verify_certs: bool = Field(default=True, description="Whether to verify TLS certificates")

    @field_validator("hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, v: Any) -> list[str]:
        """Parse hosts from JSON string (env var) or list."""
        if isinstance(v, str):
            import json

            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(h) for h in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            # Single host as plain string
            return [v] if v else []
        return list(v)


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the DOCBRIDGE_ prefix.
    Nested settings use double underscores: DOCBRIDGE_TRANSPORT__TIMEOUT=5

    Example:
        DOCBRIDGE_DEFAULT_INDEX=catalog
        DOCBRIDGE_TRANSPORT__HOSTS='["http://es-1:9200"]'
        DOCBRIDGE_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCBRIDGE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_index: str | None = Field(
        default=None,
        description=f"Index used by record kinds without their own index name (falls back to '{DEFAULT_INDEX_NAME}')",
    )

    transport: TransportSettings = Field(default_factory=TransportSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # YAML sits below env and .env; it is empty unless ``yaml_file`` is configured.
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        still take precedence, per key for nested sections.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        class _FileSettings(cls):  # type: ignore[valid-type,misc]
            model_config = SettingsConfigDict(yaml_file=config_path, yaml_file_encoding="utf-8")

        return cls.model_validate(_FileSettings().model_dump())
