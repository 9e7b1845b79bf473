"""LineageGate configuration management."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

import json
import re

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lineagegate.models.requirements import DEFAULT_REGISTRY, RequirementsRegistry
from lineagegate.redaction import DEFAULT_SENSITIVE_PATTERNS, Redactor


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """LineageGate configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="LINEAGEGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    env: Environment = Environment.DEVELOPMENT
    log_level: str = "INFO"
    debug: bool = False

    # Collector identity
    collector_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("LINEAGEGATE_COLLECTOR_ID", "SDC_ID"),
        description="Collector instance identifier (auto-detected when unset)",
    )
    collector_base_url: str = Field(
        default="http://localhost:18630",
        description="Base URL used to build pipeline permalinks",
    )

    # Redaction
    sensitive_key_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SENSITIVE_PATTERNS),
        description="Case-insensitive regexes; matching parameter keys are masked",
    )

    # Validation
    required_attributes: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Per event type overrides of required specific attributes",
    )

    # Security (simple shared token)
    api_key: Optional[str] = None
    allow_insecure_dev: bool = Field(default=False, description="Allow unauthenticated in dev")

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Validators
    @field_validator("collector_base_url")
    @classmethod
    def validate_collector_base_url(cls, v: str) -> str:
        """Validate collector URL is HTTP(S)."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"collector_base_url must start with http:// or https://, got {v}")
        return v.rstrip("/")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port number range."""
        if not 1 <= v <= 65535:
            raise ValueError(f"Port must be between 1 and 65535, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("sensitive_key_patterns", mode="before")
    @classmethod
    def parse_sensitive_key_patterns(cls, v: Any) -> list[str]:
        if v is None or v == "":
            return list(DEFAULT_SENSITIVE_PATTERNS)
        if isinstance(v, str):
            v = json.loads(v) if v.lstrip().startswith("[") else v.split(",")
        patterns = [p.strip() for p in v if p and p.strip()]
        for pattern in patterns:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid sensitive key pattern {pattern!r}: {e}")
        return patterns

    @field_validator("required_attributes", mode="before")
    @classmethod
    def parse_required_attributes(cls, v: Any) -> dict[str, list[str]]:
        if v is None or v == "":
            return {}
        if isinstance(v, str):
            v = json.loads(v)
        if not isinstance(v, Mapping):
            raise ValueError(
                f"required_attributes must map event types to attribute labels, got {type(v).__name__}"
            )
        # Fail at startup rather than at first validation
        RequirementsRegistry.from_mapping(v)
        return v

    def build_redactor(self) -> Redactor:
        """Redactor for the configured sensitive key patterns."""
        return Redactor(self.sensitive_key_patterns)

    def build_registry(self) -> RequirementsRegistry:
        """Default requirements with configured overrides applied."""
        if not self.required_attributes:
            return DEFAULT_REGISTRY
        return RequirementsRegistry.from_mapping(self.required_attributes)


settings = Settings()
