"""Configuration loading for the cardbridge relay.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
- Load the static card template
"""

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. Upstream endpoints and
    credentials default to empty strings and are not checked at startup;
    a missing value shows up as a failed outbound call.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Ticket system configuration
    zhiwei_domain: str = Field(
        default="",
        description="Base URL of the Zhiwei ticket system",
    )
    zhiwei_username: str = Field(
        default="",
        description="Zhiwei login user name",
    )
    zhiwei_password: str = Field(
        default="",
        description="Zhiwei login password",
    )
    zhiwei_view_id: str = Field(
        default="c311089eef2b496b84560aa08f099cc0",
        description="Board view that receives new cards",
    )
    default_card_name: str = Field(
        default="sentry report error",
        description="Card name used when the event has no title",
    )
    card_template_path: str = Field(
        default="",
        description="Optional JSON file with static card fields",
    )

    # Notification configuration
    lark_webhook_url: str = Field(
        default="",
        description="Lark bot webhook receiving card notifications",
    )

    # Diagnostic sink configuration
    log_sink_url: str = Field(
        default="",
        description="Endpoint receiving raw-text diagnostic messages",
    )

    # Outbound HTTP
    outbound_timeout_seconds: float | None = Field(
        default=None,
        description="Timeout for outbound calls; unset means no timeout",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Webhook configuration
    webhook_host: str = Field(
        default="0.0.0.0",
        description="Host to listen on for webhook server",
    )
    webhook_port: int = Field(
        default=8080,
        description="Port to listen on for webhook server",
    )
    webhook_path: str = Field(
        default="/",
        description="Route receiving monitoring webhooks",
    )
    invalid_json_status: int = Field(
        default=405,
        description="Status returned when the webhook body is not valid JSON",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Force DEBUG logging regardless of log_level",
    )

    @field_validator("webhook_port")
    @classmethod
    def validate_webhook_port(cls, v: int) -> int:
        """Ensure webhook port is in valid range."""
        if v <= 0 or v > 65535:
            raise ValueError("webhook_port must be between 1 and 65535")
        return v

    @field_validator("outbound_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Ensure timeout, when set, is positive."""
        if v is not None and v <= 0:
            raise ValueError("outbound_timeout_seconds must be positive")
        return v

    @field_validator("invalid_json_status")
    @classmethod
    def validate_invalid_json_status(cls, v: int) -> int:
        """Only the legacy 405 or a plain 400 are allowed."""
        if v not in (400, 405):
            raise ValueError("invalid_json_status must be 400 or 405")
        return v

    @field_validator("default_card_name")
    @classmethod
    def validate_default_card_name(cls, v: str) -> str:
        """Ensure the fallback card name is never empty."""
        if not v.strip():
            raise ValueError("default_card_name must be a non-empty string")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


def load_card_template(path: str) -> dict[str, Any]:
    """Read the static card template.

    Args:
        path: JSON file holding an object; empty means no template.

    Returns:
        The template fields (empty dict when no path is configured).

    Raises:
        ValueError: If the file does not hold a JSON object.
        OSError: If the file cannot be read.
    """
    if not path:
        return {}
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"card template {path} must contain a JSON object")
    return data


__all__ = ["Settings", "load_card_template", "load_settings"]
