"""Configuration management for CRM services.

This module centralizes environment-driven configuration. It builds on
``pydantic_settings.BaseSettings`` so configuration can be provided via
environment variables, ``.env`` files, or defaults.

Highlights
- Strongly-typed settings with sensible defaults
- One place to discover commonly used environment variables
- Small service-specific subclasses to keep concerns clear

Usage
- Inject the appropriate config in your service entrypoint:
  ``config = ContactsConfig()``
- Or select dynamically: ``config = get_config("contacts")``
"""

from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class for all services.

    Field names double as environment variable names (case-insensitive), so
    ``crm_log_level`` is read from ``CRM_LOG_LEVEL``.

    Notes
    - Add new shared settings here so downstream services inherit them.
    - Prefer a typed field over reading ``os.environ`` directly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    crm_env: str = Field(default="local")

    # Logging
    crm_log_level: str = Field(default="INFO")
    crm_log_format: str = Field(default="json")


class ContactsConfig(BaseConfig):
    """Configuration for the contacts service.

    ``PORT`` is accepted as a fallback for ``CRM_PORT`` so the service runs
    unchanged on hosts that inject a bare port variable.
    """

    crm_host: str = Field(default="0.0.0.0")
    crm_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("crm_port", "port"),
    )
    crm_cors_origins: str = Field(default="*")
    crm_seed_file: Optional[str] = Field(default=None)

    def cors_origin_list(self) -> List[str]:
        """Split ``crm_cors_origins`` on commas, dropping blanks."""
        return [origin.strip() for origin in self.crm_cors_origins.split(",") if origin.strip()]


def get_config(service_name: str) -> BaseConfig:
    """Get configuration for a specific service.

    Parameters
    - service_name: ``contacts``; unknown names fall back to ``BaseConfig``.
    """
    config_map = {
        "contacts": ContactsConfig,
    }

    config_class = config_map.get(service_name, BaseConfig)
    return config_class()
