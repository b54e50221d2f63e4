"""Configuration models using Pydantic for validation."""

import os
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from ..exceptions import ConfigError

API_KEY_ENV_VAR = "OPENWEATHER_API_KEY"


class ProviderConfig(BaseModel):
    """Weather provider (OpenWeatherMap) configuration."""

    api_key: str = ""
    base_url: str = "https://api.openweathermap.org/data/2.5"
    units: Literal["metric"] = "metric"
    timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate that the base URL is a valid HTTP/HTTPS URL."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
        if not parsed.netloc:
            raise ValueError(f"Invalid URL '{v}': URL must have a valid host")
        return v.rstrip("/")


class Settings(BaseModel):
    """General application settings."""

    recent_searches_limit: int = Field(default=5, ge=1, le=20)
    storage_path: str = ".cityweather/storage.json"
    share_base_url: str = "cityweather://search"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("share_base_url")
    @classmethod
    def validate_share_base_url(cls, v: str) -> str:
        """A share link needs at least a scheme."""
        if not urlparse(v).scheme:
            raise ValueError(f"Share base URL must include a scheme, got '{v}'")
        return v


class Config(BaseModel):
    """Main configuration model."""

    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    settings: Settings = Field(default_factory=Settings)

    def resolve_api_key(self) -> str:
        """Return the configured API key, falling back to the environment."""
        key = self.provider.api_key or os.environ.get(API_KEY_ENV_VAR, "")
        if not key:
            raise ConfigError(
                f"No API key configured. Set provider.api_key in the config file "
                f"or the {API_KEY_ENV_VAR} environment variable."
            )
        return key

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        import json

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()
