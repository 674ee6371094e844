"""
Configuration loading and validation for Beacon.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

ChannelSpec = str | list[str]


class PlatformConfig(BaseModel):
    """
    Configuration for one delivery platform.

    Platform-specific keys (headers, url, ...) are kept as extra fields.
    """
    model_config = ConfigDict(extra="allow")

    channel: ChannelSpec | None = None  # Default channel(s) for every event
    events: dict[str, ChannelSpec] = Field(default_factory=dict)  # Per-event channel(s)
    webhooks: dict[str, str] = Field(default_factory=dict)  # Channel name -> URL

    def extra(self, key: str, default: Any = None) -> Any:
        """Look up a platform-specific key."""
        return (self.model_extra or {}).get(key, default)


class DocumentTypeConfig(BaseModel):
    """Display metadata for a document type."""
    label: str | None = None
    page: bool = False


class Config(BaseModel):
    """Main configuration for Beacon."""
    platforms: dict[str, PlatformConfig] = Field(default_factory=dict)
    document_types: dict[str, DocumentTypeConfig] = Field(default_factory=dict)
    global_type: str = "global"  # Type name of the site-wide singleton document
    standard_listeners: bool = True


def load_config(config_path: str | Path) -> Config:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
        yaml.YAMLError: If YAML parsing fails
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with path.open('r', encoding='utf-8') as f:
        raw_config: dict[str, Any] | None = yaml.safe_load(f)

    try:
        return Config.model_validate(raw_config or {})
    except ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}") from e
