"""Configuration for accessor name resolution."""

import logging
import re
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .constants import GETTER_PREFIX, SETTER_PREFIX
from .exceptions import ConfigurationError

log = logging.getLogger(__name__)

_PREFIX_PATTERN = re.compile(r"^[a-z_][a-z0-9_]*$")


class ResolverConfig(BaseModel):
    """Accessor naming configuration."""

    getter_prefix: str = Field(default=GETTER_PREFIX, description="Prefix marking a getter call")
    setter_prefix: str = Field(default=SETTER_PREFIX, description="Prefix marking a setter call")
    cache_enabled: bool = Field(default=True, description="Whether resolved names are cached")

    @field_validator("getter_prefix", "setter_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Ensure the prefix is a lowercase identifier fragment."""
        if not _PREFIX_PATTERN.match(v):
            raise ValueError(f"Prefix must be a non-empty lowercase identifier, got '{v}'")
        return v

    @model_validator(mode="after")
    def validate_distinct_prefixes(self) -> "ResolverConfig":
        """Ensure neither prefix shadows the other."""
        if self.getter_prefix.startswith(self.setter_prefix) or self.setter_prefix.startswith(self.getter_prefix):
            raise ValueError(
                f"Getter prefix '{self.getter_prefix}' and setter prefix '{self.setter_prefix}' must not overlap"
            )
        return self


def load_config(config_path: Path) -> ResolverConfig:
    """Load resolver configuration from a YAML file.

    The settings may sit at the top level or under a ``resolver`` key.

    Args:
        config_path: Path to the YAML file

    Returns:
        Validated ResolverConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file content is not a valid configuration
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration not found: {config_path}")

    with open(config_path, "r") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"expected a mapping in {config_path}")
    if "resolver" in data:
        data = data["resolver"] or {}

    try:
        config = ResolverConfig.model_validate(data)
    except ValidationError as e:
        friendly_errors = []
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"]) or "resolver"
            friendly_errors.append(f"{field}: {error['msg']}")
        raise ConfigurationError("\n• " + "\n• ".join(friendly_errors)) from e

    log.info("Loaded resolver configuration from %s", config_path)
    return config


def load_config_if_exists(config_path: Path) -> Optional[ResolverConfig]:
    """Load configuration if the file exists, otherwise return None."""
    if not config_path.exists():
        return None
    return load_config(config_path)
