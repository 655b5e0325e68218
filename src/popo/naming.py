"""Accessor name classification and property key derivation."""

import logging
import re
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .config import ResolverConfig
from .constants import CallType

log = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=\w)(?=[A-Z])")


def camel_to_underscore(text: str) -> str:
    """Convert a PascalCase/camelCase fragment to snake_case.

    Splits before every uppercase letter preceded by a word character, lowercases
    each segment and joins them with underscores.

    Example:
        camel_to_underscore("FirstName")  # "first_name"
    """
    return "_".join(segment.lower() for segment in _CAMEL_BOUNDARY.split(text))


def underscore_to_camel(key: str) -> str:
    """Convert a snake_case key to the PascalCase fragment used in accessor names."""
    return "".join(segment[:1].upper() + segment[1:] for segment in key.split("_"))


def accessor_names(key: str, config: Optional[ResolverConfig] = None) -> Tuple[str, str]:
    """Return the (getter, setter) accessor names for a snake_case key."""
    config = config if config is not None else ResolverConfig()
    fragment = underscore_to_camel(key)
    return config.getter_prefix + fragment, config.setter_prefix + fragment


class Resolution(BaseModel):
    """Result of resolving an accessor call name."""

    call_type: CallType = Field(..., description="Getter, setter or invalid")
    key: Optional[str] = Field(None, description="Internal snake_case property key")

    model_config = ConfigDict(frozen=True)


class NameResolver:
    """Classifies accessor call names and caches their derived property keys.

    The cache maps an exact call name to its derived key. Entries are only removed
    all at once through ``clear()``.
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        """Initialize the resolver.

        Args:
            config: Resolver configuration. Defaults to the "get"/"set" prefixes.
        """
        self.config = config if config is not None else ResolverConfig()
        self._cache: Dict[str, str] = {}

    def classify(self, name: str) -> CallType:
        """Classify a call name by its literal prefix."""
        if not isinstance(name, str):
            raise TypeError(f"Accessor name must be a string, got {type(name).__name__}")
        if name.startswith(self.config.getter_prefix):
            return CallType.GETTER
        if name.startswith(self.config.setter_prefix):
            return CallType.SETTER
        return CallType.INVALID

    def resolve(self, name: str) -> Resolution:
        """Resolve a call name into its call type and property key."""
        call_type = self.classify(name)
        if call_type == CallType.INVALID:
            return Resolution(call_type=call_type)

        key = self._cache.get(name)
        if key is not None:
            log.debug("Name cache hit: %s -> %s", name, key)
            return Resolution(call_type=call_type, key=key)

        prefix = self.config.getter_prefix if call_type == CallType.GETTER else self.config.setter_prefix
        key = camel_to_underscore(name[len(prefix) :])
        if self.config.cache_enabled:
            self._cache[name] = key
        log.debug("Resolved %s as %s for key '%s'", name, call_type.value, key)
        return Resolution(call_type=call_type, key=key)

    def clear(self) -> None:
        """Drop every cached resolution."""
        if self._cache:
            log.debug("Clearing %d cached name resolutions", len(self._cache))
        self._cache.clear()

    @property
    def cache(self) -> Dict[str, str]:
        """Snapshot of the cached call name to key mapping."""
        return dict(self._cache)

    def __len__(self) -> int:
        """Return the number of cached resolutions."""
        return len(self._cache)

    def __contains__(self, name: str) -> bool:
        """Check if a call name has a cached resolution."""
        return name in self._cache
