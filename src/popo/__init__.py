"""Plain data objects exposed only through get/set accessor calls."""

from .config import ResolverConfig, load_config
from .constants import CallType
from .exceptions import (
    ConfigurationError,
    DirectAccessDisabled,
    InvalidAccessor,
    PopoException,
    UnknownProperty,
)
from .models import DataObject, Resolution, define
from .naming import NameResolver, camel_to_underscore
from .utils.collection import to_array

__all__ = [
    "CallType",
    "ConfigurationError",
    "DataObject",
    "DirectAccessDisabled",
    "InvalidAccessor",
    "NameResolver",
    "PopoException",
    "Resolution",
    "ResolverConfig",
    "UnknownProperty",
    "camel_to_underscore",
    "define",
    "load_config",
    "to_array",
]
