"""Constants for popo accessor dispatch."""

from enum import Enum

GETTER_PREFIX = "get"
SETTER_PREFIX = "set"


class CallType(Enum):
    """Classification of an accessor call name."""

    GETTER = "GETTER"
    SETTER = "SETTER"
    INVALID = "INVALID"

    @property
    def is_accessor(self) -> bool:
        """Check if the call type denotes a getter or a setter."""
        return self != CallType.INVALID
