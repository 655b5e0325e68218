"""Exceptions raised by popo data objects."""

from typing import Any, Sequence, Tuple


def format_message(template: str, values: Sequence[Any]) -> str:
    """Substitute ``%s`` placeholders in a message template.

    Args:
        template: Message template with one ``%s`` placeholder per value
        values: Values substituted in order

    Returns:
        The formatted message
    """
    return template % tuple(values)


class PopoException(Exception):
    """Base exception for all popo errors.

    Subclasses set ``message`` to a template. The constructor accepts a single
    parameter, a list/tuple of parameters, or another exception whose message
    replaces the template.
    """

    message = "%s"

    def __init__(self, params: Any = None):
        """Initialize the exception from the class message template.

        Args:
            params: None, a single value, a list/tuple of values or an exception
        """
        if isinstance(params, BaseException):
            self.params: Tuple[Any, ...] = ()
            text = str(params)
        elif params is None:
            self.params = ()
            text = self.message
        else:
            self.params = tuple(params) if isinstance(params, (list, tuple)) else (params,)
            text = format_message(self.message, self.params)
        super().__init__(text)


class DirectAccessDisabled(PopoException, AttributeError):
    """Raised on any direct attribute read or write of a data object."""

    def __init__(self, field: str, mode: str = "read"):
        """Initialize with the attempted field name.

        Args:
            field: Attribute name that was accessed
            mode: "read" or "write"
        """
        self.field = field
        self.mode = mode
        if mode == "write":
            self.message = 'Public setters are disabled. Requested: "%s"'
        else:
            self.message = 'Public getters are disabled. Requested: "%s"'
        super().__init__(field)


class InvalidAccessor(PopoException):
    """Raised when a dispatched call name does not start with a getter or setter prefix."""

    message = 'Invalid accessor call: "%s" in "%s"'

    def __init__(self, call_name: str, type_name: str):
        """Initialize with the call name and the data object type name."""
        self.call_name = call_name
        self.type_name = type_name
        super().__init__([call_name, type_name])


class UnknownProperty(PopoException):
    """Raised when a getter resolves to a key missing from the data."""

    message = 'Unknown property: "%s" in "%s"'

    def __init__(self, key: str, type_name: str):
        """Initialize with the resolved key and the data object type name."""
        self.key = key
        self.type_name = type_name
        super().__init__([key, type_name])


class ConfigurationError(PopoException):
    """Raised when resolver configuration cannot be loaded or validated."""

    message = "Configuration validation failed: %s"
