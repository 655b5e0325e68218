"""Plain data object exposing its data only through accessor calls."""

import logging
import sys
from typing import Any, ClassVar, Dict, Iterable, Mapping, Optional, Tuple, Type

from ..config import ResolverConfig
from ..constants import CallType
from ..exceptions import DirectAccessDisabled, InvalidAccessor, UnknownProperty
from ..naming import NameResolver, accessor_names, camel_to_underscore, underscore_to_camel

log = logging.getLogger(__name__)

_get = object.__getattribute__
_set = object.__setattr__

# Instance state never readable from outside
_HIDDEN_FIELDS = frozenset({"_data", "_resolver", "_call_type", "_call_property", "__dict__"})


def _make_getter(name: str, key: str):
    def getter(self):
        return self.dispatch(name)

    getter.__name__ = name
    getter.__doc__ = f"Return the '{key}' property."
    return getter


def _make_setter(name: str, key: str):
    def setter(self, *arguments):
        self.dispatch(name, *arguments)

    setter.__name__ = name
    setter.__doc__ = f"Set the '{key}' property."
    return setter


class DataObject:
    """A flat key/value object whose data is reachable only through accessor calls.

    Every read goes through a getter-shaped call (``getTitle``) and every write
    through a setter-shaped call (``setTitle``), both funneled into ``dispatch``.
    Reading, writing or deleting attributes directly raises DirectAccessDisabled.

    Subclasses declare the accessors they expose; a getter and a setter is generated
    for each declared key:

        class Article(DataObject):
            accessors = ("title", "first_name")

        article = Article({"title": "Hello"})
        article.getTitle()            # "Hello"
        article.setFirstName("Ada")
        article.dispatch("getFirstName")  # "Ada"
    """

    __slots__ = ("_data", "_resolver", "_call_type", "_call_property")

    accessors: ClassVar[Tuple[str, ...]] = ()
    resolver_config: ClassVar[Optional[ResolverConfig]] = None

    def __init_subclass__(cls, **kwargs):
        """Generate getter and setter methods for the declared accessors.

        Raises:
            ValueError: If a declared key does not survive the accessor name round trip
        """
        super().__init_subclass__(**kwargs)
        for key in cls.__dict__.get("accessors", ()):
            if camel_to_underscore(underscore_to_camel(key)) != key:
                raise ValueError(f"Accessor key '{key}' of {cls.__name__} is not a snake_case key")
            getter_name, setter_name = accessor_names(key, cls.resolver_config)
            if getter_name not in cls.__dict__:
                setattr(cls, getter_name, _make_getter(getter_name, key))
            if setter_name not in cls.__dict__:
                setattr(cls, setter_name, _make_setter(setter_name, key))

    def __init__(self, data: Optional[Mapping[str, Any]] = None, resolver: Optional[NameResolver] = None):
        """Initialize the object with its data.

        Args:
            data: Initial mapping of snake_case keys to values. It is copied.
            resolver: Name resolver to use. Each object gets its own by default.
        """
        _set(self, "_data", dict(data) if data is not None else {})
        if resolver is None:
            resolver = NameResolver(type(self).resolver_config)
        _set(self, "_resolver", resolver)
        _set(self, "_call_type", None)
        _set(self, "_call_property", None)

    def __getattribute__(self, name: str) -> Any:
        """Allow class-level methods and properties, reject instance state."""
        if name in _HIDDEN_FIELDS:
            raise DirectAccessDisabled(name, "read")
        return _get(self, name)

    def __getattr__(self, name: str) -> Any:
        """Reject direct attribute reads."""
        raise DirectAccessDisabled(name, "read")

    def __setattr__(self, name: str, value: Any) -> None:
        """Reject direct attribute writes."""
        raise DirectAccessDisabled(name, "write")

    def __delattr__(self, name: str) -> None:
        """Reject direct attribute deletion."""
        raise DirectAccessDisabled(name, "write")

    def dispatch(self, call_name: str, *arguments: Any) -> Any:
        """Route an accessor call to the underlying data.

        Args:
            call_name: Accessor name such as "getTitle" or "setFirstName"
            *arguments: Setter value; only the first is used

        Returns:
            The stored value for getters, None for setters

        Raises:
            InvalidAccessor: If the name is neither getter- nor setter-shaped
            UnknownProperty: If a getter targets a key missing from the data
        """
        _set(self, "_call_type", None)
        _set(self, "_call_property", None)

        resolution = _get(self, "_resolver").resolve(call_name)
        if resolution.call_type == CallType.INVALID:
            raise InvalidAccessor(call_name, type(self).__name__)

        key = resolution.key
        _set(self, "_call_type", resolution.call_type)
        _set(self, "_call_property", key)

        data = _get(self, "_data")
        if resolution.call_type == CallType.GETTER:
            if key not in data:
                raise UnknownProperty(key, type(self).__name__)
            return data[key]

        # A setter without arguments stores None
        data[key] = arguments[0] if arguments else None
        return None

    def get_data(self) -> Dict[str, Any]:
        """Return the internal data mapping."""
        return _get(self, "_data")

    def replace_data(self, new_data: Mapping[str, Any]) -> None:
        """Replace all data and drop every cached name resolution."""
        _set(self, "_data", dict(new_data))
        _get(self, "_resolver").clear()
        log.debug("Replaced data of %s with %d keys", type(self).__name__, len(new_data))

    @property
    def last_call_type(self) -> Optional[CallType]:
        """Call type of the most recent dispatch."""
        return _get(self, "_call_type")

    @property
    def last_call_property(self) -> Optional[str]:
        """Property key of the most recent dispatch."""
        return _get(self, "_call_property")

    def __contains__(self, key: str) -> bool:
        """Check if a property key is present in the data."""
        return key in _get(self, "_data")

    def __eq__(self, other: object) -> bool:
        """Compare type and data."""
        if type(other) is not type(self):
            return NotImplemented
        return self.get_data() == other.get_data()

    __hash__ = None

    def __reduce__(self):
        """Support copy and pickle through the constructor.

        The copy gets a fresh resolver with the same configuration.
        """
        resolver = NameResolver(_get(self, "_resolver").config)
        return (type(self), (dict(self.get_data()), resolver))

    def __repr__(self):
        """Return the type name with the underlying data."""
        return f"{type(self).__name__}({self.get_data()!r})"


def define(
    type_name: str,
    accessors: Iterable[str],
    resolver_config: Optional[ResolverConfig] = None,
    module: Optional[str] = None,
) -> Type[DataObject]:
    """Create a DataObject subclass with generated accessors.

    Like ``collections.namedtuple``, the class is attributed to the calling module
    unless ``module`` is given, so instances pickle when the class is bound to a
    module-level name equal to ``type_name``.

    Example:
        Article = define("Article", ["title", "body"])
        Article({"title": "Hello"}).getTitle()
    """
    if module is None:
        module = sys._getframe(1).f_globals.get("__name__", "__main__")

    namespace = {
        "__slots__": (),
        "__module__": module,
        "accessors": tuple(accessors),
        "resolver_config": resolver_config,
    }
    return type(type_name, (DataObject,), namespace)
