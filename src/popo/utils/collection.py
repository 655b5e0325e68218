"""Collection helpers for data objects."""

from collections.abc import Mapping
from typing import Any, Dict


def to_array(obj: Any) -> Dict[str, Any]:
    """Return a flat, order-preserving snapshot of an object's data.

    Args:
        obj: A DataObject, a mapping or an object exposing ``to_dict()``

    Returns:
        A new dictionary with the object's key/value pairs

    Raises:
        TypeError: If the object cannot be converted
    """
    get_data = getattr(type(obj), "get_data", None)
    if callable(get_data):
        return dict(obj.get_data())
    if isinstance(obj, Mapping):
        return dict(obj)
    to_dict = getattr(type(obj), "to_dict", None)
    if callable(to_dict):
        return dict(obj.to_dict())
    raise TypeError(f"Cannot convert {type(obj).__name__} to a mapping")
