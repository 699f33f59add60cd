"""Dotted path resolution against template arguments.

Paths traverse string-keyed mappings by exact key and record-like objects
(dataclasses, named tuples, pydantic models, plain objects) by
case-insensitive field name. Positional indexing is not supported.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Iterable, Tuple

from pydantic import BaseModel

_SCALAR_TYPES = (str, bytes, int, float, complex, bool, type(None))

_MISSING = object()


def _field_names(value: Any) -> Iterable[str]:
    """Return the declared field names of a record-like value, in order."""
    if isinstance(value, _SCALAR_TYPES) or isinstance(value, type):
        return ()
    if dataclasses.is_dataclass(value):
        return [f.name for f in dataclasses.fields(value)]
    if isinstance(value, BaseModel):
        return list(type(value).model_fields)
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return list(value._fields)
    names = []
    if hasattr(value, "__dict__"):
        names.extend(vars(value))
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in names and hasattr(value, s))
    return names


def lookup_field(value: Any, name: str) -> Any:
    """Look up one path segment on a value.

    Args:
        value: Current value in the traversal.
        name: Path segment.

    Returns:
        The matched value, or the module sentinel when nothing matches.
    """
    if isinstance(value, Mapping):
        return value[name] if name in value else _MISSING

    wanted = name.casefold()
    for field_name in _field_names(value):
        if field_name.casefold() == wanted:
            return getattr(value, field_name)
    return _MISSING


def resolve(args: Any, path: str) -> Tuple[Any, bool]:
    """Resolve a dotted path against the argument bag.

    Args:
        args: Argument bag (usually a dict).
        path: Dotted path such as ``user.name``.

    Returns:
        Tuple of (value, found). ``value`` is None when not found.

    Example:
        >>> resolve({"user": {"name": "Tom"}}, "user.name")
        ('Tom', True)
    """
    current = args
    for segment in path.split("."):
        current = lookup_field(current, segment)
        if current is _MISSING:
            return None, False
    return current, True
