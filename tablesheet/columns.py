"""
Column descriptors: header label, display format, and value accessor for one table column.
"""
from __future__ import annotations

import datetime as dt
import logging
import types
import typing
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from tablesheet.excel import formats
from tablesheet.exceptions import FailedToGetTableValueError

logger = logging.getLogger(__name__)

Getter = Callable[[Any], Any]
Key = Union[str, Getter]

# Checked in order: datetime is a subclass of date.
DEFAULT_FORMATS: list[tuple[type, str]] = [
    (dt.datetime, formats.DATE_TIME),
    (dt.timedelta, formats.DURATION),
    (dt.date, formats.DATE),
    (dt.time, formats.TIME),
]


def default_format(property_type: type) -> str:
    """Display format used when a column doesn't specify one."""
    for known_type, fmt in DEFAULT_FORMATS:
        if property_type is known_type:
            return fmt
    return ""


# ---------------------------------------------------------------------------
# Type resolution
# ---------------------------------------------------------------------------

def _unwrap(tp: Any) -> type:
    """Reduce a type hint to a plain class: Optional[X] -> X, list[int] -> list."""
    origin = typing.get_origin(tp)
    if origin in (Union, types.UnionType):
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        return _unwrap(args[0]) if len(args) == 1 else object
    if origin is typing.Annotated:
        return _unwrap(typing.get_args(tp)[0])
    if origin is not None:
        return origin if isinstance(origin, type) else object
    return tp if isinstance(tp, type) else object


def _hints(obj: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(obj)
    except (TypeError, NameError, AttributeError):
        return {}


def resolve_path_type(element_type: Optional[type], path: str) -> type:
    """Follow a dotted attribute path through the type hints of ``element_type``."""
    current: Any = element_type
    for part in path.split("."):
        if current is None:
            return object
        hint = _hints(current).get(part)
        if hint is None:
            return object
        current = _unwrap(hint)
    return current if isinstance(current, type) else object


def resolve_return_type(getter: Getter) -> type:
    hint = _hints(getter).get("return")
    return object if hint is None else _unwrap(hint)


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------

def path_getter(path: str) -> Getter:
    """Accessor for a dotted path; mappings are indexed, everything else uses getattr."""
    parts = path.split(".")

    def getter(element: Any) -> Any:
        value = element
        for part in parts:
            try:
                if isinstance(value, Mapping):
                    value = value[part]
                else:
                    value = getattr(value, part)
            except (KeyError, AttributeError) as exc:
                raise FailedToGetTableValueError(
                    path, f"Could not read '{part}' from {type(value).__name__}", exc
                ) from exc
        return value

    getter.__name__ = path
    return getter


# ---------------------------------------------------------------------------
# Column descriptor
# ---------------------------------------------------------------------------

@dataclass
class TableSheetColumn:
    """One structured-table column derived from a property of the element type."""
    property_type: type
    getter: Getter
    label: str = ""
    format: str = ""
    name: str = ""
    guid: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.property_type.__name__
        if not self.format:
            self.format = default_format(self.property_type)
        if not self.name:
            self.name = self.label

    @classmethod
    def create(
        cls,
        key: Key,
        label: str = "",
        format: str = "",
        property_type: Optional[type] = None,
        element_type: Optional[type] = None,
        name: Optional[str] = None,
    ) -> "TableSheetColumn":
        """Build a column from an attribute path or a callable.

        The property type is, in order: ``property_type`` if given, the type
        hint found along the attribute path on ``element_type``, the
        callable's return annotation, or ``object``.
        """
        if isinstance(key, str):
            getter = path_getter(key)
            resolved = resolve_path_type(element_type, key)
            default_name = key
        elif callable(key):
            getter = key
            resolved = resolve_return_type(key)
            default_name = getattr(key, "__name__", "")
            if default_name == "<lambda>":
                default_name = ""
        else:
            raise TypeError(f"Column key must be an attribute path or a callable, got {type(key).__name__}")

        if property_type is not None:
            resolved = _unwrap(property_type)

        column = cls(resolved, getter, label, format, name or default_name)
        logger.debug("Created column %r (%s, format=%r)", column.label, resolved.__name__, column.format)
        return column
