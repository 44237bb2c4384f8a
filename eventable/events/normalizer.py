"""Converts arbitrary values into canonical event mappings."""

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from eventable.events.base import Eventable
from eventable.events.exceptions import MalformedIdentifierError, UnsupportedShapeError
from eventable.events.models import CategorizedEvent
from eventable.events.tokenizer import tokenize

ERROR_KEY = "error"
_CATEGORY_FIELD = "category"
_DATA_FIELD = "data"


def to_event(value: object) -> dict[str, Any]:
    """Convert a value into a canonical ``{category_key: payload}`` mapping.

    Shapes are tried in order:
        1. ``Eventable`` implementations build their own event.
        2. ``CategorizedEvent`` or a mapping with ``category`` and ``data`` keys.
        3. Any other mapping, returned unchanged.
        4. Exceptions, as ``{"error": {"name": ..., "message": ...}}``.
        5. Records (dataclasses, named tuples, pydantic models), keyed by
           their snake_cased type name.

    Raises:
        UnsupportedShapeError: if the value matches none of the shapes, or a
            record type name holds no letters or digits.
    """
    if isinstance(value, Eventable):
        return value.to_event()
    if isinstance(value, CategorizedEvent):
        return {value.category: value.data}
    if isinstance(value, Mapping):
        return _from_mapping(value)
    if isinstance(value, BaseException):
        return _from_error(value)
    fields = _record_fields(value)
    if fields is None:
        raise UnsupportedShapeError(
            f"Cannot convert value of type {type(value).__name__} to an event"
        )
    try:
        category_key = category_key_for(type(value))
    except MalformedIdentifierError as exc:
        raise UnsupportedShapeError(
            f"Cannot derive an event category from type {type(value).__name__!r}"
        ) from exc
    return {category_key: fields}


def category_key_for(kind: type | str) -> str:
    """Derive a snake_case category key from a type or its name.

    ``HTTPServerStarted`` becomes ``http_server_started``. Qualified names
    (``orders.OrderPlaced``) use their last component only.
    """
    name = kind if isinstance(kind, str) else kind.__name__
    short_name = name.rsplit(".", 1)[-1]
    return "_".join(word.lower() for word in tokenize(short_name))


def _from_mapping(value: Mapping[Any, Any]) -> Any:
    if _CATEGORY_FIELD in value and _DATA_FIELD in value:
        return {value[_CATEGORY_FIELD]: value[_DATA_FIELD]}
    return value


def _from_error(error: BaseException) -> dict[str, Any]:
    return {
        ERROR_KEY: {
            "name": type(error).__name__,
            "message": str(error),
        }
    }


def _record_fields(value: object) -> dict[str, Any] | None:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, BaseModel):
        return dict(value)
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return dict(zip(value._fields, value))
    return None
