from eventable.events.base import Eventable
from eventable.events.exceptions import (
    EventError,
    MalformedIdentifierError,
    UnsupportedShapeError,
)
from eventable.events.models import CategorizedEvent, CustomEvent
from eventable.events.normalizer import category_key_for, to_event
from eventable.events.tokenizer import tokenize

__all__ = [
    "CategorizedEvent",
    "CustomEvent",
    "EventError",
    "Eventable",
    "MalformedIdentifierError",
    "UnsupportedShapeError",
    "category_key_for",
    "to_event",
    "tokenize",
]
