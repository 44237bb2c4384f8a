from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from eventable.timing.timer import Timer


@dataclass(frozen=True)
class CategorizedEvent:
    """Event with an explicit category, converted without tokenizing."""

    category: str
    data: Mapping[str, Any]


@dataclass(frozen=True)
class CustomEvent:
    """Line-of-business event that has no dedicated type.

    Fields:
        name: Identifies the event, e.g. "payment_received".
        data: Optional payload of JSON-friendly values.
        time_ms: Optional execution time in milliseconds.
    """

    name: str
    data: dict[str, Any] | None = None
    time_ms: float | None = None

    @classmethod
    def new(cls, **options: Any) -> "CustomEvent":
        """Create a custom event from keyword options.

        A ``timer`` option holding a handle from ``Timer.start()`` is resolved
        to its elapsed duration and stored as ``time_ms``.
        """
        timer = options.pop("timer", None)
        if timer is not None:
            options["time_ms"] = Timer.duration_ms(timer)
        return cls(**options)
