from abc import ABC, abstractmethod


class Eventable(ABC):
    """Contract for domain types that build their own canonical event."""

    @abstractmethod
    def to_event(self) -> dict[str, object]:
        """Return the canonical event for this value.

        Returns:
            A mapping with a single entry: category key -> payload.
        """
