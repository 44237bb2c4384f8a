import time


class Timer:
    """Measures elapsed time from a monotonic start handle."""

    @staticmethod
    def start() -> int:
        """Return a handle for the current monotonic time."""
        return time.monotonic_ns()

    @staticmethod
    def duration_ms(handle: int) -> float:
        """Return milliseconds elapsed since ``handle`` was taken."""
        return (time.monotonic_ns() - handle) / 1_000_000
