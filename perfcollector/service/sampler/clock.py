import time


class Clock:
    """Time source used by samplers, replaceable in tests."""

    def now(self) -> float:
        """Current time in epoch seconds."""
        return time.time()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)
