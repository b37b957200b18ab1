"""
Time source used by the discovery loop.

The retry loop never calls the clock functions of the time module directly;
it reads elapsed time and waits through a Clock so that tests can drive it
with a fake one.
"""

import threading
import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Monotonic time reading plus a blocking wait."""

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic timestamp in seconds."""
        pass

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Block the caller for ``seconds``."""
        pass


class SystemClock(Clock):
    """
    Clock backed by ``time.monotonic`` and a cancellable wait.

    ``sleep`` waits on a ``threading.Event``; calling ``cancel`` from another
    thread ends the current and any later wait immediately.
    """

    def __init__(self):
        self._cancelled = threading.Event()

    def monotonic(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        self._cancelled.wait(timeout=seconds)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()
