import threading
from datetime import datetime
from typing import Dict, List

import pytest

from perfcollector.config.config_loader import ConfigLoader
from perfcollector.errors import CommandInvocationError
from perfcollector.models.run_window import RunWindow

START = 1_700_000_000.0

TOP_LINE = "12345 u0_a123 10 -10 1.9G 180M 95M S 23.5% 4.4 1:02.33 com.example.app"
MEMINFO = """Applications Memory Usage (in Kilobytes):
Uptime: 123456 Realtime: 123456

** MEMINFO in pid 12345 [com.example.app] **
                   Pss  Private  Private  SwapPss      Rss
                 Total    Dirty    Clean    Dirty    Total
  Native Heap    20480    20400        0        0    22000
           TOTAL PSS:   204800            TOTAL RSS:   300000      TOTAL SWAP PSS:        0
"""


class FakeClock:
    """
    Deterministic clock: sleep() advances time instantly.

    Each thread gets its own timeline starting at `start`, so concurrent
    samplers with different intervals do not disturb each other.
    """

    def __init__(self, start: float = START):
        self.start = start
        self._local = threading.local()
        self.sleeps: List[float] = []
        self._lock = threading.Lock()

    def now(self) -> float:
        return self.start + getattr(self._local, "elapsed", 0.0)

    def sleep(self, seconds: float) -> None:
        self._local.elapsed = getattr(self._local, "elapsed", 0.0) + seconds
        with self._lock:
            self.sleeps.append(seconds)


class FakeRunner:
    """Returns canned output for the first registered key found in a command."""

    def __init__(self, outputs: Dict[str, List[str]], fail_on: str = ""):
        self.outputs = outputs
        self.fail_on = fail_on
        self.commands: List[str] = []
        self._calls: Dict[str, int] = {}
        self._lock = threading.Lock()

    def run(self, command: str) -> str:
        with self._lock:
            self.commands.append(command)
        if self.fail_on and self.fail_on in command:
            raise CommandInvocationError(command, "adb: not found")
        for key, values in self.outputs.items():
            if key in command:
                with self._lock:
                    index = self._calls.get(key, 0)
                    self._calls[key] = index + 1
                return values[min(index, len(values) - 1)]
        return ""


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def specs():
    return ConfigLoader().get_metric_specs()


@pytest.fixture
def cpu_spec(specs):
    return specs[0]


@pytest.fixture
def mem_spec(specs):
    return specs[1]


def make_window(duration: float, start: float = START) -> RunWindow:
    return RunWindow(start=start, duration=duration, started_at=datetime(2026, 10, 18, 9, 30, 5))
