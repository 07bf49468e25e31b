"""
Run Coordinator Module

Runs one sampler per metric over a single shared run window, waits for all
of them and trims the startup sample from each series.
"""
import threading
from datetime import datetime
from typing import List, Optional, Sequence

from perfcollector.consts.ParseFailurePolicy import ParseFailurePolicy
from perfcollector.models.metric_result import RunOutcome
from perfcollector.models.metric_spec import MetricSpec
from perfcollector.models.run_window import RunWindow
from perfcollector.service.command_runner.command_runner import CommandRunner, device_selector
from perfcollector.service.sampler.clock import Clock
from perfcollector.service.sampler.sampler import Sampler
from perfcollector.util.log_config import setup_logger

DEFAULT_DURATION = 60  # seconds
DEFAULT_STARTUP_TRIM = 1

logger = setup_logger(__name__)


def trim_startup_samples(series: List[float], count: int = DEFAULT_STARTUP_TRIM) -> List[float]:
    """
    Drop the first `count` samples of a finished series.

    The first reading after the inspection tool cold-starts is usually
    abnormally high. Trimming a series shorter than `count` yields an empty
    series instead of failing.
    """
    return list(series[count:])


class RunCoordinator:

    def __init__(
        self,
        specs: Sequence[MetricSpec],
        runner: Optional[CommandRunner] = None,
        clock: Optional[Clock] = None,
        adb: str = "adb",
        policy: ParseFailurePolicy = ParseFailurePolicy.ZERO,
        startup_trim: int = DEFAULT_STARTUP_TRIM,
    ):
        if not specs:
            raise ValueError("At least one metric spec is required")
        self.specs = list(specs)
        self.runner = runner or CommandRunner()
        self.clock = clock or Clock()
        self.adb = adb
        self.policy = policy
        self.startup_trim = startup_trim

    def open_window(self, duration: float) -> RunWindow:
        """Fix the shared deadline once, before any sampler starts."""
        start = self.clock.now()
        return RunWindow(start=start, duration=duration, started_at=datetime.fromtimestamp(start))

    def run(self, package: str, device: str = "", duration: float = DEFAULT_DURATION) -> RunOutcome:
        """
        Sample every metric concurrently until the deadline.

        Args:
            package: Target app package identifier
            device: Device serial, empty for the default device
            duration: Run length in seconds

        Returns:
            RunOutcome with one trimmed series per metric kind

        Raises:
            CommandInvocationError: if any sampler could not run its command
        """
        window = self.open_window(duration)
        selector = device_selector(device)
        abort = threading.Event()

        logger.info(f"End time: {window.deadline:.0f} ({duration}s)")

        samplers = [
            Sampler(
                spec,
                window,
                device=selector,
                package=package,
                runner=self.runner,
                clock=self.clock,
                adb=self.adb,
                policy=self.policy,
                abort=abort,
            )
            for spec in self.specs
        ]
        for sampler in samplers:
            sampler.start()

        # Wait for every sampler before touching any series
        outcome = RunOutcome(window=window)
        for sampler in samplers:
            outcome.series[sampler.spec.kind] = sampler.join()

        for sampler in samplers:
            if sampler.error is not None:
                raise sampler.error

        for kind, series in outcome.series.items():
            outcome.series[kind] = trim_startup_samples(series, self.startup_trim)
            logger.debug(f"{kind.value}: kept {len(outcome.series[kind])} of {len(series)} samples")

        return outcome
