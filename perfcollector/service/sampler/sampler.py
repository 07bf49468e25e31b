"""
Sampler Module

Periodically captures one metric of the target app until the run window
closes. Each sampler owns its series exclusively while it is running; the
series is read only after the sampler thread has been joined.
"""
import threading
from typing import List, Optional

from perfcollector.consts.ParseFailurePolicy import ParseFailurePolicy
from perfcollector.errors import CommandInvocationError
from perfcollector.models.metric_spec import MetricSpec
from perfcollector.models.run_window import RunWindow
from perfcollector.service.command_runner.command_runner import CommandRunner
from perfcollector.service.sampler.clock import Clock
from perfcollector.util.log_config import setup_logger

logger = setup_logger(__name__)


class Sampler:
    """Capture one metric at a fixed cadence until the deadline passes"""

    def __init__(
        self,
        spec: MetricSpec,
        window: RunWindow,
        device: str,
        package: str,
        runner: CommandRunner,
        clock: Optional[Clock] = None,
        adb: str = "adb",
        policy: ParseFailurePolicy = ParseFailurePolicy.ZERO,
        abort: Optional[threading.Event] = None,
    ):
        """
        Initialize sampler.

        Args:
            spec: Metric to capture (command, parser, interval)
            window: Shared run window
            device: adb device selector ('-d' or '-s <serial>')
            package: Target app package identifier
            runner: Executes device commands
            clock: Time source (default: wall clock)
            adb: adb executable
            policy: What to record for malformed fields
            abort: Shared event set when any sampler hits a fatal error
        """
        self.spec = spec
        self.window = window
        self.command = spec.build_command(adb=adb, device=device, package=package)
        self.runner = runner
        self.clock = clock or Clock()
        self.policy = policy
        self.abort = abort or threading.Event()
        self.series: List[float] = []
        self.error: Optional[CommandInvocationError] = None
        self.iterations = 0
        self.thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start sampling in a background thread"""
        if self.thread is not None:
            return
        self.thread = threading.Thread(
            target=self.run,
            name=f"sampler-{self.spec.kind.value}",
            daemon=True,
        )
        self.thread.start()

    def join(self) -> List[float]:
        """Block until the sampler finishes and hand over its series."""
        if self.thread:
            self.thread.join()
        return self.series

    def run(self) -> None:
        """Main sampling loop"""
        logger.debug(f"{self.spec.label} sampler started, interval={self.spec.interval}s")
        while self.window.is_open(self.clock.now()) and not self.abort.is_set():
            try:
                output = self.runner.run(self.command)
            except CommandInvocationError as e:
                logger.error(f"{self.spec.label} sampler stopped: {e}")
                self.error = e
                self.abort.set()
                break

            self.iterations += 1
            for value in self.spec.parser(output, self.policy):
                logger.info(f"{self.spec.label}: {value}")
                self.series.append(value)

            self.clock.sleep(self.spec.interval)

        logger.info(f"{self.spec.label} sampler finished: {len(self.series)} samples from {self.iterations} captures")
