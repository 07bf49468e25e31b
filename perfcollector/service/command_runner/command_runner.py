"""
Command Runner Module

Runs device inspection commands through the system shell and returns their
standard output.
"""
import shlex
import subprocess

from perfcollector.errors import CommandInvocationError
from perfcollector.util.log_config import setup_logger

logger = setup_logger(__name__)

# Exit statuses the shell uses when a command cannot be executed at all
SHELL_NOT_EXECUTABLE = 126
SHELL_NOT_FOUND = 127


def device_selector(device: str) -> str:
    """
    Build the adb device selector.

    Args:
        device: Device serial; empty selects the single attached USB device.

    Returns:
        '-d' for the default device, '-s <serial>' otherwise.
    """
    if not device:
        return "-d"
    return f"-s {shlex.quote(device)}"


class CommandRunner:
    """Executes shell commands synchronously. No retry, no timeout."""

    def run(self, command: str) -> str:
        """
        Run a shell command and capture its standard output.

        A non-zero exit status is not an error by itself: `grep` exits 1 when
        nothing matches, which simply means no sample this round.

        Raises:
            CommandInvocationError: if the shell could not be started or
                reports that the command does not exist or is not executable.
        """
        logger.debug(f"Running: {command}")
        try:
            result = subprocess.run(
                command,
                shell=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise CommandInvocationError(command, str(e)) from e

        if result.returncode in (SHELL_NOT_EXECUTABLE, SHELL_NOT_FOUND):
            reason = (result.stderr or "").strip() or f"exit status {result.returncode}"
            raise CommandInvocationError(command, reason)

        if result.returncode != 0 and result.stderr:
            logger.debug(f"Command exited with {result.returncode}: {result.stderr.strip()}")

        return result.stdout or ""
