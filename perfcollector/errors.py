"""Exceptions raised by the collector."""


class CollectorError(Exception):
    """Base class for all collector failures."""


class CommandInvocationError(CollectorError):
    """The external device command could not be executed."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"Failed to execute command '{command}': {reason}")
        self.command = command
        self.reason = reason


class EmptySeriesError(CollectorError):
    """Statistics were requested for a series without samples."""

    def __init__(self, label: str):
        super().__init__(f"No {label} samples were collected")
        self.label = label


class ConfigError(CollectorError):
    """Configuration is missing or malformed."""
