"""Configuration module for collection runs."""

from .collector_config import CollectorConfig
from .metric_settings import MetricSettings

__all__ = ["CollectorConfig", "MetricSettings"]
