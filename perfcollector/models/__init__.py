"""Models for collector data structures."""

from .metric_result import MetricResult, RunOutcome
from .metric_spec import MetricSpec
from .run_window import RunWindow
from .summary_stats import SummaryStats

__all__ = ["MetricResult", "MetricSpec", "RunOutcome", "RunWindow", "SummaryStats"]
