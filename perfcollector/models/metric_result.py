"""Result models handed from the coordinator to aggregation and reporting."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from perfcollector.consts.MetricKind import MetricKind
from perfcollector.models.metric_spec import MetricSpec
from perfcollector.models.run_window import RunWindow
from perfcollector.models.summary_stats import SummaryStats


@dataclass
class RunOutcome:
    """Trimmed series of every metric captured during one run window."""
    window: RunWindow
    series: Dict[MetricKind, List[float]] = field(default_factory=dict)


@dataclass
class MetricResult:
    """
    A finished series together with its statistics.

    `stats` is None when the series holds no samples.
    """
    spec: MetricSpec
    series: List[float]
    stats: Optional[SummaryStats]

    @property
    def has_data(self) -> bool:
        return self.stats is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'metric': self.spec.kind.value,
            'unit': self.spec.unit,
            'interval': self.spec.interval,
            'stats': self.stats.to_dict() if self.stats else None,
            'samples': list(self.series),
        }
