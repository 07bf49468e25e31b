from typing import Sequence

from perfcollector.errors import EmptySeriesError
from perfcollector.models.metric_result import MetricResult
from perfcollector.models.metric_spec import MetricSpec
from perfcollector.models.summary_stats import SummaryStats
from perfcollector.util.log_config import setup_logger

logger = setup_logger(__name__)


def aggregate(series: Sequence[float], spec: MetricSpec) -> SummaryStats:
    """
    Calculate sum, mean and max of a finished series.

    Mean and max are converted to the metric's reporting unit.

    Raises:
        EmptySeriesError: if the series holds no samples
    """
    if not series:
        raise EmptySeriesError(spec.label)

    total = sum(series)
    return SummaryStats(
        count=len(series),
        sum=total,
        mean=spec.convert(total / len(series)),
        max=spec.convert(max(series)),
    )


def summarize(series: Sequence[float], spec: MetricSpec) -> MetricResult:
    """Aggregate a series, mapping an empty one to a result without stats."""
    try:
        stats = aggregate(series, spec)
    except EmptySeriesError as e:
        logger.warning(f"{e}; summary rows will be omitted")
        stats = None
    return MetricResult(spec=spec, series=list(series), stats=stats)
