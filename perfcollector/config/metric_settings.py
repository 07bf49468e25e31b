"""
Metric settings data class.

Describes how one metric kind is sampled and reported, as read from YAML.
"""

from dataclasses import dataclass

from perfcollector.consts.MetricKind import MetricKind


@dataclass
class MetricSettings:

    kind: MetricKind
    label: str
    sheet_name: str
    file_prefix: str
    interval: float
    command: str
    unit_divisor: float = 1.0
    unit: str = ""
