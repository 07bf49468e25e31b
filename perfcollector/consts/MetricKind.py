from enum import Enum


class MetricKind(Enum):
    CPU = "cpu"
    MEMORY = "memory"
