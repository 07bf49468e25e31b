from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class SummaryStats:
    """Summary of a finished series. `sum` stays in captured units, `mean`/`max` are converted."""
    count: int
    sum: float
    mean: float
    max: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)
