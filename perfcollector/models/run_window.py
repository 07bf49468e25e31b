from dataclasses import dataclass
from datetime import datetime

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


@dataclass(frozen=True)
class RunWindow:
    """Absolute time bound shared by every sampler of a run."""
    start: float
    duration: float
    started_at: datetime

    @property
    def deadline(self) -> float:
        return self.start + self.duration

    @property
    def timestamp(self) -> str:
        """Run start formatted for report file names (YYYYMMDD_HHMMSS)."""
        return self.started_at.strftime(TIMESTAMP_FORMAT)

    def is_open(self, now: float) -> bool:
        return now < self.deadline
