from typing import List, Optional

from perfcollector.config.metric_settings import MetricSettings
from perfcollector.consts.ParseFailurePolicy import ParseFailurePolicy


class CollectorConfig:
    adb_cmd: str
    default_duration: int
    output_dir: str
    parse_failure_policy: ParseFailurePolicy
    startup_trim: int
    export_summary_json: bool
    log_file: Optional[str]
    metrics: List[MetricSettings]

    def __repr__(self):
        return (f"CollectorConfig(adb_cmd={self.adb_cmd}, "
                f"default_duration={self.default_duration}, "
                f"output_dir={self.output_dir}, "
                f"parse_failure_policy={self.parse_failure_policy.value}, "
                f"startup_trim={self.startup_trim}, "
                f"metrics={[m.kind.value for m in self.metrics]})")
