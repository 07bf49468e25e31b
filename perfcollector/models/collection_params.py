from dataclasses import dataclass
from pathlib import Path

from perfcollector.consts.ParseFailurePolicy import ParseFailurePolicy


@dataclass
class CollectionParams:
    package : str
    device : str
    duration : int
    output_dir : Path
    adb_cmd : str = "adb"
    parse_failure_policy : ParseFailurePolicy = ParseFailurePolicy.ZERO
    startup_trim : int = 1
    export_summary_json : bool = False

    def __str__(self):
        return (f"CollectionParams(\n"
                f"  package={self.package},\n"
                f"  device={self.device or '<default>'},\n"
                f"  duration={self.duration},\n"
                f"  output_dir={self.output_dir.resolve()},\n"
                f"  adb_cmd={self.adb_cmd},\n"
                f"  parse_failure_policy={self.parse_failure_policy.value},\n"
                f"  startup_trim={self.startup_trim},\n"
                f"  export_summary_json={self.export_summary_json}\n"
                f")")
