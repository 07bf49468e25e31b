"""
Report Writer Module

Persists finished series as spreadsheets (one workbook per metric) and
renders the end-of-run summary.
"""
import json
from pathlib import Path
from typing import Any, List, Optional, Sequence

import pandas as pd
from tabulate import tabulate

from perfcollector.models.metric_result import MetricResult
from perfcollector.models.metric_spec import MetricSpec
from perfcollector.models.run_window import RunWindow
from perfcollector.util.log_config import setup_logger

logger = setup_logger(__name__)


def build_rows(result: MetricResult) -> List[List[Any]]:
    """
    Lay out a report sheet.

    One row per sample with the value in column B, followed by
    ["<label> Max", max] and ["<label> Average", mean] when there is data.
    """
    rows: List[List[Any]] = [[None, value] for value in result.series]
    if result.has_data:
        rows.append([f"{result.spec.label} Max", result.stats.max])
        rows.append([f"{result.spec.label} Average", result.stats.mean])
    return rows


class ReportWriter:
    def __init__(self, output_dir: Path = Path(".")):
        self.output_dir = Path(output_dir)

    def report_path(self, spec: MetricSpec, timestamp: str) -> Path:
        return self.output_dir / f"{spec.file_prefix}_{timestamp}.xlsx"

    def write(self, result: MetricResult, timestamp: str) -> Path:
        """
        Write one metric's workbook.

        Args:
            result: Finished series with its statistics
            timestamp: Run start formatted as YYYYMMDD_HHMMSS

        Returns:
            Path of the written workbook
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.report_path(result.spec, timestamp)
        df = pd.DataFrame(build_rows(result), columns=["label", "value"])
        df.to_excel(path, sheet_name=result.spec.sheet_name, header=False, index=False, engine="openpyxl")
        logger.info(f"✓ {result.spec.sheet_name} exported to: {path.resolve()}")
        return path

    def write_all(self, results: Sequence[MetricResult], timestamp: str) -> List[Path]:
        return [self.write(result, timestamp) for result in results]

    def write_summary_json(
        self,
        results: Sequence[MetricResult],
        window: RunWindow,
        package: str,
        device: Optional[str] = None,
    ) -> Path:
        """Export the run summary and raw samples to summary_<timestamp>.json"""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / f"summary_{window.timestamp}.json"
        data = {
            'package': package,
            'device': device or None,
            'started_at': window.started_at.isoformat(),
            'duration': window.duration,
            'metrics': [result.to_dict() for result in results],
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        logger.info(f"✓ Summary exported to: {path.resolve()}")
        return path


def format_summary_table(results: Sequence[MetricResult]) -> str:
    """Render average and peak of every metric as a console table."""
    headers = ["Metric", "Samples", "Average", "Max", "Unit"]
    table_data = []
    for result in results:
        if not result.has_data:
            table_data.append([result.spec.label, 0, "N/A", "N/A", result.spec.unit])
        else:
            table_data.append([
                result.spec.label,
                result.stats.count,
                f"{result.stats.mean:.2f}",
                f"{result.stats.max:.2f}",
                result.spec.unit,
            ])
    return tabulate(table_data, headers=headers, tablefmt="heavy_grid", stralign="right", numalign="right")
