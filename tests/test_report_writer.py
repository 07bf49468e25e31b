import json

import pandas as pd
import pytest

from perfcollector.service.aggregator.aggregator import summarize
from perfcollector.service.report.report_writer import ReportWriter, build_rows, format_summary_table

from conftest import make_window

TIMESTAMP = "20261018_093005"


def test_build_rows_layout(cpu_spec):
    rows = build_rows(summarize([10.0, 20.0, 30.0], cpu_spec))
    assert rows == [
        [None, 10.0],
        [None, 20.0],
        [None, 30.0],
        ["Cpu Max", 30.0],
        ["Cpu Average", 20.0],
    ]


def test_build_rows_without_data_omits_summary(mem_spec):
    assert build_rows(summarize([], mem_spec)) == []


def test_report_path_uses_prefix_and_timestamp(tmp_path, cpu_spec, mem_spec):
    writer = ReportWriter(tmp_path)
    assert writer.report_path(cpu_spec, TIMESTAMP).name == "cpu_data_20261018_093005.xlsx"
    assert writer.report_path(mem_spec, TIMESTAMP).name == "mem_data_20261018_093005.xlsx"


def test_write_memory_workbook(tmp_path, mem_spec):
    path = ReportWriter(tmp_path).write(summarize([2048.0, 4096.0], mem_spec), TIMESTAMP)

    df = pd.read_excel(path, sheet_name="Memory Data", header=None)
    assert df.shape == (4, 2)
    assert list(df[1]) == pytest.approx([2048.0, 4096.0, 4.0, 3.0])
    assert df[0].isna().iloc[:2].all()
    assert list(df[0].iloc[2:]) == ["Mem Max", "Mem Average"]


def test_write_creates_output_dir(tmp_path, cpu_spec):
    out = tmp_path / "reports" / "run1"
    path = ReportWriter(out).write(summarize([1.0], cpu_spec), TIMESTAMP)
    assert path.exists()
    assert path.parent == out


def test_write_all_one_file_per_metric(tmp_path, cpu_spec, mem_spec):
    results = [summarize([1.0, 2.0], cpu_spec), summarize([1024.0], mem_spec)]
    paths = ReportWriter(tmp_path).write_all(results, TIMESTAMP)
    assert [p.name for p in paths] == ["cpu_data_20261018_093005.xlsx", "mem_data_20261018_093005.xlsx"]


def test_summary_json(tmp_path, cpu_spec, mem_spec):
    results = [summarize([1.0, 3.0], cpu_spec), summarize([], mem_spec)]
    path = ReportWriter(tmp_path).write_summary_json(results, make_window(5), "com.example.app")

    assert path.name == "summary_20261018_093005.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["package"] == "com.example.app"
    assert data["device"] is None
    assert data["metrics"][0]["stats"]["mean"] == 2.0
    assert data["metrics"][1]["stats"] is None


def test_summary_table_marks_missing_data(cpu_spec, mem_spec):
    table = format_summary_table([summarize([5.0], cpu_spec), summarize([], mem_spec)])
    assert "Cpu" in table
    assert "5.00" in table
    assert "N/A" in table
