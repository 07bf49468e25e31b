import pytest

from perfcollector.consts.MetricKind import MetricKind
from perfcollector.consts.ParseFailurePolicy import ParseFailurePolicy
from perfcollector.service.sample_parser.sample_parser import (
    PARSERS,
    parse_cpu_line,
    parse_cpu_output,
    parse_memory_output,
    parse_pss_line,
)

from conftest import MEMINFO, TOP_LINE


class TestCpuParser:

    def test_reads_ninth_field_without_percent(self):
        assert parse_cpu_line(TOP_LINE) == 23.5

    def test_value_without_percent_sign(self):
        line = "12345 u0_a123 10 -10 1.9G 180M 95M S 7 4.4 1:02.33 com.example.app"
        assert parse_cpu_line(line) == 7.0

    @pytest.mark.parametrize("line", [
        "",
        "12345 u0_a123 10 -10 1.9G",
        "12345 u0_a123 10 -10 1.9G 180M 95M S abc% 4.4 1:02.33 com.example.app",
        "12345 u0_a123 10 -10 1.9G 180M 95M S -3.0 4.4 1:02.33 com.example.app",
        "12345 u0_a123 10 -10 1.9G 180M 95M S nan 4.4 1:02.33 com.example.app",
    ])
    def test_malformed_line_is_none(self, line):
        assert parse_cpu_line(line) is None

    def test_only_first_line_is_used(self):
        second = TOP_LINE.replace("23.5%", "99.0%")
        assert parse_cpu_output(f"{TOP_LINE}\n{second}\n") == [23.5]

    def test_malformed_output_substitutes_zero(self):
        assert parse_cpu_output("garbage line\n") == [0.0]

    def test_malformed_output_dropped_with_drop_policy(self):
        assert parse_cpu_output("garbage line\n", ParseFailurePolicy.DROP) == []

    def test_empty_output_yields_nothing(self):
        assert parse_cpu_output("") == []


class TestMemoryParser:

    def test_reads_total_pss(self):
        assert parse_memory_output(MEMINFO) == [204800.0]

    def test_pss_line(self):
        assert parse_pss_line("TOTAL PSS:   1024   TOTAL RSS: 2048") == 1024.0

    def test_lines_without_marker_contribute_nothing(self):
        assert parse_memory_output("Native Heap 20480\nTOTAL RSS: 5\n") == []

    def test_one_sample_per_marker_line(self):
        text = "TOTAL PSS: 100 x\nsomething\n  TOTAL PSS: 200 y\n"
        assert parse_memory_output(text) == [100.0, 200.0]

    def test_malformed_marker_line(self):
        assert parse_memory_output("TOTAL PSS: n/a\n") == [0.0]
        assert parse_memory_output("TOTAL PSS:\n", ParseFailurePolicy.DROP) == []


def test_every_metric_kind_has_a_parser():
    assert set(PARSERS) == set(MetricKind)
