"""
Sample Parser Module

Extracts numeric samples from the text printed by the device inspection
tools. Malformed fields never raise; they are resolved by a ParseFailurePolicy.
"""
import math
from typing import List, Optional

from perfcollector.consts.MetricKind import MetricKind
from perfcollector.consts.ParseFailurePolicy import ParseFailurePolicy

# `top -b -n 1` row: PID USER PR NI VIRT RES SHR S [%CPU] %MEM TIME+ ARGS
CPU_FIELD_INDEX = 8
# `dumpsys meminfo` line: "TOTAL PSS:   123456  TOTAL RSS: ..."
PSS_MARKER = "TOTAL PSS:"
PSS_FIELD_INDEX = 2


def _to_sample(raw: str) -> Optional[float]:
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def parse_cpu_line(line: str) -> Optional[float]:
    """
    Read the CPU percentage column from one `top` row.

    Returns:
        The value with any trailing '%' removed, or None if the field is
        missing or not a non-negative number.
    """
    fields = line.split()
    if len(fields) <= CPU_FIELD_INDEX:
        return None
    return _to_sample(fields[CPU_FIELD_INDEX].rstrip("%"))


def parse_pss_line(line: str) -> Optional[float]:
    """Read the PSS value (KB) from a `TOTAL PSS:` line, or None if malformed."""
    fields = line.split()
    if len(fields) <= PSS_FIELD_INDEX:
        return None
    return _to_sample(fields[PSS_FIELD_INDEX])


def _resolve(value: Optional[float], policy: ParseFailurePolicy) -> List[float]:
    if value is not None:
        return [value]
    if policy == ParseFailurePolicy.ZERO:
        return [0.0]
    return []


def parse_cpu_output(text: str, policy: ParseFailurePolicy = ParseFailurePolicy.ZERO) -> List[float]:
    """
    Parse the output of the CPU command.

    Only the first line is used. Output without any line yields no sample.
    """
    lines = text.splitlines()
    if not lines:
        return []
    return _resolve(parse_cpu_line(lines[0]), policy)


def parse_memory_output(text: str, policy: ParseFailurePolicy = ParseFailurePolicy.ZERO) -> List[float]:
    """Parse the output of the memory command, one sample per `TOTAL PSS:` line."""
    samples: List[float] = []
    for line in text.splitlines():
        if PSS_MARKER in line:
            samples.extend(_resolve(parse_pss_line(line), policy))
    return samples


PARSERS = {
    MetricKind.CPU: parse_cpu_output,
    MetricKind.MEMORY: parse_memory_output,
}
