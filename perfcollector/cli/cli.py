#!/usr/bin/env python3
"""
Command-line interface of the collector.
"""
import argparse
import sys
from typing import Optional, Sequence

from perfcollector.consts.ParseFailurePolicy import ParseFailurePolicy


def build_collect_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Sample CPU usage and PSS memory of an Android app through adb "
                    "and write the series to spreadsheets."
    )
    ap.add_argument("-d", "--device", type=str, default="",
                    help="Device serial (adb -s <device>). If omitted, uses the single USB device (adb -d)")
    ap.add_argument("-p", "--package", type=str, required=True,
                    help="Package of the app under test")
    ap.add_argument("-t", "--time", type=int, default=None,
                    help="Test duration in seconds (default: 60, or default_duration from config)")
    ap.add_argument("--env", type=str, default=None,
                    help=(
                        "Environment name for configuration override (e.g., 'dev', 'ci'). "
                        "Loads config_<env>.yaml in addition to the base config.yaml."
                    ))
    ap.add_argument("--output-dir", type=str, default=None,
                    help="Directory for the report files (default: output_dir from config)")
    ap.add_argument("--on-parse-failure", choices=[p.value for p in ParseFailurePolicy], default=None,
                    help="zero: record 0.0 for malformed fields; drop: skip them (default: from config)")
    ap.add_argument("--log-file", type=str, default=None,
                    help="Also write detailed logs to this file")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Also log commands, trimming and configuration details")
    return ap


def validate_collect_args(args: argparse.Namespace):
    if args.time is not None and args.time < 0:
        print(f"Error: --time must be non-negative, got {args.time}", file=sys.stderr)
        sys.exit(1)

    if not args.package.strip():
        print("Error: --package must not be empty", file=sys.stderr)
        sys.exit(1)


def parse_collect_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    args = build_collect_parser().parse_args(argv)
    validate_collect_args(args)
    return args
