#!/usr/bin/env python3
"""
Collection runner for app performance testing.

Samples CPU usage and PSS memory of one app on an attached device for a fixed
duration, then writes one spreadsheet per metric.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from perfcollector.cli.cli import parse_collect_args
from perfcollector.config.config_loader import ConfigLoader, parse_policy
from perfcollector.errors import CollectorError
from perfcollector.models.collection_params import CollectionParams
from perfcollector.models.metric_result import MetricResult
from perfcollector.models.metric_spec import MetricSpec
from perfcollector.service.aggregator.aggregator import summarize
from perfcollector.service.command_runner.command_runner import CommandRunner
from perfcollector.service.coordinator.run_coordinator import RunCoordinator
from perfcollector.service.report.report_writer import ReportWriter, format_summary_table
from perfcollector.service.sampler.clock import Clock
from perfcollector.util.file_utils import resolve_cmd
from perfcollector.util.log_config import set_log_level, setup_logger

logger = setup_logger(__name__)


def collect(
    params: CollectionParams,
    specs: Sequence[MetricSpec],
    runner: Optional[CommandRunner] = None,
    clock: Optional[Clock] = None,
) -> List[MetricResult]:
    """
    Run one collection and write its reports.

    Args:
        params: What to sample and where to write
        specs: Metrics to sample concurrently
        runner: Executes device commands (default: system shell)
        clock: Time source (default: wall clock)

    Returns:
        One MetricResult per spec, in spec order

    Raises:
        CommandInvocationError: if a device command could not be executed
        OSError: if a report could not be written
    """
    logger.info(f"Package under test: {params.package}")
    if params.device:
        logger.info(f"Device: {params.device}")
    else:
        logger.info("No device specified, using the default device")
    logger.info(f"Duration: {params.duration}s")

    coordinator = RunCoordinator(
        specs,
        runner=runner,
        clock=clock,
        adb=params.adb_cmd,
        policy=params.parse_failure_policy,
        startup_trim=params.startup_trim,
    )
    outcome = coordinator.run(params.package, device=params.device, duration=params.duration)

    results = [summarize(outcome.series[spec.kind], spec) for spec in specs]
    for result in results:
        if result.has_data:
            logger.info(f"{result.spec.label} average: {result.stats.mean}")
            logger.info(f"{result.spec.label} max: {result.stats.max}")

    logger.info("\n" + format_summary_table(results))

    logger.info(f"Run started at: {outcome.window.timestamp}")
    writer = ReportWriter(params.output_dir)
    writer.write_all(results, outcome.window.timestamp)
    if params.export_summary_json:
        writer.write_summary_json(results, outcome.window, params.package, params.device)

    logger.info("Finished!")
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point of the `perf-collector` command.

    Returns:
        0 on success, 1 on any fatal error
    """
    args = parse_collect_args(argv)

    try:
        loader = ConfigLoader(env=args.env)
        config = loader.config_data

        log_file = args.log_file or config.log_file
        set_log_level(logging.DEBUG if args.verbose else logging.INFO,
                      Path(log_file) if log_file else None)

        params = CollectionParams(
            package=args.package,
            device=args.device,
            duration=args.time if args.time is not None else config.default_duration,
            output_dir=Path(args.output_dir or config.output_dir),
            adb_cmd=resolve_cmd(config.adb_cmd),
            parse_failure_policy=(parse_policy(args.on_parse_failure)
                                  if args.on_parse_failure else config.parse_failure_policy),
            startup_trim=config.startup_trim,
            export_summary_json=config.export_summary_json,
        )
        logger.debug(str(params))

        collect(params, loader.get_metric_specs())
    except (CollectorError, OSError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
