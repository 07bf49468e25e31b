"""
Configuration manager for collection runs.

This module provides the ConfigLoader class for loading and validating
collector configuration from YAML files.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from perfcollector.config.collector_config import CollectorConfig
from perfcollector.config.metric_settings import MetricSettings
from perfcollector.consts.MetricKind import MetricKind
from perfcollector.consts.ParseFailurePolicy import ParseFailurePolicy
from perfcollector.errors import ConfigError
from perfcollector.models.metric_spec import MetricSpec
from perfcollector.service.sample_parser.sample_parser import PARSERS

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config_yaml"


def parse_policy(name: str) -> ParseFailurePolicy:
    try:
        return ParseFailurePolicy(str(name).lower())
    except ValueError:
        choices = ", ".join(p.value for p in ParseFailurePolicy)
        raise ConfigError(f"Unknown parse failure policy '{name}' (expected one of: {choices})")


class ConfigLoader:

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH, env: Optional[str] = None):
        self.config_path = Path(config_path)
        self.env = env
        self.config_data = self._load_config()

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}")
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    def _load_config(self) -> CollectorConfig:
        """
        Load and parse collector configuration from YAML file.
        Supports environment-specific overrides via config_<env>.yaml

        Returns:
            CollectorConfig: Configured collector configuration instance
        """
        data = self._read_yaml(self.config_path / "config.yaml")

        if self.env:
            env_data = self._read_yaml(self.config_path / f"config_{self.env}.yaml")
            # dict.update() will overwrite existing keys
            data.update(env_data)

        config = CollectorConfig()
        try:
            config.adb_cmd = data.get("adb_cmd", "adb")
            config.default_duration = int(data.get("default_duration", 60))
            config.output_dir = data.get("output_dir", ".")
            config.parse_failure_policy = parse_policy(data.get("parse_failure_policy", "zero"))
            config.startup_trim = int(data.get("startup_trim", 1))
            config.export_summary_json = bool(data.get("export_summary_json", False))
            config.log_file = data.get("log_file")
            config.metrics = self._parse_metrics(data["metrics"])
        except KeyError as e:
            raise ConfigError(f"Missing required config key: {e}")
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid config value: {e}")

        if config.default_duration < 0 or config.startup_trim < 0:
            raise ConfigError("default_duration and startup_trim must be non-negative")

        return config

    @staticmethod
    def _parse_metrics(metrics: Dict[str, Dict[str, Any]]) -> List[MetricSettings]:
        if not isinstance(metrics, dict) or not metrics:
            raise ConfigError("'metrics' must be a non-empty mapping of metric kind to settings")

        settings = []
        for key, values in metrics.items():
            try:
                kind = MetricKind(key)
            except ValueError:
                raise ConfigError(f"Unknown metric kind '{key}'")
            if not isinstance(values, dict):
                raise ConfigError(f"Settings of metric '{key}' must be a mapping")
            metric = MetricSettings(kind=kind, **values)
            metric.interval = float(metric.interval)
            metric.unit_divisor = float(metric.unit_divisor)
            if metric.interval <= 0:
                raise ConfigError(f"Poll interval of '{key}' must be positive")
            if metric.unit_divisor == 0:
                raise ConfigError(f"unit_divisor of '{key}' must not be zero")
            settings.append(metric)
        return settings

    @staticmethod
    def _check_template(settings: MetricSettings) -> None:
        try:
            settings.command.format(adb="", device="", package="")
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            raise ConfigError(
                f"Invalid command template of '{settings.kind.value}': {settings.command!r} ({e!r}); "
                f"allowed placeholders are {{adb}}, {{device}} and {{package}}"
            )

    def get_metric_specs(self) -> List[MetricSpec]:
        """
        Combine the configured metric settings with the built-in parser of
        each metric kind.

        Returns:
            List[MetricSpec]: One spec per configured metric
        """
        specs = []
        for settings in self.config_data.metrics:
            self._check_template(settings)
            specs.append(MetricSpec(
                kind=settings.kind,
                label=settings.label,
                sheet_name=settings.sheet_name,
                file_prefix=settings.file_prefix,
                interval=settings.interval,
                command=settings.command,
                parser=PARSERS[settings.kind],
                unit_divisor=settings.unit_divisor,
                unit=settings.unit,
            ))
        return specs


if __name__ == "__main__":

    # python3 -m perfcollector.config.config_loader

    loader = ConfigLoader(env=None)
    print(loader.config_data)
    for spec in loader.get_metric_specs():
        print(spec)
