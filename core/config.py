"""
Run configuration for disk-endurance-bench.

Settings come from defaults, then an optional JSON/YAML config file, then
command-line flags. The resulting BenchConfig is threaded through volume
resolution, sizing and fio invocation.
"""

import json
import os
from dataclasses import dataclass, asdict
from typing import List, Optional

import yaml

from core.errors import ConfigError

# 8 hours per workload. Use 3600 for a one hour run or 60 for a quick look.
DEFAULT_RUNTIME_SECONDS = 28800
DEFAULT_TEST_FILE_NAME = "fio-benchmark-testfile"
DEFAULT_IOENGINE = "libaio"

CONFIG_KEYS = {
    "runtime_seconds", "ioengine", "fio_binary", "test_file_name",
    "target", "workloads", "output",
}


@dataclass
class BenchConfig:
    runtime_seconds: int = DEFAULT_RUNTIME_SECONDS
    ioengine: str = DEFAULT_IOENGINE
    fio_binary: str = "fio"
    test_file_name: str = DEFAULT_TEST_FILE_NAME
    target: Optional[str] = None
    # Menu keys or workload names; None means ask interactively
    workloads: Optional[List[str]] = None
    output: Optional[str] = None
    unattended: bool = False
    confirmed: bool = False

    def to_dict(self):
        return asdict(self)


def load_config_file(path):
    """Load a config file (JSON or YAML).

    Picks the parser by extension (.json, .yaml, .yml); for anything else
    tries JSON, then YAML.

    Returns:
        dict: Parsed config.

    Raises:
        ConfigError: If the file is missing or cannot be parsed.
    """
    if not os.path.isfile(path):
        raise ConfigError(f"Config file not found: {path}")

    with open(path, 'r') as f:
        raw = f.read()

    ext = os.path.splitext(path)[1].lower()

    if ext == '.json':
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}")

    if ext in ('.yaml', '.yml'):
        try:
            return yaml.safe_load(raw) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}")

    try:
        return json.loads(raw)
    except ValueError:
        pass

    try:
        result = yaml.safe_load(raw)
    except yaml.YAMLError:
        result = None
    if isinstance(result, dict):
        return result

    raise ConfigError(f"Could not parse config file as JSON or YAML: {path}")


def validate_config(values, valid_workloads):
    """Validate a config dict.

    Args:
        values: Mapping of config keys to values (file or CLI derived).
        valid_workloads: Accepted workload tokens (menu keys and names).

    Returns:
        list: Error messages (empty = valid).
    """
    errors = []

    if not isinstance(values, dict):
        return ["Config must be a JSON/YAML object (dict)"]

    unknown = sorted(set(values) - CONFIG_KEYS)
    if unknown:
        errors.append(f"Unknown config key(s): {', '.join(unknown)}")

    runtime = values.get('runtime_seconds')
    if runtime is not None and (isinstance(runtime, bool) or not isinstance(runtime, int) or runtime <= 0):
        errors.append(f"runtime_seconds must be a positive integer (got {runtime!r})")

    for key in ('ioengine', 'fio_binary', 'test_file_name', 'target', 'output'):
        value = values.get(key)
        if value is not None and (not isinstance(value, str) or not value.strip()):
            errors.append(f"{key} must be a non-empty string (got {value!r})")

    name = values.get('test_file_name')
    if isinstance(name, str) and os.sep in name:
        errors.append(f"test_file_name must be a bare file name (got '{name}')")

    workloads = values.get('workloads')
    if workloads is not None:
        tokens = workloads if isinstance(workloads, list) else [w.strip() for w in str(workloads).split(',')]
        invalid = [str(w) for w in tokens if str(w).lower() not in valid_workloads]
        if invalid or not tokens:
            errors.append(f"workloads contains invalid entries: {', '.join(invalid) or '(empty)'}")

    return errors


def build_config(args, valid_workloads):
    """Merge defaults, the --config file and CLI flags into a BenchConfig.

    Raises:
        ConfigError: With every validation message collected.
    """
    values = {}
    if getattr(args, 'config', None):
        loaded = load_config_file(args.config)
        errors = validate_config(loaded, valid_workloads)
        if errors:
            raise ConfigError(errors)
        values.update(loaded)

    overrides = {
        'runtime_seconds': args.runtime,
        'ioengine': args.ioengine,
        'fio_binary': args.fio,
        'target': args.target,
        'workloads': args.workload,
        'output': args.output,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    errors = validate_config(overrides, valid_workloads)
    if errors:
        raise ConfigError(errors)
    values.update(overrides)

    workloads = values.get('workloads')
    if workloads is not None:
        if not isinstance(workloads, list):
            workloads = str(workloads).split(',')
        values['workloads'] = [str(w).strip() for w in workloads]

    config = BenchConfig(**values)
    config.unattended = args.unattended
    config.confirmed = args.confirm
    return config


def validate_unattended(config):
    """Check that unattended mode has everything it needs to skip prompts.

    Returns:
        list: Error messages (empty = valid).
    """
    errors = []
    if not config.confirmed:
        errors.append("--confirm is required in unattended mode (safety acknowledgment)")
    if not config.target:
        errors.append("--target is required (directory on the drive to benchmark)")
    if not config.workloads:
        errors.append("--workload is required (1-6 or a workload name)")
    return errors
