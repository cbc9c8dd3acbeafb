"""
disk-endurance-bench Benchmarks Module

Available benchmarks:
- FioBenchmark: fio workload presets run sequentially against one scratch file
"""

from benchmarks.base import BenchmarkBase
from benchmarks.fio import FioBenchmark, check_fio, build_fio_command, build_prefill_command
from benchmarks.workloads import (
    Workload, WORKLOAD_PRESETS, ALL_WORKLOADS, ALL_TESTS_KEY,
    VALID_WORKLOAD_TOKENS, resolve_workloads,
)

__all__ = [
    'BenchmarkBase', 'FioBenchmark', 'check_fio', 'build_fio_command', 'build_prefill_command',
    'Workload', 'WORKLOAD_PRESETS', 'ALL_WORKLOADS', 'ALL_TESTS_KEY',
    'VALID_WORKLOAD_TOKENS', 'resolve_workloads',
]
