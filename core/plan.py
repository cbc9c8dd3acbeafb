"""
Benchmark plan: everything computed once, before the first fio run.
"""

import os
from dataclasses import dataclass

from core.capacity import size_for_directory
from core.volumes import check_writable
from utils import print_header, print_info, format_hours


@dataclass
class BenchmarkPlan:
    target_dir: str
    test_file: str
    file_size_kib: int
    runtime_seconds: int
    ioengine: str = "libaio"
    available_kib: int = 0

    @property
    def fio_size(self):
        """Size argument for fio, e.g. '19000000k'."""
        return f"{self.file_size_kib}k"

    @property
    def file_size_gib(self):
        return self.file_size_kib / 1024 / 1024

    def to_dict(self):
        return {
            "target_dir": self.target_dir,
            "test_file": self.test_file,
            "file_size_kib": self.file_size_kib,
            "available_kib": self.available_kib,
            "runtime_seconds": self.runtime_seconds,
            "ioengine": self.ioengine,
        }


def build_plan(target_dir, config):
    """
    Probe the target directory and size the scratch file.

    Args:
        target_dir: Mount point (or directory) chosen by the user
        config: BenchConfig

    Returns:
        BenchmarkPlan

    Raises:
        DirectoryNotWritable, InsufficientSpace
    """
    check_writable(target_dir, config.test_file_name)
    print_info(f"Calculating available space in '{target_dir}'...")
    available_kib, file_size_kib = size_for_directory(target_dir)
    return BenchmarkPlan(
        target_dir=target_dir,
        test_file=os.path.join(target_dir, config.test_file_name),
        file_size_kib=file_size_kib,
        runtime_seconds=config.runtime_seconds,
        ioengine=config.ioengine,
        available_kib=available_kib,
    )


def print_plan(plan):
    print_header("Hard Drive ENDURANCE Benchmark")
    print_info(f"Target Drive:      {plan.target_dir}")
    print_info(f"Test File Size:    ~{plan.file_size_gib:.2f} GiB (95% of available free space)")
    print_info(f"Duration per Test: {plan.runtime_seconds}s ({format_hours(plan.runtime_seconds)} hours)")
