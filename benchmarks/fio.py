"""
fio workload runner.

Every workload shares one option set; per-pattern presets add rw mode, block
size and read/write mix. Invocations are strictly sequential and any non-zero
exit aborts the run.
"""

import os
import shutil
import subprocess
import time

from benchmarks.base import BenchmarkBase
from benchmarks.workloads import WORKLOAD_PRESETS
from core.errors import MissingDependency, WorkloadFailed
from utils import print_info, print_success, print_section, color_text


def check_fio(fio_binary="fio"):
    """
    Raises:
        MissingDependency: If fio_binary is not on PATH.
    """
    if shutil.which(fio_binary) is None:
        raise MissingDependency(
            f"'{fio_binary}' could not be found. Please install it first "
            "(Debian/Ubuntu: apt-get install fio, RHEL: yum install fio, macOS: brew install fio)."
        )


def build_common_options(plan):
    """
    Options shared by every workload.

    --ioengine=libaio    asynchronous engine, efficient on Linux
    --direct=1           bypass the page cache so the drive, not RAM, is measured
    --group_reporting    aggregate statistics for the job group
    """
    return [
        "--name=benchmark",
        f"--ioengine={plan.ioengine}",
        "--direct=1",
        f"--size={plan.fio_size}",
        f"--runtime={plan.runtime_seconds}",
        "--group_reporting",
        "--output-format=normal",
    ]


def build_fio_command(plan, workload, fio_binary="fio"):
    """
    Build the argument list for one workload.

    Args:
        plan: BenchmarkPlan
        workload: Workload member
        fio_binary: fio executable name or path

    Returns:
        list: argv for subprocess.run
    """
    preset = WORKLOAD_PRESETS[workload]
    command = [fio_binary] + build_common_options(plan)
    command += [f"--filename={plan.test_file}", f"--rw={preset['rw']}", f"--bs={preset['bs']}"]
    if preset["rwmixread"] is not None:
        command.append(f"--rwmixread={preset['rwmixread']}")
    return command


def build_prefill_command(plan, fio_binary="fio"):
    """Quick sequential write that lays out the test file for read workloads."""
    return [
        fio_binary,
        "--name=precreate",
        f"--ioengine={plan.ioengine}",
        "--direct=1",
        f"--size={plan.fio_size}",
        f"--filename={plan.test_file}",
        "--rw=write",
        "--bs=1M",
    ]


class FioBenchmark(BenchmarkBase):
    """Runs the fio workload presets against a single scratch file."""

    name = "fio"
    description = "fio endurance workloads (sequential/random read/write, mixed 70/30)"

    def __init__(self, plan=None, fio_binary="fio", runner=subprocess.run):
        """
        Args:
            plan: BenchmarkPlan describing target file, size and runtime;
                may be assigned after validate() once the target is sized
            fio_binary: fio executable name or path
            runner: Callable with the subprocess.run signature
        """
        self.plan = plan
        self.fio_binary = fio_binary
        self.runner = runner

    def validate(self):
        check_fio(self.fio_binary)

    @property
    def space_required_kib(self) -> int:
        return self.plan.file_size_kib

    def _prefill(self, workload):
        print_info("Pre-creating test file...")
        command = build_prefill_command(self.plan, self.fio_binary)
        result = self.runner(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        if result.returncode != 0:
            raise WorkloadFailed(f"{workload.value} (pre-create)", result.returncode)

    def run_workload(self, workload):
        """
        Run one workload, priming the test file first if the preset reads it.

        Returns:
            dict: Record with the fio argv, exit code and elapsed seconds.

        Raises:
            WorkloadFailed: If fio (or the priming write) exits non-zero.
        """
        preset = WORKLOAD_PRESETS[workload]
        prefilled = False
        if preset["needs_prefill"] and not os.path.exists(self.plan.test_file):
            self._prefill(workload)
            prefilled = True

        print_section(f"Test: {preset['label']} (Duration: {self.plan.runtime_seconds}s)")
        command = build_fio_command(self.plan, workload, self.fio_binary)
        start_time = time.time()
        result = self.runner(command)
        elapsed = time.time() - start_time
        if result.returncode != 0:
            raise WorkloadFailed(workload.value, result.returncode)

        print_success(f"{preset['label']} Test Complete ({color_text(f'{elapsed:.1f}s', 'YELLOW')})")
        return {
            "workload": workload.value,
            "title": preset["title"],
            "command": command,
            "prefilled": prefilled,
            "returncode": result.returncode,
            "elapsed_seconds": round(elapsed, 2),
        }

    def run(self, workloads):
        return [self.run_workload(workload) for workload in workloads]
