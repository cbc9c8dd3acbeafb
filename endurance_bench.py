#!/usr/bin/env python3
"""
disk-endurance-bench - Hard Drive / SSD Endurance Benchmark using fio

Detects mounted drives, sizes a scratch file to 95% of the free space on the
selected one, and runs fio workload presets against it:
- utils: console formatting
- core: volume discovery, sizing, configuration, run summary
- benchmarks: workload presets and the fio runner

Runs non-destructively against a file in a mounted filesystem, never a raw
block device. Supports interactive (default) and unattended (--unattended)
modes, optionally driven by a JSON/YAML --config file.
"""

import argparse
import subprocess
import sys
import time

from utils import (
    print_header, print_info, print_success, print_warning, print_error,
    print_section, print_bullet, ask, format_hours, format_gib,
)
from core import (
    BenchError, ConfigError, InvalidSelection,
    get_volume_info, print_volume_table, resolve_selection, resolve_target_path,
    build_plan, print_plan,
)
from core.config import build_config, validate_unattended
from core.results import build_run_summary, save_results_to_json
from core.scratch import scratch_file
from core.volumes import MENU_NUMBER, print_volume_choice
from benchmarks import (
    FioBenchmark, WORKLOAD_PRESETS, ALL_WORKLOADS, ALL_TESTS_KEY,
    VALID_WORKLOAD_TOKENS, resolve_workloads,
)


# ── Argument parsing ─────────────────────────────────────────────────────

def build_parser():
    """Build the argument parser with all CLI options."""
    parser = argparse.ArgumentParser(
        description='disk-endurance-bench - Hard Drive / SSD Endurance Benchmark (fio)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
workloads:
  1 / seq-write    Sequential Write (1M blocks)
  2 / seq-read     Sequential Read (1M blocks)
  3 / rand-write   Random Write (4k blocks)
  4 / rand-read    Random Read (4k blocks)
  5 / mixed-rw     Mixed Random Read/Write (70/30, 4k blocks)
  6 / all          ALL TESTS, run sequentially

unattended mode example:
  endurance-bench --unattended --target /mnt/data --workload all --runtime 3600 --confirm
"""
    )

    parser.add_argument('--runtime', type=int, default=None,
                        help='Duration of each test in seconds (default: 28800 = 8 hours)')
    parser.add_argument('--target', type=str, default=None,
                        help='Directory on the drive to test (skips the drive menu)')
    parser.add_argument('--workload', type=str, default=None,
                        help="Workload(s) to run: 1-6 or names, comma-separated (skips the workload menu)")
    parser.add_argument('--ioengine', type=str, default=None,
                        help='fio I/O engine (default: libaio)')
    parser.add_argument('--fio', type=str, default=None,
                        help='fio executable (default: fio)')
    parser.add_argument('--output', type=str, default=None,
                        help='Write a JSON run summary to this path')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON or YAML config file; command-line flags take precedence')
    parser.add_argument('--unattended', '--auto', action='store_true', default=False,
                        help='Skip all interactive prompts (requires --target, --workload and --confirm)')
    parser.add_argument('--confirm', action='store_true', default=False,
                        help='Acknowledge that the selected drive will be filled to 95%% (required for --unattended)')
    return parser


# ── Interactive prompt functions ─────────────────────────────────────────

def select_volume(volumes):
    """
    Show the drive menu and resolve the answer.

    Returns:
        VolumeEntry, or None if the user chose Quit.
    """
    print_info("Please select the drive you want to benchmark:")
    print_volume_table(volumes)
    choice = ask(f"Enter your choice [1-{len(volumes) + 1}]: ")
    return resolve_selection(choice, volumes)


def select_workloads():
    """Show the workload menu. Invalid answers raise InvalidSelection."""
    print_section("Please select a benchmark to run:")
    for info in WORKLOAD_PRESETS.values():
        print_bullet(f"{info['menu']}) {info['title']}")
    print_bullet(f"{ALL_TESTS_KEY}) ALL TESTS (will run sequentially)")
    choice = ask(f"\nEnter your choice [1-{ALL_TESTS_KEY}]: ")
    if not MENU_NUMBER.match(choice):
        raise InvalidSelection(f"Invalid option '{choice}'.")
    return select_workloads_from_tokens([choice])


def select_workloads_from_tokens(tokens):
    workloads = resolve_workloads(tokens)
    if not workloads:
        raise InvalidSelection(f"Invalid workload selection: {', '.join(str(t) for t in tokens)}")
    return workloads


def confirmation_message(workloads, runtime_seconds):
    """Prompt text stating how long the selected workloads will take."""
    if len(workloads) == 1:
        title = WORKLOAD_PRESETS[workloads[0]]["title"]
        return (f"This will run the {title} test for {format_hours(runtime_seconds)} hours. "
                "Press [Enter] to continue...")
    total = runtime_seconds * len(workloads)
    if workloads == ALL_WORKLOADS:
        scope = f"ALL {len(workloads)} tests"
    else:
        scope = f"{len(workloads)} tests"
    return (f"WARNING: This will run {scope} for a total of ~{format_hours(total)} hours. "
            "Press [Enter] to continue...")


# ── Core logic ───────────────────────────────────────────────────────────

def resolve_target_dir(config):
    """
    Pick the directory to benchmark, from --target or the drive menu.

    Returns:
        str path, or None if the user chose Quit.
    """
    if config.target:
        target_dir = resolve_target_path(config.target)
        print_info(f"Target directory: {target_dir}")
        return target_dir

    print_info("Detecting available drives...")
    volumes = get_volume_info()
    volume = select_volume(volumes)
    if volume is None:
        return None
    print_volume_choice(volume)
    return volume.mount_path


def run_benchmark(args, runner=subprocess.run):
    """
    Run one complete benchmark session.

    Args:
        args: Parsed command-line arguments
        runner: Callable with the subprocess.run signature, used for fio

    Returns:
        int: Exit status (0 on success or quit).

    Raises:
        BenchError: On any validation or fio failure.
    """
    config = build_config(args, VALID_WORKLOAD_TOKENS)
    if config.unattended:
        errors = validate_unattended(config)
        if errors:
            raise ConfigError(errors)

    benchmark = FioBenchmark(fio_binary=config.fio_binary, runner=runner)
    benchmark.validate()

    target_dir = resolve_target_dir(config)
    if target_dir is None:
        print_info("Exiting.")
        return 0

    plan = build_plan(target_dir, config)
    benchmark.plan = plan
    print_plan(plan)
    print_info(f"Space required:    {format_gib(benchmark.space_required_kib * 1024)} "
               f"of {format_gib(plan.available_kib * 1024)} available")

    if config.workloads:
        workloads = select_workloads_from_tokens(config.workloads)
        print_info(f"Workloads: {', '.join(WORKLOAD_PRESETS[w]['title'] for w in workloads)}")
    else:
        workloads = select_workloads()

    message = confirmation_message(workloads, plan.runtime_seconds)
    if config.unattended:
        print_success("Unattended mode: --confirm flag provided, proceeding automatically.")
    else:
        ask(message)

    start_time = time.time()
    with scratch_file(plan.test_file):
        workload_results = benchmark.run(workloads)
    end_time = time.time()

    print_header("Benchmark Finished")
    print_success(f"Total benchmark time: {(end_time - start_time) / 60:.2f} minutes")

    if config.output:
        summary = build_run_summary(config, plan, workload_results, start_time, end_time)
        save_results_to_json(summary, config.output)
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        status = run_benchmark(args)
    except ConfigError as e:
        print_error("Invalid configuration:")
        for err in e.errors:
            print_error(f"  • {err}")
        sys.exit(1)
    except BenchError as e:
        print_error(str(e))
        sys.exit(1)
    except OSError as e:
        print_error(f"An error occurred: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print()
        print_warning("Interrupted. Exiting.")
        sys.exit(1)
    except EOFError:
        print()
        print_error("Input closed before a choice was made. Exiting.")
        sys.exit(1)
    sys.exit(status)


if __name__ == "__main__":
    main()
