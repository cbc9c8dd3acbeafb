"""
Run summary output for disk-endurance-bench.
"""

import json
import os
import time

from utils import print_success

SCHEMA_VERSION = "1.0"


def build_run_summary(config, plan, workload_results, start_time, end_time):
    """
    Assemble the JSON document describing a completed run.

    fio's own statistics are printed to the terminal and are not captured;
    the summary records what was run, with what parameters, and for how long.
    """
    return {
        "schema_version": SCHEMA_VERSION,
        "metadata": {
            "start_timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(start_time)),
            "end_timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(end_time)),
            "duration_minutes": round((end_time - start_time) / 60, 2),
            "benchmark_config": config.to_dict(),
        },
        "plan": plan.to_dict(),
        "workloads": [
            {
                "workload": result["workload"],
                "title": result["title"],
                "fio_command": " ".join(result["command"]),
                "prefilled": result["prefilled"],
                "returncode": result["returncode"],
                "elapsed_seconds": result["elapsed_seconds"],
            }
            for result in workload_results
        ],
    }


def save_results_to_json(summary, output_path):
    """
    Write a run summary to output_path.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(output_path, 'w') as f:
        json.dump(summary, f, indent=2)
    print_success(f"Run summary saved to: {os.path.abspath(output_path)}")
