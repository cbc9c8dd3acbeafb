"""
Workload presets - the five fio access patterns offered by the menu.
"""

from enum import Enum


class Workload(Enum):
    SEQ_WRITE = "seq_write"
    SEQ_READ = "seq_read"
    RAND_WRITE = "rand_write"
    RAND_READ = "rand_read"
    MIXED_RW = "mixed_rw"


# needs_prefill: fio must read an existing file, so a priming write lays it
# out first when it is missing.
WORKLOAD_PRESETS = {
    Workload.SEQ_WRITE: {
        "menu": "1", "title": "Sequential Write", "label": "Sequential Write",
        "rw": "write", "bs": "1M", "rwmixread": None, "needs_prefill": False,
    },
    Workload.SEQ_READ: {
        "menu": "2", "title": "Sequential Read", "label": "Sequential Read",
        "rw": "read", "bs": "1M", "rwmixread": None, "needs_prefill": True,
    },
    Workload.RAND_WRITE: {
        "menu": "3", "title": "Random Write (4k blocks)", "label": "Random Write IOPS",
        "rw": "randwrite", "bs": "4k", "rwmixread": None, "needs_prefill": False,
    },
    Workload.RAND_READ: {
        "menu": "4", "title": "Random Read (4k blocks)", "label": "Random Read IOPS",
        "rw": "randread", "bs": "4k", "rwmixread": None, "needs_prefill": True,
    },
    Workload.MIXED_RW: {
        "menu": "5", "title": "Mixed Random Read/Write (70/30)", "label": "Mixed Random Read/Write",
        "rw": "randrw", "bs": "4k", "rwmixread": 70, "needs_prefill": False,
    },
}

ALL_TESTS_KEY = "6"

# Execution order for ALL TESTS
ALL_WORKLOADS = list(WORKLOAD_PRESETS)

MENU_KEYS = {info["menu"]: workload for workload, info in WORKLOAD_PRESETS.items()}

# Every token accepted by --workload / the config file
VALID_WORKLOAD_TOKENS = (
    set(MENU_KEYS)
    | {ALL_TESTS_KEY, "all"}
    | {workload.value for workload in Workload}
    | {workload.value.replace("_", "-") for workload in Workload}
)


def resolve_workload_token(token):
    """
    Map a menu key or name to workloads.

    '6' and 'all' expand to every workload in execution order.

    Returns:
        list of Workload, or None if the token is not recognized.
    """
    token = str(token).strip().lower()
    if token in (ALL_TESTS_KEY, "all"):
        return list(ALL_WORKLOADS)
    if token in MENU_KEYS:
        return [MENU_KEYS[token]]
    try:
        return [Workload(token.replace("-", "_"))]
    except ValueError:
        return None


def resolve_workloads(tokens):
    """Expand a list of tokens into an ordered list of workloads."""
    workloads = []
    for token in tokens:
        resolved = resolve_workload_token(token)
        if resolved is None:
            return None
        workloads.extend(resolved)
    return workloads
