"""
Core functionality: volume discovery, sizing, configuration and results.
"""

from core.errors import (
    BenchError,
    MissingDependency,
    NoVolumesFound,
    InvalidSelection,
    DirectoryNotWritable,
    InsufficientSpace,
    WorkloadFailed,
    ConfigError,
)
from core.volumes import (
    VolumeEntry,
    get_volume_info,
    print_volume_table,
    resolve_selection,
    resolve_target_path,
)
from core.plan import BenchmarkPlan, build_plan, print_plan
