"""
Scratch file sizing.

The test file fills 95% of the space available to unprivileged users on the
target filesystem, leaving headroom so fio never hits "disk full".
"""

import shutil

from core.errors import InsufficientSpace

FILL_PERCENT = 95
MIN_FILE_SIZE_KIB = 10240  # 10 MiB


def get_available_kib(target_dir):
    """Available space in KiB, matching the 'Available' column of `df -Pk`."""
    return shutil.disk_usage(target_dir).free // 1024


def compute_file_size_kib(available_kib):
    """
    Compute the scratch file size for a given amount of free space.

    Args:
        available_kib: Free space in KiB

    Returns:
        int: floor(available_kib * 0.95)

    Raises:
        InsufficientSpace: If the result is below MIN_FILE_SIZE_KIB.
    """
    file_size_kib = available_kib * FILL_PERCENT // 100
    if file_size_kib < MIN_FILE_SIZE_KIB:
        raise InsufficientSpace(
            f"Not enough free space to run a meaningful test "
            f"({file_size_kib} KiB usable, {MIN_FILE_SIZE_KIB} KiB required)."
        )
    return file_size_kib


def size_for_directory(target_dir):
    """Return (available_kib, file_size_kib) for target_dir."""
    available_kib = get_available_kib(target_dir)
    try:
        return available_kib, compute_file_size_kib(available_kib)
    except InsufficientSpace as e:
        raise InsufficientSpace(f"'{target_dir}': {e}")
