"""
Volume discovery and selection.

Mounted volumes are read from `df -kTP` and filtered to block devices whose
names look like real disks (SCSI/SATA, NVMe, virtio, IDE, device-mapper/LVM).
"""

import os
import re
import subprocess
from dataclasses import dataclass

from core.errors import BenchError, NoVolumesFound, InvalidSelection, DirectoryNotWritable
from utils import print_subheader, print_bullet, color_text, format_gib

DEVICE_PATTERN = re.compile(r"^/dev/(sd|nvme|vd|hd|mapper)")
# ASCII digits only
MENU_NUMBER = re.compile(r"^[0-9]+$")


@dataclass
class VolumeEntry:
    mount_path: str
    device: str
    fs_type: str
    free_bytes: int
    total_bytes: int = 0

    def describe(self):
        return f"{self.mount_path} ({self.device}, {self.fs_type}, {format_gib(self.free_bytes)} free)"


def parse_df_output(output):
    """
    Parse POSIX `df -kTP` output into VolumeEntry records.

    Columns: Filesystem, Type, 1024-blocks, Used, Available, Capacity,
    Mounted on. Mount points may contain spaces, so everything after the
    sixth column is the mount path.

    Args:
        output: Raw stdout of `df -kTP`

    Returns:
        list: VolumeEntry for every device matching DEVICE_PATTERN, in df order.
    """
    volumes = []
    for line in output.splitlines()[1:]:
        fields = line.split()
        if len(fields) < 7:
            continue
        device, fs_type, total_kib, _used_kib, avail_kib = fields[:5]
        if not DEVICE_PATTERN.match(device):
            continue
        try:
            total_bytes = int(total_kib) * 1024
            free_bytes = int(avail_kib) * 1024
        except ValueError:
            continue
        volumes.append(VolumeEntry(
            mount_path=" ".join(fields[6:]),
            device=device,
            fs_type=fs_type,
            free_bytes=free_bytes,
            total_bytes=total_bytes,
        ))
    return volumes


def get_volume_info():
    """
    Enumerate mounted block-device volumes.

    Raises:
        NoVolumesFound: If no mount matches a recognized device prefix.
    """
    try:
        result = subprocess.run(['df', '-kTP'], capture_output=True, text=True)
    except FileNotFoundError:
        raise BenchError("'df' could not be found; cannot read the mount table.")
    volumes = parse_df_output(result.stdout)
    if not volumes:
        raise NoVolumesFound(
            "No suitable drives found to test (e.g., /dev/sda, /dev/nvme0n1). "
            "Please ensure your drives are mounted."
        )
    return volumes


def print_volume_table(volumes):
    """Display the numbered volume menu, including the quit option."""
    print_subheader("Available Drives")
    for i, volume in enumerate(volumes, start=1):
        print_bullet(f"{i}) {volume.describe()}")
    print_bullet(f"{len(volumes) + 1}) Quit")


def resolve_selection(choice, volumes):
    """
    Resolve a 1-based menu answer to a volume.

    Args:
        choice: Raw user input
        volumes: The list shown to the user

    Returns:
        VolumeEntry, or None when the quit option (len(volumes) + 1) was chosen.

    Raises:
        InvalidSelection: On non-numeric or out-of-range input.
    """
    choice = str(choice).strip()
    quit_option = str(len(volumes) + 1)
    if choice == quit_option:
        return None
    if not MENU_NUMBER.match(choice):
        raise InvalidSelection(f"Invalid option '{choice}'.")
    index = int(choice)
    if 1 <= index <= len(volumes):
        return volumes[index - 1]
    raise InvalidSelection(f"Invalid option '{choice}'. Choose 1-{len(volumes) + 1}.")


def resolve_target_path(path):
    """Validate a directory given with --target instead of the menu."""
    if not os.path.isdir(path):
        raise InvalidSelection(f"Target '{path}' is not an existing directory.")
    return os.path.abspath(path)


def check_writable(target_dir, test_file_name):
    """
    Verify the target directory accepts new files.

    Creates and removes `<test_file>.tmp` next to where the scratch file
    will live.

    Raises:
        DirectoryNotWritable: If the probe file cannot be created.
    """
    probe = os.path.join(target_dir, f"{test_file_name}.tmp")
    try:
        with open(probe, 'w'):
            pass
    except OSError:
        raise DirectoryNotWritable(
            f"Directory '{target_dir}' is not writable. "
            "Please check permissions or run with sudo."
        )
    os.remove(probe)


def print_volume_choice(volume):
    print(f"You have selected the drive mounted at: {color_text(volume.mount_path, 'BOLD')}")
