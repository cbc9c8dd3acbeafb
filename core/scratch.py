"""
Scratch file lifetime management.
"""

import os
from contextlib import contextmanager

from utils import print_info, print_warning


def remove_test_file(path):
    """Remove the scratch file if present. Returns True if a file was deleted."""
    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    return True


@contextmanager
def scratch_file(path):
    """
    Own the scratch file for the duration of a run.

    Any leftover file from an earlier run is removed on entry, and the file
    is removed again on every exit path: normal completion, a fio failure,
    or Ctrl-C.
    """
    if remove_test_file(path):
        print_warning(f"Removed stale test file: {path}")
    try:
        yield path
    finally:
        print_info("Cleaning up the test file...")
        try:
            remove_test_file(path)
        except OSError as e:
            print_warning(f"Could not remove test file {path}: {e}")
