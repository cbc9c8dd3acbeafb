"""
Exceptions raised by disk-endurance-bench.

Every failure is fatal: core modules raise, and the CLI prints the message
and exits with status 1.
"""


class BenchError(Exception):
    """Base class for all disk-endurance-bench failures."""


class MissingDependency(BenchError):
    """A required external command (fio) is not installed."""


class NoVolumesFound(BenchError):
    """No mounted block-device volume matched the recognized prefixes."""


class InvalidSelection(BenchError):
    """A menu answer or target path could not be resolved."""


class DirectoryNotWritable(BenchError):
    """The probe file could not be created in the target directory."""


class InsufficientSpace(BenchError):
    """95% of the free space is below the 10 MiB minimum test file size."""


class WorkloadFailed(BenchError):
    """fio exited non-zero for a workload or priming write."""

    def __init__(self, workload, returncode):
        self.workload = workload
        self.returncode = returncode
        super().__init__(f"fio exited with status {returncode} during {workload}")


class ConfigError(BenchError):
    """Configuration file or command-line values failed validation."""

    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))
