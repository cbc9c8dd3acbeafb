"""
Base class for disk-endurance-bench benchmarks.
"""

from abc import ABC, abstractmethod


class BenchmarkBase(ABC):
    """Abstract base class for benchmarks driven by an external tool."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def validate(self):
        """
        Check that prerequisites for this benchmark are met.

        Raises:
            MissingDependency: If the external tool is not installed.
        """

    @abstractmethod
    def run(self, workloads) -> list:
        """
        Execute the given workloads in order.

        Args:
            workloads: List of Workload members.

        Returns:
            list: One result record per executed workload.
        """

    @property
    @abstractmethod
    def space_required_kib(self) -> int:
        """Size of the scratch file this benchmark will lay out, in KiB."""
