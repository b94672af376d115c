"""Analysis-related exceptions: file access, include cycles."""

from pathlib import Path
from typing import List

from .base import IncludeCostError


class AnalysisError(IncludeCostError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class IncludeCycleError(AnalysisError):
    """Raised when the include graph contains a cycle.

    ``cycle`` lists the participating files in traversal order, with the
    first file repeated at the end: ``["a.h", "b.h", "a.h"]``.
    """

    def __init__(self, cycle: List[str]):
        super().__init__(
            f"Circular include detected: {' -> '.join(cycle)}",
            details={"length": max(len(cycle) - 1, 1)},
        )
        self.cycle = list(cycle)

    @property
    def files(self) -> List[str]:
        """Distinct files on the cycle, in traversal order."""
        return self.cycle[:-1] if len(self.cycle) > 1 else list(self.cycle)
