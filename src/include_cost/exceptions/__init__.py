"""Exception hierarchy for include-cost."""

from .analysis import AnalysisError, FileAccessError, IncludeCycleError
from .base import IncludeCostError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "IncludeCostError",
    "AnalysisError",
    "FileAccessError",
    "IncludeCycleError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
