"""Base formatter interface for include-cost output rendering."""

from abc import ABC, abstractmethod

from ..graph.models import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: AnalysisResult) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Return formatted string representation of the report."""
