"""Root of the include-cost error hierarchy."""

from typing import Any, Dict, Mapping, Optional


class IncludeCostError(Exception):
    """Any failure that aborts an include-cost run.

    The CLI prints ``str(error)`` as-is, so the message names the file or
    setting at fault and ``details`` carries the machine-readable context
    (path, reason, cycle length). Detail values are stored as strings.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, str] = {k: str(v) for k, v in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
