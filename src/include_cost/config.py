"""Configuration loading and management for include-cost.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Environment variables (INCLUDE_COST_* prefix)
    3. CLI overrides (passed as kwargs)

There is no configuration file: every run is described by the directories
given on the command line plus these knobs.

Example:
    >>> config = load_config(verbose=True, workers=4)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "INCLUDE_COST_"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        File selection:
            header_extensions: Suffixes treated as headers
            source_extensions: Suffixes treated as translation units
            exclude_patterns: Glob patterns (matched against the path relative
                to its input directory) to skip
            allow_hidden_files: Include files and directories starting with "."
            follow_symlinks: Follow symbolic links while walking

        Resolution:
            case_sensitive: Compare include paths case-sensitively
            placeholder_lines: Code lines charged for an include that matches
                no scanned file

        Performance tuning:
            workers: Threads used to read and scan files (None = auto-detect)

        Output control:
            verbosity: Logging verbosity level
    """

    header_extensions: list[str] = field(
        default_factory=lambda: [".h", ".hh", ".hpp", ".hxx", ".inl"]
    )
    source_extensions: list[str] = field(
        default_factory=lambda: [".c", ".cc", ".cpp", ".cxx"]
    )
    exclude_patterns: list[str] = field(default_factory=list)
    allow_hidden_files: bool = False
    follow_symlinks: bool = False

    case_sensitive: bool = True
    placeholder_lines: int = 1

    workers: Optional[int] = None

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.placeholder_lines < 0:
            raise ValueError("placeholder_lines must be non-negative")
        if not self.header_extensions and not self.source_extensions:
            raise ValueError("at least one header or source extension is required")
        for ext in [*self.header_extensions, *self.source_extensions]:
            if not ext.startswith("."):
                raise ValueError(f"extension {ext!r} must start with '.'")
        overlap = set(self.header_extensions) & set(self.source_extensions)
        if overlap:
            raise ValueError(
                f"extensions cannot be both header and source: {', '.join(sorted(overlap))}"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of quiet, normal, verbose")

    @property
    def extensions(self) -> list[str]:
        """All recognized suffixes, headers first."""
        return [*self.header_extensions, *self.source_extensions]

    def is_source(self, filename: str) -> bool:
        """Whether ``filename`` is a translation unit rather than a header."""
        lower = filename.lower()
        return any(lower.endswith(ext.lower()) for ext in self.source_extensions)


def load_config(**overrides: Any) -> AnalysisConfig:
    """Load configuration, merging defaults, environment and overrides.

    Args:
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        InvalidConfigError: If a value is invalid or a key is unknown
    """
    merged: dict[str, Any] = {}

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(AnalysisConfig.__dataclass_fields__))
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown configuration key")

    try:
        return AnalysisConfig(**merged)
    except ValueError as e:
        raise InvalidConfigError("config", merged, str(e)) from e


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from INCLUDE_COST_* environment variables.

    Supported environment variables:
        INCLUDE_COST_WORKERS: int
        INCLUDE_COST_PLACEHOLDER_LINES: int
        INCLUDE_COST_CASE_SENSITIVE: bool (true/false/1/0)
        INCLUDE_COST_FOLLOW_SYMLINKS: bool
        INCLUDE_COST_ALLOW_HIDDEN_FILES: bool
        INCLUDE_COST_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any INCLUDE_COST_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from e
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed in a single variable
    (the extension and exclude lists).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None
