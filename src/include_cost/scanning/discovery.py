"""Directory walking: turn input directories into candidate file paths."""

import os
from pathlib import Path, PurePath
from typing import Iterable, List

from ..config import AnalysisConfig
from ..exceptions import FileAccessError, InvalidPathError
from ..logging_config import get_logger

logger = get_logger(__name__)


def normalize_path(path) -> str:
    """Normalized POSIX form of a path, used as a file identity."""
    return PurePath(os.path.normpath(str(path))).as_posix()


def should_skip_file(relpath: PurePath, exclude_patterns: List[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Args:
        relpath: File path relative to its input directory
        exclude_patterns: List of glob patterns to exclude

    Returns:
        True if file should be skipped
    """
    for pattern in exclude_patterns:
        if relpath.match(pattern):
            return True
    return False


def discover_files(roots: Iterable[Path], config: AnalysisConfig) -> List[Path]:
    """Collect header and source files under every input directory.

    Directories are walked recursively in sorted order. The same file reached
    through two overlapping inputs is returned once. The result is sorted by
    normalized path so later stages never depend on input order.

    Raises:
        InvalidPathError: If an input is missing or not a directory
        FileAccessError: If a directory cannot be listed
    """
    ext_set = {ext.lower() for ext in config.extensions}
    found: dict[str, Path] = {}

    for root in roots:
        root = Path(root)
        if not root.exists():
            raise InvalidPathError(root, "does not exist")
        if not root.is_dir():
            raise InvalidPathError(root, "not a directory")

        skipped = 0
        before = len(found)

        def _on_error(err: OSError) -> None:
            raise FileAccessError(Path(err.filename or root), f"Directory scan failed: {err}")

        for dirpath, dirnames, filenames in os.walk(
            root, followlinks=config.follow_symlinks, onerror=_on_error
        ):
            if not config.allow_hidden_files:
                dirnames[:] = [d for d in dirnames if not d.startswith(".")]
            dirnames.sort()

            for filename in sorted(filenames):
                if not config.allow_hidden_files and filename.startswith("."):
                    continue
                if os.path.splitext(filename)[1].lower() not in ext_set:
                    continue

                filepath = Path(dirpath) / filename
                if filepath.is_symlink() and not config.follow_symlinks:
                    continue
                if should_skip_file(filepath.relative_to(root), config.exclude_patterns):
                    skipped += 1
                    logger.debug(f"Skipped (pattern): {filepath}")
                    continue

                found.setdefault(normalize_path(filepath), filepath)

        logger.info(
            f"Discovered {len(found) - before} files under {root} ({skipped} excluded)"
        )

    return [found[key] for key in sorted(found)]
