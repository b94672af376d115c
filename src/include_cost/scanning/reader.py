"""SourceFileReader: reads and scans every discovered file.

Each file is independent, so reading and lexing run on a thread pool for
larger inputs. The pool is drained before ``read_all`` returns, and the
corpus comes back ordered by identity so completion order never leaks into
later stages.

Usage:
    reader = SourceFileReader(config)
    corpus = reader.read_all(paths)
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from ..config import AnalysisConfig
from ..exceptions import FileAccessError
from ..logging_config import get_logger
from .discovery import normalize_path
from .lexer import scan_source
from .models import SourceFile

logger = get_logger(__name__)

# Use CPU count, capped at 8 to avoid overwhelming I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

# Below this many files the pool costs more than it saves
_PARALLEL_THRESHOLD = 10


class SourceFileReader:
    """Builds SourceFile records from paths on disk."""

    def __init__(self, config: AnalysisConfig) -> None:
        self._config = config
        self._max_workers = config.workers or _DEFAULT_WORKERS

    def read(self, file_path: Path) -> SourceFile:
        """Read and scan a single file.

        Raises:
            FileAccessError: If the file cannot be read
        """
        try:
            raw = Path(file_path).read_bytes()
        except OSError as e:
            raise FileAccessError(Path(file_path), f"Cannot read file: {e}") from e

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning(f"{file_path} is not valid UTF-8; undecodable bytes replaced")
            text = raw.decode("utf-8", errors="replace")

        result = scan_source(text)
        return SourceFile(
            path=normalize_path(file_path),
            size_bytes=len(raw),
            text_lines=result.text_lines,
            code_lines=result.code_lines,
            includes=result.includes,
            is_source=self._config.is_source(Path(file_path).name),
        )

    def read_all(self, file_paths: list[Path], parallel: bool = True) -> tuple[SourceFile, ...]:
        """Read every file; the first failure aborts the whole batch.

        Returns:
            SourceFile records sorted by identity
        """
        results: dict[str, SourceFile] = {}

        if not parallel or self._max_workers == 1 or len(file_paths) < _PARALLEL_THRESHOLD:
            for file_path in file_paths:
                source = self.read(file_path)
                results[source.path] = source
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                futures = {executor.submit(self.read, fp): fp for fp in file_paths}
                try:
                    for future in as_completed(futures):
                        source = future.result()
                        results[source.path] = source
                except FileAccessError:
                    for pending in futures:
                        pending.cancel()
                    raise

        logger.info(f"Scanned {len(results)} files")
        return tuple(results[key] for key in sorted(results))
