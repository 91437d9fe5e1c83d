"""Search orchestration: walk, filter by name, scan contents in parallel."""

import concurrent.futures
import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from wildgrep.core.config import SearchConfig
from wildgrep.core.exceptions import (
    ConfigurationError,
    FileProcessingError,
    SearchTimeoutError,
)
from wildgrep.processors import ContentScanner, FileProcessor

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """
    Outcome of a search.

    Attributes:
        hits: Sorted paths of files that contain the needle
        files_scanned: Files whose content was checked to completion
        files_failed: Files that could not be read
        timed_out: Whether the deadline passed before all files were scanned
        elapsed: Wall-clock duration in seconds
    """

    hits: List[Path] = field(default_factory=list)
    files_scanned: int = 0
    files_failed: int = 0
    timed_out: bool = False
    elapsed: float = 0.0

    def check(self) -> "SearchResult":
        """
        Raise if the search did not complete.

        Raises:
            SearchTimeoutError: If the deadline passed; carries the partial hits
        """
        if self.timed_out:
            raise SearchTimeoutError(
                "Search timed out",
                f"{len(self.hits)} hits after {self.elapsed:.2f}s, results are incomplete",
                hits=[str(p) for p in self.hits],
            )
        return self


class Searcher:
    """
    Runs one search described by a :class:`SearchConfig`.

    The walk happens on the calling thread and feeds a thread pool that scans
    file contents. The whole search, walk included, is bounded by the
    configured timeout. Work still queued at the deadline is cancelled, and
    scans already running stop before their next read.

    Example:
        >>> config = SearchConfig(needle="TODO", file_pattern="*.py")
        >>> result = Searcher(config).search()
        >>> print(len(result.hits), "hits")
    """

    def __init__(self, config: SearchConfig):
        self.config = config
        self.file_processor = FileProcessor(config)
        self.scanner = ContentScanner(config.needle, max_size=config.max_file_size_bytes)

    def search(self) -> SearchResult:
        """
        Search the configured root.

        Returns:
            SearchResult with the hits found before the deadline

        Raises:
            ConfigurationError: If the root is not a directory
        """
        root = self.config.root_path
        if not root.is_dir():
            raise ConfigurationError(f"Search root is not a directory: {root}")

        started = time.monotonic()
        deadline = started + self.config.timeout_seconds
        result = SearchResult()

        logger.info(
            f"Searching {root} for {self.config.needle!r} in files matching "
            f"{self.config.file_pattern!r}"
        )

        executor = ThreadPoolExecutor(
            max_workers=self.config.max_workers, thread_name_prefix="wildgrep"
        )
        try:
            futures = self._submit_files(executor, root, deadline, result)
            self._collect_hits(futures, deadline, result)
        finally:
            executor.shutdown(wait=not result.timed_out, cancel_futures=True)

        result.hits.sort()
        result.elapsed = time.monotonic() - started

        if result.timed_out:
            logger.warning(
                f"Search timed out after {self.config.timeout_ms}ms; "
                f"{result.files_scanned} files scanned, results are incomplete"
            )
        else:
            logger.info(
                f"Scanned {result.files_scanned} files in {result.elapsed:.2f}s, "
                f"{len(result.hits)} hits"
            )
        return result

    def _submit_files(
        self, executor: ThreadPoolExecutor, root: Path, deadline: float, result: SearchResult
    ) -> Dict[Future, Path]:
        futures: Dict[Future, Path] = {}
        try:
            for file_path in self.file_processor.iter_files(root, deadline):
                futures[executor.submit(self.scanner.contains, file_path, deadline)] = file_path
        except SearchTimeoutError as e:
            logger.debug(f"{e.message}: {e.details}")
            result.timed_out = True
        logger.debug(f"Submitted {len(futures)} files for scanning")
        return futures

    def _collect_hits(
        self, futures: Dict[Future, Path], deadline: float, result: SearchResult
    ) -> None:
        remaining = max(deadline - time.monotonic(), 0.0)
        with tqdm(
            total=len(futures),
            desc="Scanning files",
            unit="file",
            disable=logger.getEffectiveLevel() > logging.INFO,
        ) as progress:
            try:
                for future in concurrent.futures.as_completed(futures, timeout=remaining):
                    file_path = futures[future]
                    progress.update(1)
                    try:
                        found = future.result()
                    except FileProcessingError as e:
                        logger.warning(f"Skipping {file_path}: {e.message}")
                        result.files_failed += 1
                        continue
                    if not found and time.monotonic() >= deadline:
                        # the scan may have stopped early, so a miss proves nothing
                        result.timed_out = True
                        continue
                    result.files_scanned += 1
                    if found:
                        result.hits.append(file_path)
            except concurrent.futures.TimeoutError:
                result.timed_out = True


def search(config: SearchConfig) -> SearchResult:
    """Run a search for ``config`` and return its result."""
    return Searcher(config).search()
