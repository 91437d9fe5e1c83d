"""
File collection module.

This module walks the search root and yields the regular files whose
base name matches the configured glob, applying ignore rules on the way.
"""

import logging
import os
import time
from pathlib import Path
from typing import Iterator, List, Optional

from wildgrep.core.config import SearchConfig
from wildgrep.core.exceptions import SearchTimeoutError
from wildgrep.pattern import CompiledPattern
from wildgrep.pattern.compiler import compile_cached

logger = logging.getLogger(__name__)


class FileProcessor:
    """
    Collects candidate files for a search.

    This class provides methods for:
    - File name filtering with the compiled file pattern
    - Skipping ignored path components and hidden paths
    - Lazy traversal, so callers can stop the walk at any point

    Symlinked directories are not followed and symlinked files are skipped,
    so every yielded path lies under the root.

    Attributes:
        config: Search configuration
        file_pattern: Compiled glob for file base names
        ignore_patterns: Compiled globs for path components to skip

    Example:
        >>> config = SearchConfig(needle="TODO", file_pattern="*.py")
        >>> processor = FileProcessor(config)
        >>> for file_path in processor.iter_files(config.root_path):
        ...     print(file_path)
    """

    def __init__(self, config: SearchConfig):
        """
        Initialize file processor.

        Args:
            config: Search configuration
        """
        self.config = config
        self.file_pattern: CompiledPattern = config.compiled_file_pattern
        self.ignore_patterns = self._compile_ignore_patterns()

    def _compile_ignore_patterns(self) -> List[CompiledPattern]:
        """
        Compile ignore patterns from configuration.

        Returns:
            List of compiled ignore patterns
        """
        patterns = [compile_cached(p) for p in self.config.ignores]
        logger.debug(f"Compiled {len(patterns)} ignore patterns")
        return patterns

    def matches_name(self, path: Path) -> bool:
        """Return True if the file's base name matches the file pattern."""
        return self.file_pattern.matches(path.name)

    def ignores_name(self, name: str) -> bool:
        """Return True if a single path component should be skipped."""
        if not self.config.include_hidden and name.startswith("."):
            return True
        return any(pattern.matches(name) for pattern in self.ignore_patterns)

    def should_ignore(self, rel_path: Path) -> bool:
        """
        Check if a path relative to the root should be skipped.

        Every component of the path is tested, so ignoring ``node_modules``
        also skips everything below it.

        Args:
            rel_path: Path relative to the search root

        Returns:
            True if path should be ignored, False otherwise

        Example:
            >>> processor.should_ignore(Path("node_modules/package.json"))
            True
            >>> processor.should_ignore(Path("src/main.py"))
            False
        """
        return any(self.ignores_name(part) for part in rel_path.parts)

    @staticmethod
    def is_regular_file(path: Path) -> bool:
        """Regular files only: symlinks, sockets and devices are skipped."""
        try:
            return not path.is_symlink() and path.is_file()
        except OSError:
            return False

    def iter_files(self, root: Path, deadline: Optional[float] = None) -> Iterator[Path]:
        """
        Walk ``root`` lazily and yield files that should be scanned.

        Ignored and hidden directories are pruned, so nothing below them is
        read. Entries are visited in sorted order within each directory.

        Args:
            root: Directory to walk
            deadline: Optional ``time.monotonic()`` value after which the walk stops

        Yields:
            Paths of regular files whose name matches the file pattern

        Raises:
            SearchTimeoutError: If ``deadline`` passes before the walk is done
        """
        for dirpath, dirnames, filenames in os.walk(root):
            self._check_deadline(deadline, dirpath)
            kept = sorted(d for d in dirnames if not self.ignores_name(d))
            pruned = len(dirnames) - len(kept)
            if pruned:
                logger.debug(f"Pruned {pruned} directories under {dirpath}")
            dirnames[:] = kept

            current = Path(dirpath)
            for name in sorted(filenames):
                if self.ignores_name(name):
                    logger.debug(f"Ignoring file: {current / name}")
                    continue
                file_path = current / name
                if not self.matches_name(file_path):
                    continue
                if not self.is_regular_file(file_path):
                    continue
                self._check_deadline(deadline, dirpath)
                yield file_path

    @staticmethod
    def _check_deadline(deadline: Optional[float], dirpath: str) -> None:
        if deadline is not None and time.monotonic() >= deadline:
            raise SearchTimeoutError("Walk stopped at deadline", f"last directory: {dirpath}")
