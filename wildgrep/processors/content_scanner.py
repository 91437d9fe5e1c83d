"""Byte-for-byte substring search in file contents."""

import logging
import time
from pathlib import Path
from typing import Optional, Union

from wildgrep.core.constants import MAX_FILE_SIZE_BYTES, STREAM_CHUNK_SIZE
from wildgrep.core.exceptions import FileProcessingError

logger = logging.getLogger(__name__)


class ContentScanner:
    """
    Checks whether files contain a fixed needle.

    Files are read in chunks, keeping the last ``len(needle) - 1`` bytes of
    each chunk so a needle split across a chunk boundary is still found.

    Attributes:
        needle: Bytes to search for
        max_size: Files larger than this many bytes are skipped
        chunk_size: Read size in bytes

    Example:
        >>> scanner = ContentScanner("TODO")
        >>> scanner.contains(Path("src/main.py"))
        True
    """

    def __init__(
        self,
        needle: Union[str, bytes],
        max_size: Optional[int] = None,
        chunk_size: int = STREAM_CHUNK_SIZE,
    ):
        if isinstance(needle, str):
            needle = needle.encode("utf-8")
        if not needle:
            raise ValueError("needle cannot be empty")
        self.needle = needle
        self.max_size = max_size or MAX_FILE_SIZE_BYTES
        self.chunk_size = max(chunk_size, len(needle))

    def contains(self, file_path: Path, deadline: Optional[float] = None) -> bool:
        """
        Return whether ``file_path`` contains the needle.

        Args:
            file_path: File to scan
            deadline: Optional ``time.monotonic()`` value; reading stops before
                the next chunk once it has passed

        Returns:
            True if the needle occurs in the file. Files above the size
            limit are skipped and reported as not containing it. A scan
            cut short by ``deadline`` also reports False.

        Raises:
            FileProcessingError: If the file cannot be read
        """
        try:
            file_size = file_path.stat().st_size
        except OSError as e:
            raise FileProcessingError(f"Cannot stat file: {file_path}", str(e))

        if file_size > self.max_size:
            logger.debug(f"Skipping large file ({file_size} bytes): {file_path}")
            return False
        if file_size < len(self.needle):
            return False

        keep = len(self.needle) - 1
        carry = b""
        try:
            with open(file_path, "rb") as f:
                while deadline is None or time.monotonic() < deadline:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        return False
                    window = carry + chunk
                    if self.needle in window:
                        return True
                    carry = window[-keep:] if keep else b""
        except PermissionError as e:
            raise FileProcessingError(f"Permission denied: {file_path}", str(e))
        except OSError as e:
            raise FileProcessingError(f"Failed to read file: {file_path}", str(e))

        logger.debug(f"Deadline passed while scanning {file_path}")
        return False
