"""
Constants and configuration defaults for wildgrep.

This module centralizes file size limits, timeouts, worker counts
and other defaults to avoid hardcoding values throughout the codebase.
"""

from typing import List

# ============================================================================
# Search Defaults
# ============================================================================

DEFAULT_ROOT: str = "."
"""Directory the search starts from"""

DEFAULT_FILE_PATTERN: str = "*"
"""Glob applied to file base names"""

DEFAULT_TIMEOUT_MS: int = 2000
"""Time budget for a whole search, in milliseconds"""

DEFAULT_IGNORE_PATTERNS: List[str] = []
"""Globs for path components to skip during the walk"""

# ============================================================================
# File Size Limits
# ============================================================================

MAX_FILE_SIZE_MB: float = 64.0
"""Files larger than this are skipped by the content scanner"""

MAX_FILE_SIZE_BYTES: int = int(MAX_FILE_SIZE_MB * 1024 * 1024)
"""Maximum file size in bytes"""

# ============================================================================
# Concurrency Settings
# ============================================================================

MAX_WORKER_THREADS: int = 8
"""Default number of worker threads for content scanning"""

MAX_WORKER_THREADS_LIMIT: int = 64
"""Upper bound accepted for max_workers"""

# ============================================================================
# Memory Management
# ============================================================================

STREAM_CHUNK_SIZE: int = 64 * 1024
"""Chunk size in bytes for streaming file reads"""

PATTERN_CACHE_SIZE: int = 128
"""Number of compiled patterns kept by the raw-pattern cache"""

# ============================================================================
# Exit Codes
# ============================================================================

EXIT_OK: int = 0
EXIT_FAILURE: int = 1
EXIT_INTERRUPTED: int = 130
