"""
wildgrep - Wildcard file filtering and content search
=====================================================

A shell-style glob matcher compiled once and reused across many file
names, plus a small tool that walks a directory tree and reports files
whose name matches a glob and whose content contains a fixed needle.

Main Components:
    - pattern: Glob compiler, backtracking matcher and pattern values
    - core: Configuration, constants, and exceptions
    - processors: File collection and content scanning
    - search: Parallel search with a deadline

Example:
    >>> from wildgrep import compile_pattern, matches
    >>>
    >>> pattern = compile_pattern("PLAN9*")
    >>> pattern.matches("PLAN9_foo")
    True
    >>> matches("*.py", "setup.py")
    True

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__license__ = "MIT"

from wildgrep.core.exceptions import (
    InvalidGlobSequence,
    InvalidPatternType,
    PatternCompilationFailed,
    PatternError,
    WildgrepError,
)
from wildgrep.pattern import CompiledPattern, Literal, RawPattern, compile_pattern, matches, resolve

__all__ = [
    "CompiledPattern",
    "InvalidGlobSequence",
    "InvalidPatternType",
    "Literal",
    "PatternCompilationFailed",
    "PatternError",
    "RawPattern",
    "WildgrepError",
    "__version__",
    "compile_pattern",
    "matches",
    "resolve",
]
