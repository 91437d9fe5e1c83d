"""
Shell-style wildcard matching.

Example:
    >>> from wildgrep.pattern import compile_pattern, matches
    >>> pattern = compile_pattern("foo/bar/*/baz")
    >>> pattern.matches("foo/bar/quz/baz")
    True
    >>> matches("\\\\*", "*")
    True
"""

from wildgrep.pattern.compiler import compile_pattern
from wildgrep.pattern.matcher import CompiledPattern
from wildgrep.pattern.steps import Step, StepKind
from wildgrep.pattern.surface import Literal, RawPattern, matches, resolve

__all__ = [
    "CompiledPattern",
    "Literal",
    "RawPattern",
    "Step",
    "StepKind",
    "compile_pattern",
    "matches",
    "resolve",
]
