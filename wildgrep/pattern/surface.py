"""
Pattern values accepted by :func:`matches`.

Callers may hand over a raw ``str`` (compiled on demand), a
:class:`RawPattern`, an already compiled :class:`CompiledPattern`, or a
:class:`Literal` when no wildcard semantics are wanted at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from wildgrep.core.exceptions import InvalidPatternType
from wildgrep.pattern.compiler import compile_cached
from wildgrep.pattern.matcher import CompiledPattern


@dataclass(frozen=True)
class Literal:
    """A pattern that matches exactly one string, compared by equality."""

    text: str

    def matches(self, candidate: str) -> bool:
        return self.text == candidate

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class RawPattern:
    """Pattern text that is compiled the first time it is resolved."""

    text: str

    def compiled(self) -> CompiledPattern:
        return compile_cached(self.text)

    def __str__(self) -> str:
        return self.text


PatternValue = Union[str, RawPattern, CompiledPattern, Literal]
Matcher = Union[CompiledPattern, Literal]


def resolve(pattern: PatternValue) -> Matcher:
    """
    Turn a pattern value into something with a ``matches`` method.

    Args:
        pattern: str, RawPattern, CompiledPattern or Literal

    Returns:
        The compiled pattern, or the Literal itself

    Raises:
        InvalidPatternType: If ``pattern`` is none of the accepted types
        InvalidGlobSequence: If raw pattern text fails to compile
        PatternCompilationFailed: If raw pattern text fails to compile
    """
    if isinstance(pattern, (CompiledPattern, Literal)):
        return pattern
    if isinstance(pattern, RawPattern):
        return pattern.compiled()
    if isinstance(pattern, str):
        return compile_cached(pattern)
    raise InvalidPatternType(
        "invalid pattern type",
        f"expected str, RawPattern, CompiledPattern or Literal, got {type(pattern).__name__}",
    )


def matches(pattern: PatternValue, candidate: str) -> bool:
    """
    Return whether ``candidate`` matches ``pattern``.

    Errors from resolving the pattern are raised before any matching is
    attempted; matching itself does not fail.

    Example:
        >>> matches("*.py", "setup.py")
        True
        >>> matches(Literal("*.py"), "setup.py")
        False
    """
    return resolve(pattern).matches(candidate)
