"""
Glob pattern compiler.

Patterns are made of literal text and the wildcards ``*`` (one or more
characters, or zero when it ends the pattern) and ``?`` (exactly one
character). A backslash makes the following character literal, whatever it
is; a backslash at the very end of a pattern is kept as a literal backslash.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from wildgrep.core.constants import PATTERN_CACHE_SIZE
from wildgrep.core.exceptions import InvalidGlobSequence, PatternCompilationFailed
from wildgrep.pattern.matcher import CompiledPattern
from wildgrep.pattern.steps import END_STEP, Step, StepKind

ESCAPE = "\\"
WILDCARDS = {"*": StepKind.MANY, "?": StepKind.ONE}


def _compile_steps(pattern: str) -> List[Step]:
    steps: List[Step] = []
    kind = StepKind.LITERAL
    tail: List[str] = []
    index = 0

    def close() -> None:
        if kind is StepKind.LITERAL and not tail:
            return
        steps.append(Step(kind, "".join(tail)))

    while index < len(pattern):
        char = pattern[index]

        if char == ESCAPE:
            index += 1
            tail.append(pattern[index] if index < len(pattern) else ESCAPE)
        elif char in WILDCARDS:
            if kind is StepKind.MANY and not tail:
                raise InvalidGlobSequence(
                    "* or ? may not follow *", f"pattern {pattern!r}, offset {index}"
                )
            close()
            kind = WILDCARDS[char]
            tail = []
        else:
            tail.append(char)

        index += 1

    close()
    steps.append(END_STEP)
    return steps


def compile_pattern(pattern: str) -> CompiledPattern:
    """
    Compile a glob pattern into a reusable matcher.

    Args:
        pattern: Pattern text, e.g. ``"*.py"`` or ``"foo/bar/*/baz"``

    Returns:
        CompiledPattern for ``pattern``

    Raises:
        InvalidGlobSequence: If ``*`` or ``?`` directly follows ``*``
        PatternCompilationFailed: If no usable steps were produced

    Example:
        >>> compile_pattern("\\\\*").matches("*")
        True
        >>> compile_pattern("a**b")
        Traceback (most recent call last):
        ...
        wildgrep.core.exceptions.InvalidGlobSequence: * or ? may not follow *
        Details: pattern 'a**b', offset 2
    """
    steps = _compile_steps(pattern)
    if not steps or steps[-1].kind is not StepKind.END:
        raise PatternCompilationFailed(
            "unable to compile glob pattern", f"pattern {pattern!r} produced no steps"
        )
    return CompiledPattern(pattern, tuple(steps))


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def compile_cached(pattern: str) -> CompiledPattern:
    """Compile ``pattern``, reusing earlier results for the same text."""
    return compile_pattern(pattern)
