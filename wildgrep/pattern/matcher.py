"""Backtracking matcher for compiled glob patterns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from wildgrep.pattern.steps import Step, StepKind


@dataclass
class MatchCursor:
    """
    Per-call matching state.

    Only the first ``*`` step of a pattern is a backtrack point. Its
    checkpoint is stored as an offset into the candidate.

    Attributes:
        step_index: Index of the step being evaluated
        pos: Offset of the unconsumed part of the candidate
        first_many: Index of the first ``*`` step reached, if any
        checkpoint: Offset at which ``first_many`` was last entered
        just_backtracked: Whether the previous transition was a rewind
    """

    step_index: int = 0
    pos: int = 0
    first_many: Optional[int] = None
    checkpoint: int = 0
    just_backtracked: bool = False

    def can_backtrack(self, length: int) -> bool:
        return (
            self.first_many is not None
            and self.step_index != 0
            and not self.just_backtracked
            and self.checkpoint < length
        )

    def backtrack(self) -> None:
        """Rewind to the first ``*`` step with one more character dropped."""
        self.step_index = self.first_many
        self.pos = self.checkpoint + 1
        self.just_backtracked = True


class CompiledPattern:
    """
    A glob pattern compiled into a sequence of steps.

    Instances are immutable and can be shared between threads; every call to
    :meth:`matches` uses its own :class:`MatchCursor`.

    Use :func:`wildgrep.pattern.compile_pattern` to build one.

    Example:
        >>> pattern = compile_pattern("PLAN9*")
        >>> pattern.matches("PLAN9_foo")
        True
        >>> pattern.matches("PLAN8")
        False
    """

    __slots__ = ("_source", "_steps")

    def __init__(self, source: str, steps: Tuple[Step, ...]):
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_steps", tuple(steps))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def source_text(self) -> str:
        """The exact text this pattern was compiled from."""
        return self._source

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    def matches(self, candidate: str) -> bool:
        """
        Return whether the whole of ``candidate`` matches the whole pattern.

        Args:
            candidate: String to test

        Returns:
            True on a full match, False otherwise. Never raises for a str.
        """
        steps = self._steps
        length = len(candidate)
        cursor = MatchCursor()

        while cursor.step_index < len(steps):
            step = steps[cursor.step_index]

            if step.kind is StepKind.MANY and cursor.first_many in (None, cursor.step_index):
                cursor.first_many = cursor.step_index
                cursor.checkpoint = cursor.pos

            new_pos = step.scan(candidate, cursor.pos)
            if new_pos is None:
                if not cursor.can_backtrack(length):
                    return False
                cursor.backtrack()
                continue

            cursor.pos = new_pos
            cursor.step_index += 1
            cursor.just_backtracked = False

        return cursor.pos == length

    def __call__(self, candidate: str) -> bool:
        return self.matches(candidate)

    def __str__(self) -> str:
        return self._source

    def __repr__(self) -> str:
        return f"CompiledPattern({self._source!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, CompiledPattern):
            return NotImplemented
        return self._source == other._source and self._steps == other._steps

    def __hash__(self) -> int:
        return hash((self._source, self._steps))
