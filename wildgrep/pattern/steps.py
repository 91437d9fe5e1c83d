"""
Compiled pattern steps and the scanners that evaluate them.

A compiled pattern is a tuple of :class:`Step` values. Every step pairs a
wildcard (or none, for the leading literal) with the literal text that must
immediately follow whatever the wildcard consumed.

Scanners work on the full candidate string plus an offset instead of on
sliced copies. They return the offset after the consumed text on success and
``None`` on failure; a failed scan never moves the cursor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

ScanFunc = Callable[[str, int, str], Optional[int]]


class StepKind(Enum):
    """Closed set of step kinds produced by the compiler."""

    LITERAL = "literal"
    ONE = "one"
    MANY = "many"
    END = "end"


def scan_literal(text: str, pos: int, tail: str) -> Optional[int]:
    """Match ``tail`` exactly at ``pos``. An empty tail always matches."""
    if text.startswith(tail, pos):
        return pos + len(tail)
    return None


def scan_one(text: str, pos: int, tail: str) -> Optional[int]:
    """
    Consume a single character, then require ``tail`` right after it.

    A mismatch of the tail is a hard failure: ``?c`` matches ``bc`` but
    not ``bd``.
    """
    if pos >= len(text):
        return None
    after = pos + 1
    if text.startswith(tail, after):
        return after + len(tail)
    return None


def scan_many(text: str, pos: int, tail: str) -> Optional[int]:
    """
    Consume characters up to and including the earliest usable ``tail``.

    With an empty tail the wildcard takes the rest of the input, which may be
    nothing at all. With a non-empty tail the wildcard must consume at least
    one character before the tail, so the search starts one past ``pos``.
    """
    if not tail:
        return len(text)
    if pos >= len(text):
        return None

    index = text.find(tail, pos + 1)
    if index == -1:
        return None
    return index + len(tail)


def scan_end(text: str, pos: int, tail: str) -> Optional[int]:
    """Succeed only at the end of input. Never consumes anything."""
    if pos == len(text) and not tail:
        return pos
    return None


SCANNERS: Dict[StepKind, ScanFunc] = {
    StepKind.LITERAL: scan_literal,
    StepKind.ONE: scan_one,
    StepKind.MANY: scan_many,
    StepKind.END: scan_end,
}


@dataclass(frozen=True)
class Step:
    """
    One compiled unit of a pattern.

    Attributes:
        kind: What the step consumes before its tail
        tail: Literal text that must directly follow the consumed span
    """

    kind: StepKind
    tail: str = ""

    def scan(self, text: str, pos: int) -> Optional[int]:
        """Run this step's scanner against ``text`` starting at ``pos``."""
        return SCANNERS[self.kind](text, pos, self.tail)

    def __str__(self) -> str:
        return f"{self.kind.name}({self.tail!r})"


END_STEP = Step(StepKind.END)
