"""LineRule protocol for comment and pragma recognition.

A rule looks at one raw line and either recognises a lexical unit in it or
returns None. Rules that need more than one line (block comments, continued
pragmas) pull the following lines from the iterator they are given.

Thread Safety:
Rules must be stateless. The line iterator is borrowed for the duration of
a single apply() call and must never be stored, so one rule instance can
serve any number of threads scanning independent inputs.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from slicewise.comments.units import LexicalUnit


@runtime_checkable
class LineRule(Protocol):
    """Protocol for line rules.

    Implement this protocol to recognise a new kind of construct. The
    scanner tries its rules in order and keeps the first unit returned.
    """

    def apply(self, line: str, lines: Iterator[str]) -> LexicalUnit | None:
        """Recognise a unit starting on line.

        Args:
            line: The current raw line
            lines: Iterator over the lines that follow; advancing it consumes
                them for the caller as well

        Returns:
            The unit found, or None if this rule does not apply
        """
        ...
