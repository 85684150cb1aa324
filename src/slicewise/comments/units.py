"""LexicalUnit and LexicalUnitKind definitions for the comment scanner.

Line rules produce LexicalUnit values: one per comment or pragma found,
tagged with its kind and carrying the extracted text.

Thread Safety:
LexicalUnit is frozen (immutable) and safe to share across threads.
LexicalUnitKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LexicalUnitKind(Enum):
    """Kinds of lexical unit found by the line rules."""

    INLINE_COMMENT = auto()  # // text
    BLOCK_COMMENT = auto()  # /* text */
    PRAGMA = auto()  # #pragma text
    PRAGMA_MACRO = auto()  # _Pragma("text")


@dataclass(frozen=True, slots=True)
class LexicalUnit:
    """A comment or pragma extracted from source text.

    Attributes:
        kind: What was found
        text: The extracted text, markers removed

    """

    kind: LexicalUnitKind
    text: str

    @classmethod
    def new_instance(cls, kind: LexicalUnitKind, text: str) -> LexicalUnit:
        """Build a unit. The text is taken as-is, without validation."""
        return cls(kind, text)

    def __repr__(self) -> str:
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"LexicalUnit({self.kind.name}, {val!r})"
