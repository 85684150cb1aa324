"""Zero-copy string views.

A Slice is a window (start, end) over a shared base string. Every operation
returns a new Slice over the same base; the base text is never copied until
a caller asks for an owned string (prefix, clear, str()).

Thread Safety:
Slice is frozen (immutable) and safe to share across threads.

Example:
    >>> s = Slice.of("hello world")
    >>> word, rest = s.prefix(5)
    >>> word, str(rest)
    ('hello', ' world')
    >>> str(rest.trim())
    'world'

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from slicewise.errors import SliceBoundsError


@dataclass(frozen=True, slots=True, eq=False)
class Slice:
    """Immutable view of base[start:end].

    Invariant: 0 <= start <= end <= len(base).

    Equality and hashing are by content, so two slices over different bases
    (or different windows of the same base) compare equal when they show the
    same text.

    Attributes:
        base: The shared backing text
        start: Start index into base (inclusive)
        end: End index into base (exclusive); defaults to len(base)

    """

    base: str
    start: int = 0
    end: int | None = None

    EMPTY: ClassVar[Slice]

    def __post_init__(self) -> None:
        if self.end is None:
            object.__setattr__(self, "end", len(self.base))
        if self.start < 0 or self.start > len(self.base):
            raise SliceBoundsError(
                f"start {self.start} outside [0, {len(self.base)}]"
            )
        if self.end < self.start or self.end > len(self.base):
            raise SliceBoundsError(
                f"end {self.end} outside [{self.start}, {len(self.base)}]"
            )

    @classmethod
    def of(cls, text: str) -> Slice:
        """Create a slice covering the whole of text."""
        return cls(text, 0, len(text))

    # =========================================================================
    # Core operations
    # =========================================================================

    def prefix(self, n: int) -> tuple[str, Slice]:
        """Split off the first n characters.

        Args:
            n: Number of characters to take, 0 <= n <= len(self)

        Returns:
            (owned prefix string, slice over the rest)

        Raises:
            SliceBoundsError: If n is negative or larger than the slice
        """
        if n < 0 or n > len(self):
            raise SliceBoundsError(
                f"Cannot take prefix of {n} characters from slice of length {len(self)}"
            )
        cut = self.start + n
        return self.base[self.start : cut], Slice(self.base, cut, self.end)

    def trim(self) -> Slice:
        """Exclude leading and trailing whitespace from the view."""
        base = self.base
        start = self.start
        end = self.end
        while start < end and base[start].isspace():
            start += 1
        while end > start and base[end - 1].isspace():
            end -= 1
        if start == self.start and end == self.end:
            return self
        return Slice(base, start, end)

    def clear(self) -> tuple[str, Slice]:
        """Take the whole content, leaving an empty slice at the end."""
        return str(self), Slice(self.base, self.end, self.end)

    def is_empty(self) -> bool:
        """True iff the view has length 0 (whitespace is content)."""
        return self.end == self.start

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def char_at(self, index: int) -> str:
        """Character at index, relative to the view."""
        if index < 0 or self.start + index >= self.end:
            raise SliceBoundsError(f"index {index} outside slice of length {len(self)}")
        return self.base[self.start + index]

    def first_char(self) -> str:
        return self.char_at(0)

    def substring(self, start: int, end: int | None = None) -> Slice:
        """Sub-view [start, end) relative to this view."""
        length = len(self)
        if end is None:
            end = length
        if start < 0 or start > length:
            raise SliceBoundsError(f"start {start} outside slice of length {length}")
        if end < start or end > length:
            raise SliceBoundsError(f"end {end} outside slice of length {length}")
        if start == 0 and end == length:
            return self
        return Slice(self.base, self.start + start, self.start + end)

    def starts_with(self, text: str) -> bool:
        return self.base.startswith(text, self.start, self.end)

    def ends_with(self, text: str) -> bool:
        return self.base.endswith(text, self.start, self.end)

    def index_of(self, text: str, from_index: int = 0) -> int:
        """Index of text relative to the view, or -1."""
        if from_index < 0 or from_index > len(self):
            return -1
        idx = self.base.find(text, self.start + from_index, self.end)
        return idx - self.start if idx != -1 else -1

    def last_index_of(self, text: str) -> int:
        """Index of the last occurrence of text relative to the view, or -1."""
        idx = self.base.rfind(text, self.start, self.end)
        return idx - self.start if idx != -1 else -1

    def equals_string(self, text: str) -> bool:
        return len(text) == len(self) and self.starts_with(text)

    # =========================================================================
    # Dunder protocol
    # =========================================================================

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.base[self.start : self.end]

    def __repr__(self) -> str:
        val = str(self)
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Slice({val!r}, {self.start}:{self.end})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return len(self) == len(other) and str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


Slice.EMPTY = Slice("")
