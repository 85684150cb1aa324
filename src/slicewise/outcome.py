"""Parse outcomes: a parsed value paired with the unconsumed remainder.

Thread Safety:
ParseOutcome is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from slicewise.slices import Slice


@dataclass(frozen=True, slots=True)
class ParseOutcome[T]:
    """Result of running a worker over a slice.

    Attributes:
        remainder: The slice left after the worker consumed its input
        value: The parsed value (may be None, "", False or another absence marker)

    Unpacks as a pair:
        >>> remainder, value = parse_word(Slice.of("a b"))

    """

    remainder: Slice
    value: T

    def map[U](self, fn: Callable[[T], U]) -> ParseOutcome[U]:
        """Transform the value, keeping the remainder."""
        return ParseOutcome(self.remainder, fn(self.value))

    def __iter__(self) -> Iterator[Any]:
        yield self.remainder
        yield self.value


def as_optional[T](outcome: ParseOutcome[T], absent: Any = None) -> ParseOutcome[T | None]:
    """Normalize an absence marker to None, preserving the remainder.

    Parsers signal "not found" with type-specific markers ("" for nested,
    -1 for parse_hex). This folds the given marker into None so callers can
    test presence uniformly without losing their position.

    Args:
        outcome: Outcome to convert
        absent: Marker that means "no value" besides None itself

    Returns:
        Outcome with the same remainder object and value or None

    Example:
        >>> as_optional(parse_hex(Slice.of("FF")), absent=-1).value is None
        True
    """
    value = outcome.value
    if value is None or (absent is not None and value == absent):
        return ParseOutcome(outcome.remainder, None)
    return ParseOutcome(outcome.remainder, value)
