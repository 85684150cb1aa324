"""Stateful cursor that sequences workers over one input.

The cursor owns exactly one Slice at a time. Each apply() runs a worker on
it and replaces it wholesale with the worker's remainder; the Slice itself
is immutable, so nothing handed out by the cursor can move its bounds.

Thread Safety:
Cursor instances are single-use and NOT thread-safe. Create one per input
string. The workers it runs are pure and may be shared freely.

Example:
    >>> cursor = Cursor("(a, b) -> rest")
    >>> cursor.apply(parse_nested, "(", ")")
    'a, b'
    >>> cursor.apply(check_arrow)
    '->'
    >>> cursor.apply(parse_word)
    'rest'
    >>> cursor.check_empty()

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from slicewise.config import get_scan_config
from slicewise.errors import CursorNotEmptyError
from slicewise.slices import Slice
from slicewise.utils.logger import get_logger
from slicewise.worker import Worker

logger = get_logger(__name__)


class Cursor:
    """Mutable, single-owner wrapper around a Slice.

    Args:
        source: Text or slice to parse
        auto_trim: Trim the slice after every apply() that consumed input.
            Defaults to the active ScanConfig.auto_trim.

    """

    __slots__ = ("_current", "_auto_trim")

    def __init__(self, source: str | Slice, auto_trim: bool | None = None) -> None:
        self._current = source if isinstance(source, Slice) else Slice.of(source)
        self._auto_trim = get_scan_config().auto_trim if auto_trim is None else auto_trim

    @property
    def current(self) -> Slice:
        """The slice still to be parsed."""
        return self._current

    @property
    def auto_trim(self) -> bool:
        return self._auto_trim

    def apply[T](self, worker: Worker[T], *params: Any) -> T:
        """Run worker on the current slice and advance to its remainder.

        If the worker consumed nothing, the slice is kept as-is (untrimmed
        even with auto-trim on).

        Returns:
            The worker's value
        """
        previous = self._current
        outcome = worker(previous, *params)
        remainder = outcome.remainder
        if self._auto_trim and not _same_view(previous, remainder):
            remainder = remainder.trim()
        self._current = remainder
        return outcome.value

    def apply_function[T](self, fn: Callable[[Cursor], T]) -> T:
        """Run a function that drives this cursor directly."""
        return fn(self)

    def prefix(self, n: int) -> str:
        """Consume the first n characters (no auto-trim).

        Raises:
            SliceBoundsError: If fewer than n characters remain
        """
        value, self._current = self._current.prefix(n)
        return value

    def try_prefix(self, n: int) -> str | None:
        """Like prefix(), but returns None instead of failing."""
        if n < 0 or n > len(self._current):
            return None
        return self.prefix(n)

    def clear(self) -> str:
        """Consume and return everything that is left."""
        value, self._current = self._current.clear()
        return value

    def trim(self) -> Cursor:
        self._current = self._current.trim()
        return self

    def is_empty(self) -> bool:
        return self._current.is_empty()

    def check_empty(self) -> None:
        """Assert that only whitespace is left.

        Raises:
            CursorNotEmptyError: If any non-whitespace content remains
        """
        remaining = self._current.trim()
        if not remaining.is_empty():
            logger.debug("Cursor left unconsumed content: %r", remaining)
            raise CursorNotEmptyError(str(remaining))

    def __str__(self) -> str:
        return str(self._current)

    def __repr__(self) -> str:
        return f"Cursor({self._current!r}, auto_trim={self._auto_trim})"


def _same_view(a: Slice, b: Slice) -> bool:
    return a is b or (a.base is b.base and a.start == b.start and a.end == b.end)
