"""Worker protocol: pure functions from a Slice to a ParseOutcome.

A worker takes the slice to parse plus any constant configuration as extra
positional parameters (delimiters, separators, flags):

    parse_word(s)
    parse_nested(s, "(", ")")
    check_string_starts(s, "abc", False)

bind() captures those parameters up front so the result can be passed
around as a zero-parameter worker.

Thread Safety:
Workers must be pure. Given equal (slice, params) they return equal
outcomes and never mutate their input, so one worker can be shared by any
number of threads.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from slicewise.outcome import ParseOutcome
from slicewise.slices import Slice


@runtime_checkable
class Worker[T](Protocol):
    """Protocol for parser workers."""

    def __call__(self, s: Slice, /, *params: Any) -> ParseOutcome[T]: ...


def bind[T](worker: Worker[T], *params: Any) -> Worker[T]:
    """Capture params so the returned worker only needs the slice.

    Example:
        >>> parens = bind(parse_nested, "(", ")")
        >>> parens(Slice.of("(a) b")).value
        'a'
    """
    if not params:
        return worker
    return _BoundWorker(worker, params)


class _BoundWorker:
    """Worker with trailing parameters fixed (partial binds leading ones)."""

    __slots__ = ("_worker", "_params")

    def __init__(self, worker: Worker[Any], params: tuple[Any, ...]) -> None:
        self._worker = worker
        self._params = params

    def __call__(self, s: Slice, /, *params: Any) -> ParseOutcome[Any]:
        return self._worker(s, *self._params, *params)

    def __repr__(self) -> str:
        name = getattr(self._worker, "__name__", repr(self._worker))
        return f"bind({name}, {', '.join(map(repr, self._params))})"
