"""Inline comment rule."""

from __future__ import annotations

from collections.abc import Iterator

from slicewise.comments.units import LexicalUnit, LexicalUnitKind
from slicewise.config import get_scan_config


class InlineCommentRule:
    """Recognise an inline comment such as "code // comment".

    The unit's text is everything after the first marker, untouched
    (leading space and any further markers included). Only the current
    line is examined; the iterator is never advanced.

    """

    __slots__ = ("marker",)

    def __init__(self, marker: str | None = None) -> None:
        self.marker = marker if marker is not None else get_scan_config().inline_comment_marker

    def apply(self, line: str, lines: Iterator[str]) -> LexicalUnit | None:
        idx = line.find(self.marker)
        if idx == -1:
            return None
        return LexicalUnit.new_instance(
            LexicalUnitKind.INLINE_COMMENT, line[idx + len(self.marker) :]
        )
