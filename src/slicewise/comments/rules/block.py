"""Block comment rule (multi-line state machine)."""

from __future__ import annotations

from collections.abc import Iterator

from slicewise.comments.units import LexicalUnit, LexicalUnitKind
from slicewise.config import get_scan_config
from slicewise.errors import UnterminatedCommentError
from slicewise.utils.logger import get_logger

logger = get_logger(__name__)


class BlockCommentRule:
    """Recognise a block comment, possibly spanning several lines.

    States:
    1. Opening marker found and a closing marker follows on the same line:
       the unit is the trimmed interior; the iterator is not touched.
    2. Otherwise, continuation: pull lines, trim each one and join them with
       "\\n", until a trimmed line ends with the closing marker. That last
       line is included with the marker (and the whitespace before it) removed.

    Running out of lines in state 2 raises UnterminatedCommentError.

    Example:
        >>> rule = BlockCommentRule()
        >>> rule.apply("/* First line", iter([" * Second line */"])).text
        'First line\\n* Second line'

    """

    __slots__ = ("open_marker", "close_marker")

    def __init__(self, open_marker: str | None = None, close_marker: str | None = None) -> None:
        config = get_scan_config()
        self.open_marker = open_marker if open_marker is not None else config.block_comment_open
        self.close_marker = close_marker if close_marker is not None else config.block_comment_close

    def apply(self, line: str, lines: Iterator[str]) -> LexicalUnit | None:
        idx = line.find(self.open_marker)
        if idx == -1:
            return None

        after_open = line[idx + len(self.open_marker) :]
        close_idx = after_open.find(self.close_marker)
        if close_idx != -1:
            return LexicalUnit.new_instance(
                LexicalUnitKind.BLOCK_COMMENT, after_open[:close_idx].strip()
            )

        logger.debug("Block comment continues past line: %r", line)
        parts = [after_open.strip()]
        close_len = len(self.close_marker)
        while True:
            next_line = next(lines, None)
            if next_line is None:
                raise UnterminatedCommentError(self.close_marker)
            trimmed = next_line.strip()
            if trimmed.endswith(self.close_marker):
                parts.append(trimmed[:-close_len].strip())
                break
            parts.append(trimmed)

        return LexicalUnit.new_instance(LexicalUnitKind.BLOCK_COMMENT, "\n".join(parts))
