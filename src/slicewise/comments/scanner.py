"""Line-driven comment scanner.

Runs an ordered list of line rules over source text. Every line is offered
to the rules in turn; the first rule that recognises something wins and
the remaining rules are skipped for that line. Rules share the scanner's
line iterator, so lines a rule consumes as continuation are never offered
again.

Thread Safety:
CommentScanner holds only its (stateless) rules and is safe to share.
Each scan creates its own line iterator.

Example:
    >>> units = scan_comments("int x; // counter\\n#pragma once")
    >>> [(u.kind.name, u.text) for u in units]
    [('INLINE_COMMENT', ' counter'), ('PRAGMA', 'once')]

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from slicewise.comments.rules import (
    BlockCommentRule,
    InlineCommentRule,
    LineRule,
    PragmaMacroRule,
    PragmaRule,
)
from slicewise.comments.units import LexicalUnit
from slicewise.errors import UnterminatedCommentError
from slicewise.utils.logger import get_logger

logger = get_logger(__name__)


def default_rules() -> list[LineRule]:
    """The standard rule order: inline, block, pragma, pragma operator."""
    return [InlineCommentRule(), BlockCommentRule(), PragmaRule(), PragmaMacroRule()]


def apply_rules(
    line: str, lines: Iterator[str], rules: Sequence[LineRule]
) -> LexicalUnit | None:
    """Offer one line to each rule in order and return the first unit found."""
    for rule in rules:
        unit = rule.apply(line, lines)
        if unit is not None:
            return unit
    return None


def _split_lines(text: str) -> list[str]:
    """Split on "\\n" and "\\r\\n" only.

    str.splitlines() also breaks on form feeds, vertical tabs and Unicode
    separators, which belong to the line they appear on in C source.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class _NumberedLines:
    """Iterator over lines that remembers how many it has handed out."""

    __slots__ = ("_lines", "lineno")

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.lineno = 0

    def __iter__(self) -> _NumberedLines:
        return self

    def __next__(self) -> str:
        line = next(self._lines)
        self.lineno += 1
        return line


class CommentScanner:
    """Extract comments and pragmas from source text.

    Args:
        rules: Rules to apply, in priority order. Defaults to
            default_rules(), built from the active ScanConfig.

    """

    __slots__ = ("rules",)

    def __init__(self, rules: Sequence[LineRule] | None = None) -> None:
        self.rules: tuple[LineRule, ...] = tuple(rules) if rules is not None else tuple(default_rules())

    def scan_lines(
        self, lines: Iterable[str], source_file: str | None = None
    ) -> Iterator[LexicalUnit]:
        """Yield the units found in lines, lazily.

        Raises:
            UnterminatedCommentError: If a block comment is never closed.
                The error carries the line where the comment opened.
        """
        numbered = _NumberedLines(lines)
        for line in numbered:
            start = numbered.lineno
            try:
                unit = apply_rules(line, numbered, self.rules)
            except UnterminatedCommentError as e:
                raise UnterminatedCommentError(
                    e.close_marker, lineno=start, source_file=source_file
                ) from e
            if unit is not None:
                logger.debug("Line %d: %s", start, unit.kind.name)
                yield unit

    def scan(self, text: str) -> list[LexicalUnit]:
        """Scan a string, splitting it on "\\n" or "\\r\\n"."""
        return list(self.scan_lines(_split_lines(text)))

    def scan_file(self, path: str | Path) -> list[LexicalUnit]:
        """Scan a UTF-8 encoded file."""
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        return list(self.scan_lines(_split_lines(text), source_file=str(path)))


def scan_comments(text: str) -> list[LexicalUnit]:
    """Scan text with the default rules."""
    return CommentScanner().scan(text)
