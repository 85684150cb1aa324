"""Pragma rules: "#pragma" directives and the "_Pragma" operator."""

from __future__ import annotations

from collections.abc import Iterator

from slicewise.charsets import DOUBLE_QUOTE, LINE_CONTINUATION
from slicewise.comments.units import LexicalUnit, LexicalUnitKind
from slicewise.config import get_scan_config
from slicewise.errors import ParseError, UnbalancedDelimiterError
from slicewise.parsers.delimiters import parse_double_quoted_string, parse_nested
from slicewise.slices import Slice
from slicewise.utils.logger import get_logger

logger = get_logger(__name__)


class PragmaRule:
    """Recognise a "#pragma" directive, with backslash continuation.

    The keyword is matched case-insensitively at the start of the trimmed
    line and stripped together with the whitespace around the content.
    While the content ends with a backslash, the backslash is dropped and
    the next line (trimmed, its own trailing backslash dropped) is appended
    after a "\\n".

    If a continuation is pending but the iterator is exhausted, the rule
    returns None. This differs from BlockCommentRule, which raises.

    Example:
        >>> PragmaRule().apply("#pragma foo \\\\", iter(["bar"])).text
        'foo \\nbar'

    """

    __slots__ = ("keyword",)

    def __init__(self, keyword: str | None = None) -> None:
        self.keyword = keyword if keyword is not None else get_scan_config().pragma_keyword

    def apply(self, line: str, lines: Iterator[str]) -> LexicalUnit | None:
        trimmed = line.strip()
        keyword_len = len(self.keyword)
        if trimmed[:keyword_len].lower() != self.keyword.lower():
            return None

        content = trimmed[keyword_len:].strip()
        if not content.endswith(LINE_CONTINUATION):
            return LexicalUnit.new_instance(LexicalUnitKind.PRAGMA, content)

        parts = [content[:-1]]
        while True:
            next_line = next(lines, None)
            if next_line is None:
                logger.debug("Pragma continuation without a following line: %r", line)
                return None
            next_trimmed = next_line.strip()
            if not next_trimmed.endswith(LINE_CONTINUATION):
                parts.append(next_trimmed)
                break
            parts.append(next_trimmed[:-1])

        return LexicalUnit.new_instance(LexicalUnitKind.PRAGMA, "\n".join(parts))


class PragmaMacroRule:
    """Recognise the C99 pragma operator, e.g. _Pragma("omp parallel").

    The text is the string operand without its quotes (escapes kept as
    written). A string operand is read with its escapes honoured, so a ")"
    inside it does not close the operator. An operand that is not a string
    literal, as in the macro body "_Pragma(#x)", is returned trimmed.

    Anything malformed is not a match: no "(" after the keyword, an
    unterminated string, or no closing ")" on the line. The keyword itself
    may sit inside a string literal of ordinary code, as in
    puts("_Pragma("), so this rule never raises.
    """

    __slots__ = ("keyword",)

    def __init__(self, keyword: str | None = None) -> None:
        self.keyword = keyword if keyword is not None else get_scan_config().pragma_macro_keyword

    def apply(self, line: str, lines: Iterator[str]) -> LexicalUnit | None:
        idx = line.find(self.keyword)
        if idx == -1:
            return None

        rest = Slice(line, idx + len(self.keyword)).trim()
        if not rest.starts_with("("):
            return None

        operand = rest.substring(1).trim()
        try:
            if operand.starts_with(DOUBLE_QUOTE):
                literal = parse_double_quoted_string(operand)
                if not literal.remainder.trim().starts_with(")"):
                    return None
                text = literal.value
            else:
                text = str(Slice.of(parse_nested(rest, "(", ")").value).trim())
        except (ParseError, UnbalancedDelimiterError):
            logger.debug("Malformed %s operand: %r", self.keyword, line)
            return None
        return LexicalUnit.new_instance(LexicalUnitKind.PRAGMA_MACRO, text)
