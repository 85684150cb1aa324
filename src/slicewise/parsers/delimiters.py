"""Balanced-delimiter and quoted-string parsers.

Nested scans track a depth counter: every further opening delimiter
increments it, every closing delimiter decrements it, and the scan stops
when it returns to zero. The closing delimiter is tested first, so a pair
whose open and close are the same text (quotes) closes at the next
occurrence instead of nesting.

Scans are anchored: parse_nested needs the slice to start with the opening
delimiter and reverse_nested needs it to end with the closing one. Anything
else is a predicate mismatch ("" and the slice unchanged), so no text
outside the delimiters is ever dropped. An opening delimiter without its
partner raises UnbalancedDelimiterError; no partial value is returned.
"""

from __future__ import annotations

from slicewise.charsets import DOUBLE_QUOTE, ESCAPE, SINGLE_QUOTE
from slicewise.errors import ExpectationError, ParseError, UnbalancedDelimiterError
from slicewise.outcome import ParseOutcome
from slicewise.slices import Slice


def parse_nested(s: Slice, open_delim: str, close_delim: str) -> ParseOutcome[str]:
    """Extract the content between a leading open_delim and its match.

    Args:
        s: Slice to scan
        open_delim: Opening delimiter, e.g. "("
        close_delim: Closing delimiter, e.g. ")"

    Returns:
        Interior text (delimiters excluded) and the slice starting just
        after the matching close. ("" and s when the slice does not start
        with open_delim.)

    Raises:
        UnbalancedDelimiterError: If the slice ends before depth returns to 0

    Example:
        >>> out = parse_nested(Slice.of("(hello world) rest"), "(", ")")
        >>> out.value, str(out.remainder)
        ('hello world', ' rest')
    """
    if not s.starts_with(open_delim):
        return ParseOutcome(s, "")

    base = s.base
    end = s.end
    open_len = len(open_delim)
    close_len = len(close_delim)
    inner_start = s.start + open_len
    pos = inner_start
    depth = 1

    while pos < end:
        if base.startswith(close_delim, pos, end):
            depth -= 1
            if depth == 0:
                return ParseOutcome(Slice(base, pos + close_len, end), base[inner_start:pos])
            pos += close_len
            continue
        if base.startswith(open_delim, pos, end):
            depth += 1
            pos += open_len
            continue
        pos += 1

    raise UnbalancedDelimiterError(open_delim, close_delim, str(s))


def reverse_nested(s: Slice, open_delim: str, close_delim: str) -> ParseOutcome[str]:
    """Mirror of parse_nested, scanning from the tail toward the head.

    A trailing close_delim starts the scan; the matching open_delim ends it.

    Returns:
        Interior text and the slice covering everything before the matching
        open_delim. ("" and s when the slice does not end with close_delim.)

    Raises:
        UnbalancedDelimiterError: If the head is reached before depth returns to 0

    Example:
        >>> out = reverse_nested(Slice.of("a string <another string>"), "<", ">")
        >>> out.value, str(out.remainder)
        ('another string', 'a string ')
    """
    if not s.ends_with(close_delim):
        return ParseOutcome(s, "")

    base = s.base
    start = s.start
    open_len = len(open_delim)
    close_len = len(close_delim)
    inner_end = s.end - close_len
    pos = inner_end  # scanning the text that ends at pos
    depth = 1

    while pos > start:
        if base.endswith(open_delim, start, pos):
            depth -= 1
            if depth == 0:
                return ParseOutcome(Slice(base, start, pos - open_len), base[pos:inner_end])
            pos -= open_len
            continue
        if base.endswith(close_delim, start, pos):
            depth += 1
            pos -= close_len
            continue
        pos -= 1

    raise UnbalancedDelimiterError(open_delim, close_delim, str(s))


def parse_parenthesis(s: Slice) -> ParseOutcome[str]:
    return parse_nested(s, "(", ")")


def parse_primes(s: Slice) -> ParseOutcome[str]:
    """Parse a string between primes, e.g. 'a string'."""
    return parse_nested(s, SINGLE_QUOTE, SINGLE_QUOTE)


def parse_primes_separated_by_string(s: Slice, separator: str) -> ParseOutcome[list[str]]:
    """Parse "'a'<sep>'b'<sep>'c'" into ["a", "b", "c"].

    The list ends at the first quoted element not followed by separator
    plus an opening quote. The remainder is trimmed.

    An empty slice gives an empty list; any other input must start with a
    quote.

    Raises:
        ExpectationError: If a non-empty slice does not start with a quote
        UnbalancedDelimiterError: If a quoted element is never closed
    """
    elements: list[str] = []
    if s.is_empty():
        return ParseOutcome(s, elements)

    if not s.starts_with(SINGLE_QUOTE):
        raise ExpectationError("string to start with quote (')", str(s))

    continuation = separator + SINGLE_QUOTE
    while True:
        element = parse_primes(s)
        s = element.remainder
        elements.append(element.value)
        if not s.starts_with(continuation):
            return ParseOutcome(s.trim(), elements)
        s = s.substring(len(separator))


def parse_double_quoted_string(s: Slice) -> ParseOutcome[str]:
    """Parse a double-quoted string, honouring backslash escapes.

    Escape sequences are kept verbatim (backslash included); only their
    effect on finding the closing quote is interpreted.

    Raises:
        ExpectationError: If the slice does not start with a double quote
        ParseError: If the string ends with a dangling escape
        UnbalancedDelimiterError: If there is no unescaped closing quote
    """
    if not s.starts_with(DOUBLE_QUOTE):
        raise ExpectationError(f"string to start with '{DOUBLE_QUOTE}'", str(s))

    base = s.base
    end = s.end
    content_start = s.start + 1
    pos = content_start

    while pos < end:
        char = base[pos]
        if char == ESCAPE:
            if pos + 1 >= end:
                raise ParseError(f"Dangling escape at end of string '{s}'")
            pos += 2
            continue
        if char == DOUBLE_QUOTE:
            return ParseOutcome(Slice(base, pos + 1, end), base[content_start:pos])
        pos += 1

    raise UnbalancedDelimiterError(DOUBLE_QUOTE, DOUBLE_QUOTE, str(s))
