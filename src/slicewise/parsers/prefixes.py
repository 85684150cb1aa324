"""Prefix, suffix and single-character parsers.

The check_* parsers are predicates: on a mismatch they return a falsy
value and the slice unchanged. The ensure_* / *_strict / parse_string
variants raise ExpectationError instead.
"""

from __future__ import annotations

from collections.abc import Collection

from slicewise.charsets import DIGITS, HEX_DIGITS_LOWER
from slicewise.errors import ExpectationError
from slicewise.outcome import ParseOutcome
from slicewise.slices import Slice

ARROW = "->"
DOT = "."


def _starts_with(s: Slice, prefix: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return s.starts_with(prefix)
    if len(s) < len(prefix):
        return False
    return str(s.substring(0, len(prefix))).lower() == prefix.lower()


def _ends_with(s: Slice, suffix: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return s.ends_with(suffix)
    if len(s) < len(suffix):
        return False
    return str(s.substring(len(s) - len(suffix))).lower() == suffix.lower()


def check_string_starts(
    s: Slice, prefix: str, case_sensitive: bool = True
) -> ParseOutcome[bool]:
    """True with the prefix consumed, or False with the slice unchanged."""
    if _starts_with(s, prefix, case_sensitive):
        return ParseOutcome(s.substring(len(prefix)), True)
    return ParseOutcome(s, False)


def ensure_string_starts(s: Slice, prefix: str) -> ParseOutcome[bool]:
    """Like check_string_starts, but a mismatch raises ExpectationError."""
    result = check_string_starts(s, prefix)
    if result.value:
        return result
    raise ExpectationError(f"string to start with '{prefix}'", str(s))


def peek_starts_with(s: Slice, prefix: str, case_sensitive: bool = True) -> ParseOutcome[bool]:
    """Test for prefix without consuming anything, whatever the answer."""
    return ParseOutcome(s, _starts_with(s, prefix, case_sensitive))


def parse_string(s: Slice, prefix: str) -> ParseOutcome[str]:
    """Consume prefix and return it; a mismatch raises ExpectationError."""
    if not s.starts_with(prefix):
        raise ExpectationError(f"string to start with '{prefix}'", str(s))
    return ParseOutcome(s.substring(len(prefix)), prefix)


def check_string_ends(
    s: Slice, suffix: str, case_sensitive: bool = True
) -> ParseOutcome[bool]:
    """True with the suffix removed from the end, or False with the slice unchanged."""
    if _ends_with(s, suffix, case_sensitive):
        return ParseOutcome(s.substring(0, len(s) - len(suffix)), True)
    return ParseOutcome(s, False)


def check_string_ends_strict(s: Slice, suffix: str) -> ParseOutcome[bool]:
    result = check_string_ends(s, suffix)
    if result.value:
        return result
    raise ExpectationError(f"string to end with '{suffix}'", str(s))


def check_arrow(s: Slice) -> ParseOutcome[str]:
    """Consume a member-access operator, returning "->" or ".".

    Raises:
        ExpectationError: If the slice starts with neither
    """
    for token in (ARROW, DOT):
        if s.starts_with(token):
            return ParseOutcome(s.substring(len(token)), token)
    raise ExpectationError(f"string to start with either {ARROW} or {DOT}", str(s))


def check_character(s: Slice, characters: Collection[str]) -> ParseOutcome[str | None]:
    """Consume the first character if it belongs to characters, else None."""
    if s.is_empty():
        return ParseOutcome(s, None)
    first = s.first_char()
    if first not in characters:
        return ParseOutcome(s, None)
    return ParseOutcome(s.substring(1), first)


def check_digit(s: Slice) -> ParseOutcome[str | None]:
    return check_character(s, DIGITS)


def check_hex_digit(s: Slice) -> ParseOutcome[str | None]:
    """Consume one lower-case hex digit."""
    return check_character(s, HEX_DIGITS_LOWER)


def parse_remaining(s: Slice) -> ParseOutcome[str]:
    """Consume everything that is left."""
    text, rest = s.clear()
    return ParseOutcome(rest, text)
