"""Enum-valued word parsers.

A word maps to a member of an Enum class first by the member's string
value, then by member name (the word upper-cased, since member names are
upper case by convention).

Example:
    >>> class Privacy(Enum):
    ...     PUBLIC = "public"
    ...     PRIVATE = "private"
    >>> parse_enum(Slice.of("private int x"), Privacy).value
    <Privacy.PRIVATE: 'private'>
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from slicewise.errors import ExpectationError
from slicewise.outcome import ParseOutcome
from slicewise.parsers.words import parse_word
from slicewise.slices import Slice


def _lookup[E: Enum](enum_cls: type[E], word: str) -> E | None:
    for member in enum_cls:
        if isinstance(member.value, str) and member.value == word:
            return member
    return enum_cls.__members__.get(word.upper())


def check_enum[E: Enum](
    s: Slice, enum_cls: type[E], default: E | None = None
) -> ParseOutcome[E | None]:
    """Consume the first word if it names a member of enum_cls.

    On a mismatch the slice is unchanged and the value is default.
    """
    word = parse_word(s)
    member = _lookup(enum_cls, word.value)
    if member is None:
        return ParseOutcome(s, default)
    return ParseOutcome(word.remainder, member)


def parse_enum[E: Enum](
    s: Slice,
    enum_cls: type[E],
    default: E | None = None,
    custom_mappings: Mapping[str, E] | None = None,
) -> ParseOutcome[E]:
    """Like check_enum, but a word that matches nothing is an error.

    custom_mappings maps extra spellings to members. If neither the enum
    nor the mappings match, default is returned (slice unchanged) when
    given.

    Raises:
        ExpectationError: If nothing matches and there is no default
    """
    word = parse_word(s)
    member = _lookup(enum_cls, word.value)
    if member is None and custom_mappings:
        member = custom_mappings.get(word.value)
    if member is not None:
        return ParseOutcome(word.remainder, member)
    if default is not None:
        return ParseOutcome(s, default)
    names = ", ".join(m.name for m in enum_cls)
    raise ExpectationError(f"a value of {enum_cls.__name__} ({names})", word.value)


def parse_elements[E: Enum](s: Slice, enum_cls: type[E]) -> ParseOutcome[list[E]]:
    """Consume consecutive space-separated members of enum_cls.

    Stops at the first word that is not a member, or at a match that consumes
    nothing (a member whose value is ""); that word and everything after it
    are left in the remainder.
    """
    elements: list[E] = []
    current = s
    while True:
        candidate = current.trim() if elements else current
        element = check_enum(candidate, enum_cls)
        if element.value is None or len(element.remainder) == len(candidate):
            return ParseOutcome(current, elements)
        elements.append(element.value)
        current = element.remainder
