"""Numeric literal parsers.

Literals follow the C integer convention:
- "0x" or "0X" prefix: hexadecimal
- "0" followed by more digits: octal
- anything else: decimal

with an optional leading "-". A literal is one word (see parse_word), so
decoding stops at the first space.
"""

from __future__ import annotations

from collections.abc import Callable

from slicewise.charsets import DIGITS, HEX_DIGITS, HEX_PREFIXES, OCTAL_DIGITS, WORD_SEPARATOR
from slicewise.errors import LiteralDecodeError
from slicewise.outcome import ParseOutcome
from slicewise.parsers.words import parse_word
from slicewise.slices import Slice

# (radix name, base, allowed digits)
_HEX = ("hexadecimal", 16, HEX_DIGITS)
_OCTAL = ("octal", 8, OCTAL_DIGITS)
_DECIMAL = ("decimal", 10, DIGITS)


def decode_integer(literal: str) -> int:
    """Decode an integer literal, choosing the radix from its prefix.

    Unlike int(), underscores, surrounding whitespace and a "+" sign are
    rejected.

    Raises:
        LiteralDecodeError: If the literal is malformed

    Example:
        >>> decode_integer("0x1F"), decode_integer("017"), decode_integer("-42")
        (31, 15, -42)
    """
    negative = literal.startswith("-")
    body = literal[1:] if negative else literal
    if not body:
        raise LiteralDecodeError(literal, "missing digits")

    if body.startswith(HEX_PREFIXES):
        radix, base, allowed = _HEX
        digits = body[2:]
    elif len(body) > 1 and body[0] == "0":
        radix, base, allowed = _OCTAL
        digits = body[1:]
    else:
        radix, base, allowed = _DECIMAL
        digits = body

    if not digits:
        raise LiteralDecodeError(literal, f"missing {radix} digits")
    for char in digits:
        if char not in allowed:
            raise LiteralDecodeError(literal, f"invalid {radix} digit '{char}'")

    value = int(digits, base)
    return -value if negative else value


def parse_decoded_word[T](
    s: Slice, decoder: Callable[[str], T], empty_value: T
) -> ParseOutcome[T]:
    """Parse one word and decode it; an empty word yields empty_value."""
    word = parse_word(s)
    if not word.value:
        return ParseOutcome(word.remainder, empty_value)
    return ParseOutcome(word.remainder, decoder(word.value))


def parse_int(s: Slice) -> ParseOutcome[int]:
    """Parse a decimal, hexadecimal or octal integer word.

    An empty word (the slice is empty or starts with a space) yields 0
    rather than failing.

    Raises:
        LiteralDecodeError: If the word is not a valid literal
    """
    return parse_decoded_word(s, decode_integer, 0)


def parse_hex(s: Slice) -> ParseOutcome[int]:
    """Parse a "0x"-prefixed hexadecimal word.

    Returns -1 and the slice unchanged if the prefix is missing.

    Raises:
        LiteralDecodeError: If the prefix is present but the digits are malformed

    Example:
        >>> out = parse_hex(Slice.of("0xFF tail"))
        >>> out.value, str(out.remainder)
        (255, ' tail')
    """
    if not s.starts_with(HEX_PREFIXES[0]) and not s.starts_with(HEX_PREFIXES[1]):
        return ParseOutcome(s, -1)
    return parse_decoded_word(s, decode_integer, 0)


def reverse_hex(s: Slice) -> ParseOutcome[int]:
    """Parse a "0x"-prefixed hexadecimal number from the last word.

    Returns -1 and the slice unchanged if the last word has no hex prefix.
    Otherwise the remainder is everything before the separating space.
    """
    idx = s.last_index_of(WORD_SEPARATOR)
    word_start = idx + 1
    word = s.substring(word_start)
    if not word.starts_with(HEX_PREFIXES[0]) and not word.starts_with(HEX_PREFIXES[1]):
        return ParseOutcome(s, -1)
    return ParseOutcome(s.substring(0, max(idx, 0)), decode_integer(str(word)))
