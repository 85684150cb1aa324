"""Primitive parsers.

Every parser here is a Worker: a pure function taking a Slice (plus
constant parameters) and returning a ParseOutcome. They compose directly or
through a Cursor.

Modules:
- words: parse_word, check_word, check_last_string, has_word, ensure_word
- delimiters: parse_nested, reverse_nested, quoted strings and lists
- numbers: parse_int, parse_hex, reverse_hex, decode_integer
- prefixes: check_string_starts/ends, ensure_string_starts, check_arrow, characters
- enums: check_enum, parse_enum, parse_elements
"""

from slicewise.parsers.delimiters import (
    parse_double_quoted_string,
    parse_nested,
    parse_parenthesis,
    parse_primes,
    parse_primes_separated_by_string,
    reverse_nested,
)
from slicewise.parsers.enums import check_enum, parse_elements, parse_enum
from slicewise.parsers.numbers import (
    decode_integer,
    parse_decoded_word,
    parse_hex,
    parse_int,
    reverse_hex,
)
from slicewise.parsers.prefixes import (
    check_arrow,
    check_character,
    check_digit,
    check_hex_digit,
    check_string_ends,
    check_string_ends_strict,
    check_string_starts,
    ensure_string_starts,
    parse_remaining,
    parse_string,
    peek_starts_with,
)
from slicewise.parsers.words import (
    check_last_string,
    check_word,
    ensure_word,
    has_word,
    parse_word,
)

__all__ = [
    "check_arrow",
    "check_character",
    "check_digit",
    "check_enum",
    "check_hex_digit",
    "check_last_string",
    "check_string_ends",
    "check_string_ends_strict",
    "check_string_starts",
    "check_word",
    "decode_integer",
    "ensure_string_starts",
    "ensure_word",
    "has_word",
    "parse_decoded_word",
    "parse_double_quoted_string",
    "parse_elements",
    "parse_enum",
    "parse_hex",
    "parse_int",
    "parse_nested",
    "parse_parenthesis",
    "parse_primes",
    "parse_primes_separated_by_string",
    "parse_remaining",
    "parse_string",
    "parse_word",
    "peek_starts_with",
    "reverse_hex",
    "reverse_nested",
]
