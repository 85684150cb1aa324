"""
slicewise: zero-copy string slicing parsers and a comment scanner

Parsers are pure functions over immutable Slice views of a string; a
Cursor strings them together over one input. The comments package applies
line rules to C-family source to pull out comments and pragmas.

Quick Start:
    >>> from slicewise import Cursor, parse_nested, check_arrow, parse_word
    >>> cursor = Cursor("(int a, int b) -> result")
    >>> cursor.apply(parse_nested, "(", ")")
    'int a, int b'
    >>> cursor.apply(check_arrow)
    '->'
    >>> cursor.apply(parse_word)
    'result'

    >>> from slicewise import scan_comments
    >>> [u.text for u in scan_comments("x = 1; /* one */")]
    ['one']

Installation:
    pip install slicewise            # zero runtime dependencies
"""

from slicewise.comments import (
    BlockCommentRule,
    CommentScanner,
    InlineCommentRule,
    LexicalUnit,
    LexicalUnitKind,
    LineRule,
    PragmaMacroRule,
    PragmaRule,
    scan_comments,
)
from slicewise.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from slicewise.cursor import Cursor
from slicewise.errors import (
    CursorNotEmptyError,
    ExpectationError,
    LiteralDecodeError,
    ParseError,
    SliceBoundsError,
    SlicewiseError,
    UnbalancedDelimiterError,
    UnterminatedCommentError,
)
from slicewise.outcome import ParseOutcome, as_optional
from slicewise.parsers import (
    check_arrow,
    check_character,
    check_digit,
    check_enum,
    check_hex_digit,
    check_last_string,
    check_string_ends,
    check_string_ends_strict,
    check_string_starts,
    check_word,
    decode_integer,
    ensure_string_starts,
    ensure_word,
    has_word,
    parse_decoded_word,
    parse_double_quoted_string,
    parse_elements,
    parse_enum,
    parse_hex,
    parse_int,
    parse_nested,
    parse_parenthesis,
    parse_primes,
    parse_primes_separated_by_string,
    parse_remaining,
    parse_string,
    parse_word,
    peek_starts_with,
    reverse_hex,
    reverse_nested,
)
from slicewise.slices import Slice
from slicewise.worker import Worker, bind

__version__ = "0.1.0"

__all__ = [
    # Core
    "Cursor",
    "ParseOutcome",
    "Slice",
    "Worker",
    "as_optional",
    "bind",
    # Parsers
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
    # Comments
    "BlockCommentRule",
    "CommentScanner",
    "InlineCommentRule",
    "LexicalUnit",
    "LexicalUnitKind",
    "LineRule",
    "PragmaMacroRule",
    "PragmaRule",
    "scan_comments",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "CursorNotEmptyError",
    "ExpectationError",
    "LiteralDecodeError",
    "ParseError",
    "SliceBoundsError",
    "SlicewiseError",
    "UnbalancedDelimiterError",
    "UnterminatedCommentError",
    "__version__",
]
