"""Character sets and markers shared by the parsers.

Character classes are frozensets (O(1) membership, immutable, built once
at import); single markers are plain strings.

Usage:
    from slicewise.charsets import DIGITS

    if char in DIGITS:  # O(1) lookup
        ...
"""

# Word separator used by the word-oriented parsers. Only the ASCII space:
# tabs and newlines stay inside a word.
WORD_SEPARATOR = " "

DIGITS: frozenset[str] = frozenset("0123456789")

OCTAL_DIGITS: frozenset[str] = frozenset("01234567")

HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# Lower-case hex digits accepted by check_hex_digit
HEX_DIGITS_LOWER: frozenset[str] = frozenset("0123456789abcdef")

HEX_PREFIXES: tuple[str, str] = ("0x", "0X")

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
ESCAPE = "\\"

# Line continuation marker for preprocessor directives
LINE_CONTINUATION = "\\"
