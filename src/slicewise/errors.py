"""Exception classes for slicewise.

Provides standardized exceptions for error handling throughout slicewise.

Predicate mismatches never raise: they return a falsy value and the input
slice unchanged. Everything here signals a format violation on input that
did match, and the caller must not try to recover a partial value.
"""

from __future__ import annotations


class SlicewiseError(Exception):
    """Base exception for all slicewise errors.

    Subclass this for specific error categories.
    """

    pass


class SliceBoundsError(SlicewiseError, IndexError):
    """A slice operation stepped outside the bounds of its view."""

    pass


class UnbalancedDelimiterError(SliceBoundsError):
    """A nested structure ran off the end of the slice before closing.

    Raised by parse_nested and reverse_nested once the opening delimiter
    has been found but its matching partner never appears.
    """

    def __init__(self, open_delim: str, close_delim: str, text: str) -> None:
        """Initialize with the delimiter pair and the scanned text.

        Args:
            open_delim: Opening delimiter
            close_delim: Closing delimiter
            text: Content of the slice that was scanned
        """
        self.open_delim = open_delim
        self.close_delim = close_delim
        self.text = text
        super().__init__(
            f"Unbalanced delimiters '{open_delim}'...'{close_delim}' in '{text}'"
        )


class ParseError(SlicewiseError):
    """Error during parsing.

    Raised when a parser encounters input that matched its entry condition
    but is malformed past that point.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ExpectationError(ParseError):
    """Input did not start (or end) with what the parser required."""

    def __init__(self, expected: str, found: str) -> None:
        """Initialize with what was expected and what was found.

        Args:
            expected: Description of the required text
            found: The text actually present
        """
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected}, instead found '{found}'")


class LiteralDecodeError(ParseError, ValueError):
    """A numeric literal could not be decoded."""

    def __init__(self, literal: str, reason: str = "malformed literal") -> None:
        self.literal = literal
        super().__init__(f"Could not decode '{literal}': {reason}")


class CursorNotEmptyError(ParseError):
    """A cursor still holds unconsumed content."""

    def __init__(self, remaining: str) -> None:
        self.remaining = remaining
        super().__init__(f"Cursor not empty, remaining content: '{remaining}'")


class UnterminatedCommentError(ParseError):
    """A block comment reached the end of input without its closing marker."""

    def __init__(
        self,
        close_marker: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.close_marker = close_marker
        super().__init__(
            f"Unterminated comment: could not find closing '{close_marker}'",
            lineno=lineno,
            source_file=source_file,
        )
