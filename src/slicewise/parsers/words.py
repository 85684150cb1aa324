"""Word-oriented parsers.

A word runs up to the first ASCII space. Tabs and newlines are not
separators, so "a\\tb c" splits into "a\\tb" and " c".

Remainders start AT the separating space rather than after it; a Cursor
with auto-trim (the default) drops it before the next worker runs.
"""

from __future__ import annotations

from slicewise.charsets import WORD_SEPARATOR
from slicewise.errors import ExpectationError
from slicewise.outcome import ParseOutcome
from slicewise.slices import Slice


def _word_end(s: Slice) -> int:
    idx = s.index_of(WORD_SEPARATOR)
    return idx if idx != -1 else len(s)


def parse_word(s: Slice) -> ParseOutcome[str]:
    """Consume everything up to the first space, or the whole slice.

    Example:
        >>> out = parse_word(Slice.of("word remainder"))
        >>> out.value, str(out.remainder)
        ('word', ' remainder')
    """
    word, rest = s.prefix(_word_end(s))
    return ParseOutcome(rest, word)


def has_word(s: Slice, word: str, case_sensitive: bool = True) -> ParseOutcome[bool]:
    """Check whether the first word equals word, consuming it on a match."""
    end = _word_end(s)
    candidate = str(s.substring(0, end))
    if not case_sensitive:
        candidate = candidate.lower()
        word = word.lower()
    if candidate != word:
        return ParseOutcome(s, False)
    return ParseOutcome(s.substring(end), True)


def check_word(s: Slice, word: str) -> ParseOutcome[bool]:
    """Match word only when followed by a space or the end of input.

    "word" matches "word rest" and "word" but not "wordy rest".
    """
    return has_word(s, word)


def ensure_word(s: Slice, word: str) -> ParseOutcome[bool]:
    """Like check_word, but a mismatch raises ExpectationError."""
    result = check_word(s, word)
    if result.value:
        return result
    raise ExpectationError(f"the word '{word}' at the beginning", str(s))


def check_last_string(s: Slice, word: str) -> ParseOutcome[bool]:
    """Match word as the last space-separated token of the slice.

    On a match the remainder is everything before the token, including the
    separating space.
    """
    idx = s.last_index_of(WORD_SEPARATOR)
    start = 0 if idx == -1 else idx + 1
    if not s.substring(start).equals_string(word):
        return ParseOutcome(s, False)
    return ParseOutcome(s.substring(0, start), True)
