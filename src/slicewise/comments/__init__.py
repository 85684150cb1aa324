"""Comment and pragma extraction for C-family source.

comments/
├── units.py     # LexicalUnit, LexicalUnitKind
├── rules/       # LineRule protocol and the built-in rules
└── scanner.py   # CommentScanner, scan_comments
"""

from slicewise.comments.rules import (
    BlockCommentRule,
    InlineCommentRule,
    LineRule,
    PragmaMacroRule,
    PragmaRule,
)
from slicewise.comments.scanner import CommentScanner, apply_rules, default_rules, scan_comments
from slicewise.comments.units import LexicalUnit, LexicalUnitKind

__all__ = [
    "BlockCommentRule",
    "CommentScanner",
    "InlineCommentRule",
    "LexicalUnit",
    "LexicalUnitKind",
    "LineRule",
    "PragmaMacroRule",
    "PragmaRule",
    "apply_rules",
    "default_rules",
    "scan_comments",
]
