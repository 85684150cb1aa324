"""Line rules for the comment scanner.

rules/
├── protocol.py   # LineRule protocol
├── inline.py     # // comments
├── block.py      # /* */ comments (multi-line)
└── pragma.py     # #pragma (backslash continuation) and _Pragma(...)
"""

from slicewise.comments.rules.block import BlockCommentRule
from slicewise.comments.rules.inline import InlineCommentRule
from slicewise.comments.rules.pragma import PragmaMacroRule, PragmaRule
from slicewise.comments.rules.protocol import LineRule

__all__ = [
    "BlockCommentRule",
    "InlineCommentRule",
    "LineRule",
    "PragmaMacroRule",
    "PragmaRule",
]
